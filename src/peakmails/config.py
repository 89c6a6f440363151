"""
Client configuration for Peakmails Python SDK.

Options are validated once at construction and kept in an immutable ClientConfig.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .errors import ConfigurationError
from .types.common import OriginProvider

SIGNED_BASE_URL = 'https://api.peakmails.com/v2'
LEGACY_BASE_URL = 'https://api.peakmails.com/v1'


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = field(repr=False)
    domain: str
    base_url: str
    signed: bool
    project_id: Optional[str] = None
    secret_key: Optional[str] = field(default=None, repr=False)
    origin_provider: Optional[OriginProvider] = None
    timeout: Optional[float] = None

    @classmethod
    def from_options(cls, opts: Optional[Mapping[str, Any]], require_project: bool) -> "ClientConfig":
        """Validate SDK options and build a config.

        Args:
            opts: Client options (apiKey, domain, projectId, secretKey, originProvider, timeout)
            require_project: True for the signed, project-scoped profile

        Returns:
            Frozen client configuration

        Raises:
            ConfigurationError: If a required option is missing or malformed
        """
        if opts is None:
            opts = {}
        if not isinstance(opts, Mapping):
            raise ConfigurationError('Invalid options')

        api_key = opts.get('apiKey')
        if not _is_non_empty_str(api_key):
            raise ConfigurationError('Invalid API key')

        domain = opts.get('domain')
        if not _is_non_empty_str(domain):
            raise ConfigurationError('Invalid domain')

        project_id = opts.get('projectId')
        if (require_project or project_id is not None) and not _is_non_empty_str(project_id):
            raise ConfigurationError('Invalid project ID')

        secret_key = opts.get('secretKey')
        if secret_key is not None and not _is_non_empty_str(secret_key):
            raise ConfigurationError('Invalid secret key')

        origin_provider = opts.get('originProvider')
        if origin_provider is not None and not callable(origin_provider):
            raise ConfigurationError('originProvider must be callable')

        timeout = opts.get('timeout')
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
            raise ConfigurationError('timeout must be a positive number')

        return cls(
            api_key=api_key,
            domain=domain,
            base_url=SIGNED_BASE_URL if require_project else LEGACY_BASE_URL,
            signed=require_project,
            project_id=project_id,
            secret_key=secret_key,
            origin_provider=origin_provider,
            timeout=timeout,
        )
