import hashlib
from typing import Dict, Optional
from urllib.parse import urlsplit

from ..types.common import OriginProvider

# Origin sent by trusted server-side callers configured with a secret key
BACKEND_ORIGIN = 'backend-implementation'

DOMAIN_HEADER = 'X-Peakmails-Domain'
PROJECT_HEADER = 'X-Peakmails-Project-Id'
ORIGIN_HEADER = 'X-Peakmails-Origin'
TOKEN_HEADER = 'X-Peakmails-Csrf-Token'

# Browsers omit these from location.origin
_DEFAULT_PORTS = {'http': ':80', 'https': ':443'}


def generate_token(api_key: str, origin: str) -> str:
    """
    Derive the request signature token for an origin.

    The token is the hex SHA-256 digest of the api key followed by the origin.
    It carries no nonce or timestamp, so the same pair always yields the same token.
    """
    return hashlib.sha256(f'{api_key}{origin}'.encode('utf-8')).hexdigest()


def build_headers(
    api_key: str,
    domain: str,
    project_id: Optional[str] = None,
    origin: Optional[str] = None,
    token: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build request headers for the Peakmails API.

    Args:
        api_key: API key sent as a bearer token
        domain: account domain sent as X-Peakmails-Domain
        project_id: optional project id sent as X-Peakmails-Project-Id
        origin: optional resolved origin sent as X-Peakmails-Origin
        token: optional signature sent as X-Peakmails-Csrf-Token

    Returns:
        headers dictionary
    """
    headers: Dict[str, str] = {
        'Authorization': f'Bearer {api_key}',
        'Content-Type': 'application/json',
        DOMAIN_HEADER: domain,
    }
    if project_id:
        headers[PROJECT_HEADER] = project_id
    if origin:
        headers[ORIGIN_HEADER] = origin
    if token:
        headers[TOKEN_HEADER] = token
    return headers


def origin_from_url(url: str) -> str:
    """Reduce a page URL to its origin (scheme://host[:port]).

    Raises:
        ValueError: If the URL has no scheme or host
    """
    parts = urlsplit(url)
    host = parts.netloc.rpartition('@')[2].lower()  # drop any userinfo
    if not parts.scheme or not host:
        raise ValueError(f'Cannot derive an origin from {url!r}')
    scheme = parts.scheme.lower()
    default_port = _DEFAULT_PORTS.get(scheme)
    if default_port and host.endswith(default_port):
        host = host[:-len(default_port)]
    return f'{scheme}://{host}'


def static_origin(url: str) -> OriginProvider:
    """Origin provider that always returns the origin of the given URL."""
    origin = origin_from_url(url)
    return lambda: origin
