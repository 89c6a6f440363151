import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote, urlencode

import requests

from ..config import ClientConfig
from ..errors import (
    OriginUnavailableError,
    PeakmailsError,
    TransportError,
    UnexpectedClientError,
    UpstreamApiError,
)
from .auth import BACKEND_ORIGIN, build_headers, generate_token

logger = logging.getLogger(__name__)


class HTTPClient:
    """Dispatch core shared by the signed and legacy profiles."""

    def __init__(self, config: ClientConfig):
        self.config = config
        self.base_url = config.base_url
        self.timeout = config.timeout

    @property
    def signed(self) -> bool:
        return self.config.signed

    def resolve_origin(self) -> str:
        """Resolve the origin the request is bound to.

        Returns:
            The backend sentinel when a secret key is configured,
            otherwise the origin reported by the configured provider.

        Raises:
            OriginUnavailableError: If neither source yields an origin
        """
        if self.config.secret_key:
            return BACKEND_ORIGIN

        provider = self.config.origin_provider
        if provider is None:
            raise OriginUnavailableError('No secret key configured and no origin provider available')

        try:
            origin = provider()
        except Exception as e:
            raise OriginUnavailableError(f'Origin provider failed: {e}') from e

        if not isinstance(origin, str) or not origin:
            raise OriginUnavailableError('Origin provider returned no origin')
        return origin

    def generate_token(self, origin: str) -> str:
        """Signature token for the configured api key and the given origin."""
        return generate_token(self.config.api_key, origin)

    def _headers(self) -> Dict[str, str]:
        """Build headers for a request, signing it in the signed profile."""
        if not self.signed:
            return build_headers(self.config.api_key, self.config.domain)

        origin = self.resolve_origin()
        return build_headers(
            self.config.api_key,
            self.config.domain,
            project_id=self.config.project_id,
            origin=origin,
            token=self.generate_token(origin),
        )

    async def request(
        self,
        path: str,
        method: str = 'GET',
        body: Optional[Any] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Union[Dict[str, Any], str, None]:
        """
        Make HTTP request to the Peakmails API.

        Args:
            path: Request path (e.g., '/contacts')
            method: HTTP method
            body: Optional JSON request body, ignored for GET
            query: Optional query parameters

        Returns:
            Parsed JSON response, text, or None for 204 responses

        Raises:
            OriginUnavailableError: If a signed request has no origin to bind to
            UpstreamApiError: On non-success responses
            TransportError: If no response was received
            UnexpectedClientError: On any other failure
        """
        headers = self._headers()

        url = f"{self.base_url}{path}"
        if query:
            url += f"?{urlencode(query)}"
        has_body = body is not None and method != 'GET'

        logger.debug("Peakmails %s %s (signed=%s)", method, path, self.signed)
        try:
            response = await asyncio.to_thread(
                requests.request,
                method,
                url,
                headers=headers,
                json=body if has_body else None,
                timeout=self.timeout,
            )
            return self._parse_response(response)
        except PeakmailsError:
            raise
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.debug("Peakmails %s %s: no response (%s)", method, path, e)
            raise TransportError(f'No response received from the server: {e}') from e
        except Exception as e:
            logger.debug("Peakmails %s %s failed: %s", method, path, e)
            raise UnexpectedClientError(str(e)) from e

    def _parse_response(self, response: requests.Response) -> Union[Dict[str, Any], str, None]:
        logger.debug("Peakmails response status %s", response.status_code)

        # Handle 204 No Content
        if response.status_code == 204:
            return None

        content_type = response.headers.get('content-type', '')

        # Handle error responses
        if not response.ok:
            if 'application/json' in content_type:
                try:
                    error_data = response.json()
                except ValueError:
                    error_data = response.text
                raise UpstreamApiError(response.status_code, error_data)
            raise UpstreamApiError(response.status_code, response.text)

        # Parse successful responses
        if 'application/json' in content_type:
            return response.json()
        return response.text

    @staticmethod
    def encode_url_component(component: str) -> str:
        """Encode URL component (similar to encodeURIComponent in JS).

        Args:
            component: String to encode

        Returns:
            URL-encoded string
        """
        return quote(component, safe='')
