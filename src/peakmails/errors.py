"""
Error classes for Peakmails Python SDK.

Every error raised by the SDK derives from PeakmailsError.
"""

from typing import Any, Optional


class PeakmailsError(Exception):
    """Base exception class for Peakmails SDK."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[Any] = None):
        """Initialize Peakmails error.

        Args:
            message: Error message
            status_code: HTTP status code (optional)
            response: Full error response from API (optional)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class ConfigurationError(PeakmailsError):
    """Invalid or missing client options."""

    def __init__(self, message: str):
        """Initialize configuration error.

        Args:
            message: Error message
        """
        super().__init__(message)


class ValidationError(PeakmailsError):
    """Invalid arguments passed to an operation."""

    def __init__(self, message: str):
        """Initialize validation error.

        Args:
            message: Error message
        """
        super().__init__(message)


class OriginUnavailableError(PeakmailsError):
    """No trusted or caller origin could be resolved for signing."""

    def __init__(self, message: str = "No origin available to sign the request"):
        """Initialize origin unavailable error.

        Args:
            message: Error message
        """
        super().__init__(message)


class UpstreamApiError(PeakmailsError):
    """API responded with a non-success status."""

    def __init__(self, status_code: int, response: Any):
        """Initialize upstream API error.

        Args:
            status_code: HTTP status code
            response: Parsed error body (dict) or raw text
        """
        message = None
        if isinstance(response, dict):
            message = response.get('message') or response.get('error')
        elif isinstance(response, str) and response:
            message = response
        if not message:
            message = f'HTTP {status_code}'
        super().__init__(str(message), status_code, response)

    def __str__(self) -> str:
        return f'Peakmails API Error: {self.status_code} - {self.message}'


class TransportError(PeakmailsError):
    """Request was sent but no response was received (connection, DNS, timeout)."""

    def __init__(self, message: str = "No response received from the server"):
        """Initialize transport error.

        Args:
            message: Error message
        """
        super().__init__(message)


class UnexpectedClientError(PeakmailsError):
    """Any other failure while building or dispatching a request."""

    def __init__(self, message: str):
        """Initialize unexpected client error.

        Args:
            message: Error message
        """
        super().__init__(message)
