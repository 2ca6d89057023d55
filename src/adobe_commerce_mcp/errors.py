"""
Error types raised by the Adobe Commerce client.

The client and the authentication resolver raise these; the resource
functions in ``adobe_commerce_mcp.api`` catch them and convert them into
``ApiResponse`` envelopes.
"""

from typing import Any


class AdobeCommerceError(Exception):
    """Base class for all Adobe Commerce client errors."""


class ConfigurationError(AdobeCommerceError):
    """Required credentials or settings are missing or invalid."""


class RequestError(AdobeCommerceError):
    """A request could not be completed."""

    def __init__(self, message: str, response_body: Any = None):
        super().__init__(message)
        self.message = message
        self.response_body = response_body

    @property
    def has_body(self) -> bool:
        """True when the upstream response carried a body worth reporting."""
        return self.response_body not in (None, "", b"")


class TransportError(RequestError):
    """Connection, timeout, or decoding failure."""


class ApiError(RequestError):
    """The API answered with an HTTP error status."""

    def __init__(self, status_code: int, response_body: Any = None):
        super().__init__(
            f"Request failed with status code {status_code}", response_body
        )
        self.status_code = status_code


class TokenExchangeError(RequestError):
    """The IMS client-credentials exchange failed."""
