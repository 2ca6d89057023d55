"""
Adobe Commerce REST API client.

This module provides:
- ClientOptions: immutable construction-time configuration
- RequestDescriptor: one outbound request
- AdobeCommerceClient: resolves auth headers per request and dispatches it
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Literal

import requests

from adobe_commerce_mcp.auth import (
    AuthConfig,
    ImsConfig,
    ImsTokenProvider,
    OAuth1aConfig,
    OAuth1aSigner,
    response_body,
)
from adobe_commerce_mcp.errors import ApiError, ConfigurationError, TransportError

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


# =============================================================================
# Request Types
# =============================================================================


@dataclass(frozen=True)
class ClientOptions:
    """Construction-time configuration of an AdobeCommerceClient."""

    url: str
    auth: AuthConfig
    version: str = "V1"
    verify_ssl: bool = True


@dataclass(frozen=True)
class RequestDescriptor:
    """A single outbound request, consumed by the signer and dispatcher."""

    url: str
    method: HttpMethod
    body: Any = None


# =============================================================================
# Adobe Commerce API Client
# =============================================================================


class AdobeCommerceClient:
    """HTTP client for the Adobe Commerce REST API."""

    def __init__(
        self,
        options: ClientOptions,
        session: requests.Session | None = None,
        signer: OAuth1aSigner | None = None,
        token_provider: ImsTokenProvider | None = None,
    ):
        if not options.url:
            raise ConfigurationError("Adobe Commerce base URL is required")

        self._server_url = options.url if options.url.endswith("/") else f"{options.url}/"
        self._api_version = options.version or "V1"
        self._auth_config = options.auth
        self._session = session or requests.Session()
        self._session.verify = options.verify_ssl
        self._signer: OAuth1aSigner | None = None
        self._token_provider: ImsTokenProvider | None = None

        if isinstance(options.auth, OAuth1aConfig):
            self._signer = signer or OAuth1aSigner(options.auth)
        elif isinstance(options.auth, ImsConfig):
            self._token_provider = token_provider or ImsTokenProvider(
                options.auth, session=self._session
            )
        else:
            raise ConfigurationError(
                f"Unsupported auth configuration: {type(options.auth).__name__}"
            )

    @property
    def auth_type(self) -> str:
        return self._auth_config.type

    @property
    def token_provider(self) -> ImsTokenProvider | None:
        return self._token_provider

    def create_url(self, resource_url: str, store_code: str | None = None) -> str:
        """Build the full URL for a resource path, optionally scoped to a store view."""
        if store_code:
            return f"{self._server_url}{store_code}/{self._api_version}{resource_url}"
        return f"{self._server_url}{self._api_version}{resource_url}"

    def auth_headers(self, request: RequestDescriptor) -> dict[str, str]:
        """Resolve authentication headers for one specific request."""
        if self._token_provider is not None:
            return self._token_provider.headers()
        if self._signer is None:
            raise ConfigurationError("OAuth 1.0a is not properly initialized")
        return self._signer.headers_for(request.method, request.url)

    def get(
        self,
        resource_url: str,
        request_token: str = "",
        store_code: str | None = None,
    ) -> Any:
        request = RequestDescriptor(
            url=self.create_url(resource_url, store_code), method="GET"
        )
        return self._api_call(request, request_token)

    def post(
        self,
        resource_url: str,
        data: Any,
        request_token: str = "",
        custom_headers: dict[str, str] | None = None,
        store_code: str | None = None,
    ) -> Any:
        request = RequestDescriptor(
            url=self.create_url(resource_url, store_code), method="POST", body=data
        )
        return self._api_call(request, request_token, custom_headers)

    def put(
        self,
        resource_url: str,
        data: dict[str, Any],
        request_token: str = "",
        custom_headers: dict[str, str] | None = None,
        store_code: str | None = None,
    ) -> Any:
        request = RequestDescriptor(
            url=self.create_url(resource_url, store_code), method="PUT", body=data
        )
        return self._api_call(request, request_token, custom_headers)

    def delete(
        self,
        resource_url: str,
        request_token: str = "",
        store_code: str | None = None,
    ) -> Any:
        request = RequestDescriptor(
            url=self.create_url(resource_url, store_code), method="DELETE"
        )
        return self._api_call(request, request_token)

    def _api_call(
        self,
        request: RequestDescriptor,
        request_token: str = "",
        custom_headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a single request to the Adobe Commerce API."""
        if request_token:
            headers = {"Authorization": f"Bearer {request_token}"}
        else:
            headers = self.auth_headers(request)
        headers.update(custom_headers or {})

        try:
            response = self._session.request(
                request.method,
                request.url,
                headers=headers,
                json=request.body,
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if not response.ok:
            body = response_body(response)
            if body is not None:
                logger.error("Error body %s: %s", request.url, json.dumps(body))
            raise ApiError(response.status_code, body)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("Error body %s: %s", request.url, response.text)
            raise TransportError(f"Invalid JSON response: {e}", response.text) from e
