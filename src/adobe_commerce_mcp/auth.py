"""
Authentication strategies for the Adobe Commerce REST API.

Two mutually exclusive strategies are supported:
- OAuth 1.0a request signing (HMAC-SHA256), computed per request
- Adobe IMS client-credentials bearer token, cached until shortly before expiry
"""

import base64
import hashlib
import hmac
import logging
import secrets
import time
from dataclasses import dataclass, field
from typing import Callable, Literal
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

import requests

from adobe_commerce_mcp.errors import ConfigurationError, TokenExchangeError

logger = logging.getLogger(__name__)

DEFAULT_IMS_SCOPES = ("AdobeID", "read_organizations", "openid")
DEFAULT_IMS_HOST = "ims-na1.adobelogin.com"

# Seconds subtracted from the IMS expires_in value
TOKEN_EXPIRY_MARGIN = 60


# =============================================================================
# Configuration Variants
# =============================================================================


@dataclass(frozen=True)
class OAuth1aConfig:
    """Credentials of an Adobe Commerce integration (Admin > System > Integrations)."""

    consumer_key: str
    consumer_secret: str
    access_token: str
    access_token_secret: str
    type: Literal["oauth1a"] = field(default="oauth1a", init=False)

    def validate(self) -> None:
        missing = [
            name
            for name in (
                "consumer_key",
                "consumer_secret",
                "access_token",
                "access_token_secret",
            )
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"OAuth 1.0a configuration is missing: {', '.join(missing)}"
            )


@dataclass(frozen=True)
class ImsConfig:
    """Adobe IMS server-to-server OAuth credentials."""

    client_id: str
    client_secret: str
    scopes: tuple[str, ...] = DEFAULT_IMS_SCOPES
    host: str | None = None
    type: Literal["ims"] = field(default="ims", init=False)

    def validate(self) -> None:
        missing = [
            name for name in ("client_id", "client_secret") if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"IMS configuration is missing: {', '.join(missing)}"
            )

    @property
    def token_url(self) -> str:
        host = (self.host or DEFAULT_IMS_HOST).rstrip("/")
        if not host.startswith(("http://", "https://")):
            host = f"https://{host}"
        return f"{host}/ims/token/v3"


AuthConfig = OAuth1aConfig | ImsConfig


# =============================================================================
# OAuth 1.0a
# =============================================================================


def percent_encode(value: str) -> str:
    """RFC 3986 percent-encoding as required by RFC 5849 section 3.6."""
    return quote(str(value), safe="~")


class OAuth1aSigner:
    """Computes OAuth 1.0a Authorization headers with HMAC-SHA256."""

    SIGNATURE_METHOD = "HMAC-SHA256"

    def __init__(
        self,
        config: OAuth1aConfig,
        clock: Callable[[], float] = time.time,
        nonce_factory: Callable[[], str] | None = None,
    ):
        config.validate()
        self._config = config
        self._clock = clock
        self._nonce_factory = nonce_factory or (lambda: secrets.token_hex(16))

    def _oauth_params(self) -> dict[str, str]:
        return {
            "oauth_consumer_key": self._config.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": self.SIGNATURE_METHOD,
            "oauth_timestamp": str(int(self._clock())),
            "oauth_token": self._config.access_token,
            "oauth_version": "1.0",
        }

    @staticmethod
    def base_string(method: str, url: str, params: dict[str, str]) -> str:
        """Build the signature base string for a request."""
        parts = urlsplit(url)
        base_url = urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path, "", ""))

        pairs = list(params.items()) + parse_qsl(parts.query, keep_blank_values=True)
        normalized = "&".join(
            f"{k}={v}"
            for k, v in sorted(
                (percent_encode(k), percent_encode(v)) for k, v in pairs
            )
        )
        return "&".join(
            [method.upper(), percent_encode(base_url), percent_encode(normalized)]
        )

    def sign(self, base_string: str) -> str:
        key = (
            f"{percent_encode(self._config.consumer_secret)}"
            f"&{percent_encode(self._config.access_token_secret)}"
        )
        digest = hmac.new(
            key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha256
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    def headers_for(self, method: str, url: str) -> dict[str, str]:
        """Return the Authorization header for one specific request."""
        params = self._oauth_params()
        params["oauth_signature"] = self.sign(self.base_string(method, url, params))
        header = ", ".join(
            f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(params.items())
        )
        return {"Authorization": f"OAuth {header}"}


# =============================================================================
# Adobe IMS
# =============================================================================


@dataclass
class CachedToken:
    """An IMS access token and the time (epoch seconds) it is considered expired."""

    value: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class ImsTokenProvider:
    """Exchanges client credentials for an IMS bearer token and caches it."""

    def __init__(
        self,
        config: ImsConfig,
        session: requests.Session | None = None,
        clock: Callable[[], float] = time.time,
    ):
        config.validate()
        self._config = config
        self._session = session or requests.Session()
        self._clock = clock
        self.token: CachedToken | None = None

    def _fetch_token(self) -> CachedToken:
        scopes = ",".join(self._config.scopes or DEFAULT_IMS_SCOPES)
        logger.info("Requesting IMS access token (scopes: %s)", scopes)
        try:
            response = self._session.post(
                self._config.token_url,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._config.client_id,
                    "client_secret": self._config.client_secret,
                    "scope": scopes,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
            response.raise_for_status()
            data = response.json()
            value = data["access_token"]
            expires_in = int(data.get("expires_in", 86400))
        except requests.HTTPError as e:
            body = response_body(e.response)
            raise TokenExchangeError(f"IMS token exchange failed: {e}", body) from e
        except (requests.RequestException, KeyError, ValueError) as e:
            raise TokenExchangeError(f"IMS token exchange failed: {e}") from e

        return CachedToken(
            value=value,
            expires_at=self._clock() + expires_in - TOKEN_EXPIRY_MARGIN,
        )

    def get_token(self) -> str:
        """Return a valid token, refreshing it first if missing or expired."""
        if self.token is None or self.token.is_expired(self._clock()):
            self.token = self._fetch_token()
        return self.token.value

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.get_token()}"}


def response_body(response: requests.Response | None):
    """Parsed JSON body of a response, its text, or None."""
    if response is None or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
