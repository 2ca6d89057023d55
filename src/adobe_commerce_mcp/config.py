"""
Environment configuration for the Adobe Commerce MCP Server.

Environment parsing is confined to this module and is only called from the
server entry point; the client itself takes an explicit ClientOptions.

For OAuth 1.0a, set:
    COMMERCE_BASE_URL, COMMERCE_CONSUMER_KEY, COMMERCE_CONSUMER_SECRET,
    COMMERCE_ACCESS_TOKEN, COMMERCE_ACCESS_TOKEN_SECRET

For IMS, set:
    COMMERCE_BASE_URL, OAUTH_CLIENT_ID, OAUTH_CLIENT_SECRET,
    [OAUTH_SCOPES], [OAUTH_HOST]

Optional:
    COMMERCE_API_VERSION (default V1), COMMERCE_VERIFY_SSL (default true)
"""

import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from adobe_commerce_mcp.auth import DEFAULT_IMS_SCOPES, ImsConfig, OAuth1aConfig
from adobe_commerce_mcp.client import ClientOptions
from adobe_commerce_mcp.errors import ConfigurationError

# Searched in order; the first existing file wins
ENV_PATHS = [
    Path.cwd() / ".env",
    Path(__file__).parent.parent.parent / ".env",  # workspace/.env
    Path.home() / ".adobe-commerce" / ".env",
]

_TRUTHY = ("true", "1", "yes")


def load_env_files() -> None:
    """Load the first .env file found into the process environment."""
    for env_path in ENV_PATHS:
        if env_path.exists():
            load_dotenv(env_path)
            return
    load_dotenv()


def env_flag(name: str, default: bool, environ: Mapping[str, str] | None = None) -> bool:
    environ = os.environ if environ is None else environ
    value = environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUTHY


def _rest_url(base_url: str) -> str:
    if not base_url.endswith("/"):
        base_url += "/"
    return f"{base_url}rest/"


def load_client_options(environ: Mapping[str, str] | None = None) -> ClientOptions:
    """
    Build ClientOptions from environment variables.

    OAuth 1.0a is selected when COMMERCE_CONSUMER_KEY is set, IMS otherwise.

    Raises:
        ConfigurationError: if the base URL or required credentials are missing
    """
    environ = os.environ if environ is None else environ

    base_url = environ.get("COMMERCE_BASE_URL", "")
    if not base_url:
        raise ConfigurationError(
            "COMMERCE_BASE_URL environment variable not set. "
            "Set it in a .env file or pass it via environment variable."
        )

    if environ.get("COMMERCE_CONSUMER_KEY"):
        auth: OAuth1aConfig | ImsConfig = OAuth1aConfig(
            consumer_key=environ.get("COMMERCE_CONSUMER_KEY", ""),
            consumer_secret=environ.get("COMMERCE_CONSUMER_SECRET", ""),
            access_token=environ.get("COMMERCE_ACCESS_TOKEN", ""),
            access_token_secret=environ.get("COMMERCE_ACCESS_TOKEN_SECRET", ""),
        )
    else:
        scopes = [s.strip() for s in environ.get("OAUTH_SCOPES", "").split(",") if s.strip()]
        auth = ImsConfig(
            client_id=environ.get("OAUTH_CLIENT_ID", ""),
            client_secret=environ.get("OAUTH_CLIENT_SECRET", ""),
            scopes=tuple(scopes) or DEFAULT_IMS_SCOPES,
            host=environ.get("OAUTH_HOST") or None,
        )
    auth.validate()

    return ClientOptions(
        url=_rest_url(base_url),
        auth=auth,
        version=environ.get("COMMERCE_API_VERSION") or "V1",
        verify_ssl=env_flag("COMMERCE_VERIFY_SSL", True, environ),
    )
