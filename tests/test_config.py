"""
Unit tests for environment configuration.
"""

from pathlib import Path

import pytest

from adobe_commerce_mcp.auth import DEFAULT_IMS_SCOPES, ImsConfig, OAuth1aConfig
from adobe_commerce_mcp.config import env_flag, load_client_options
from adobe_commerce_mcp.errors import ConfigurationError

OAUTH_ENV = {
    "COMMERCE_BASE_URL": "https://shop.example.com",
    "COMMERCE_CONSUMER_KEY": "ck",
    "COMMERCE_CONSUMER_SECRET": "cs",
    "COMMERCE_ACCESS_TOKEN": "at",
    "COMMERCE_ACCESS_TOKEN_SECRET": "ats",
}

IMS_ENV = {
    "COMMERCE_BASE_URL": "https://shop.example.com/",
    "OAUTH_CLIENT_ID": "client",
    "OAUTH_CLIENT_SECRET": "secret",
}


class TestLoadClientOptions:
    """Tests for load_client_options."""

    def test_missing_base_url(self):
        with pytest.raises(ConfigurationError, match="COMMERCE_BASE_URL environment variable not set"):
            load_client_options({})

    def test_oauth_selected_by_consumer_key(self):
        options = load_client_options(OAUTH_ENV)

        assert options.url == "https://shop.example.com/rest/"
        assert options.auth == OAuth1aConfig(
            consumer_key="ck", consumer_secret="cs", access_token="at", access_token_secret="ats"
        )
        assert options.version == "V1"
        assert options.verify_ssl is True

    def test_incomplete_oauth(self):
        env = {**OAUTH_ENV, "COMMERCE_ACCESS_TOKEN_SECRET": ""}
        with pytest.raises(ConfigurationError, match="access_token_secret"):
            load_client_options(env)

    def test_ims_fallback(self):
        options = load_client_options(IMS_ENV)

        assert options.url == "https://shop.example.com/rest/"
        assert isinstance(options.auth, ImsConfig)
        assert options.auth.scopes == DEFAULT_IMS_SCOPES
        assert options.auth.host is None

    def test_ims_scopes_and_host(self):
        env = {**IMS_ENV, "OAUTH_SCOPES": "AdobeID, openid", "OAUTH_HOST": "ims-eu.example.com"}
        options = load_client_options(env)

        assert options.auth.scopes == ("AdobeID", "openid")
        assert options.auth.token_url == "https://ims-eu.example.com/ims/token/v3"

    def test_incomplete_ims(self):
        with pytest.raises(ConfigurationError, match="client_secret"):
            load_client_options({**IMS_ENV, "OAUTH_CLIENT_SECRET": ""})

    def test_optional_settings(self):
        env = {**OAUTH_ENV, "COMMERCE_API_VERSION": "V2", "COMMERCE_VERIFY_SSL": "false"}
        options = load_client_options(env)

        assert options.version == "V2"
        assert options.verify_ssl is False


class TestEnvFlag:
    """Tests for env_flag."""

    def test_truthy_values(self):
        for value in ("true", "1", "yes", " TRUE "):
            assert env_flag("FLAG", False, {"FLAG": value}) is True

    def test_falsy_values(self):
        assert env_flag("FLAG", True, {"FLAG": "no"}) is False

    def test_default_when_unset_or_empty(self):
        assert env_flag("FLAG", True, {}) is True
        assert env_flag("FLAG", False, {"FLAG": ""}) is False


class TestPackageMetadata:
    """Tests for the packaging metadata in pyproject.toml."""

    def test_project_metadata(self):
        tomllib = pytest.importorskip("tomllib")
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        project = tomllib.loads(pyproject.read_text())["project"]

        assert project["name"] == "adobe-commerce-mcp"
        assert project.get("readme") in (None, "README.md")
        assert "responses" in " ".join(project["optional-dependencies"]["test"])
