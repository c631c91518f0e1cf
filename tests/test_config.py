"""
Tests for ClientConfig and resolve_config.
"""
import pytest
from pydantic import ValidationError

from notion_fetch_client.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    resolve_config,
)
from notion_fetch_client.core.transport import HttpxTransport
from notion_fetch_client.errors import NotionConfigError


def test_defaults():
    config = ClientConfig(auth="secret_token")
    assert config.base_url == DEFAULT_BASE_URL
    assert config.notion_version == "2022-06-28"
    assert config.timeout_ms == 60000
    assert config.max_retries == 3
    assert config.retry_on_rate_limit is True
    assert config.transport is None


def test_auth_is_secret():
    config = ClientConfig(auth="secret_token")
    assert "secret_token" not in repr(config)
    assert config.auth.get_secret_value() == "secret_token"


def test_config_is_immutable():
    config = ClientConfig(auth="secret_token")
    with pytest.raises(ValidationError):
        config.max_retries = 10


@pytest.mark.parametrize("options", [
    {"base_url": "ftp://example.com"},
    {"timeout_ms": 0},
    {"max_retries": -1},
    {"auth": "   "},
    {"transport": "not callable"},
])
def test_invalid_config(options):
    with pytest.raises(ValidationError):
        ClientConfig(**{"auth": "secret_token", **options})


def test_base_url_trailing_slash_stripped():
    assert ClientConfig(auth="t", base_url="https://example.com/").base_url == "https://example.com"


def test_resolve_config_builds_default_transport():
    resolved = resolve_config(ClientConfig(auth="secret_token", timeout_ms=2500))
    assert resolved.api_url == "https://api.notion.com/v1"
    assert resolved.timeout_seconds == 2.5
    assert isinstance(resolved.transport, HttpxTransport)
    assert resolved.owns_transport is True


def test_resolve_config_keeps_injected_transport():
    async def transport(method, url, *, headers, content=None):
        raise AssertionError("not called")

    resolved = resolve_config(ClientConfig(auth="secret_token", transport=transport))
    assert resolved.transport is transport
    assert resolved.owns_transport is False


class TestFromEnv:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NOTION_TOKEN", "env_token")
        monkeypatch.setenv("NOTION_BASE_URL", "https://proxy.example.com")
        monkeypatch.setenv("NOTION_TIMEOUT_MS", "1500")
        monkeypatch.setenv("NOTION_MAX_RETRIES", "5")
        monkeypatch.setenv("NOTION_RETRY_ON_RATE_LIMIT", "off")

        config = ClientConfig.from_env()

        assert config.auth.get_secret_value() == "env_token"
        assert config.base_url == "https://proxy.example.com"
        assert config.timeout_ms == 1500
        assert config.max_retries == 5
        assert config.retry_on_rate_limit is False

    def test_arguments_take_priority(self, monkeypatch):
        monkeypatch.setenv("NOTION_TOKEN", "env_token")
        monkeypatch.setenv("NOTION_MAX_RETRIES", "5")
        config = ClientConfig.from_env(auth="arg_token", max_retries=1)
        assert config.auth.get_secret_value() == "arg_token"
        assert config.max_retries == 1

    def test_api_key_fallback(self, monkeypatch):
        monkeypatch.delenv("NOTION_TOKEN", raising=False)
        monkeypatch.setenv("NOTION_API_KEY", "key_token")
        assert ClientConfig.from_env().auth.get_secret_value() == "key_token"

    @pytest.mark.parametrize("name, value", [
        ("NOTION_MAX_RETRIES", "many"),
        ("NOTION_MAX_RETRIES", "2.5"),
        ("NOTION_TIMEOUT_MS", "30s"),
        ("NOTION_TIMEOUT_MS", ""),
    ])
    def test_malformed_int_names_variable(self, monkeypatch, name, value):
        monkeypatch.setenv("NOTION_TOKEN", "env_token")
        monkeypatch.setenv(name, value)
        with pytest.raises(NotionConfigError) as exc_info:
            ClientConfig.from_env()
        assert name in str(exc_info.value)
        assert repr(value) in str(exc_info.value)

    def test_int_whitespace_tolerated(self, monkeypatch):
        monkeypatch.setenv("NOTION_TOKEN", "env_token")
        monkeypatch.setenv("NOTION_TIMEOUT_MS", " 2500 ")
        assert ClientConfig.from_env().timeout_ms == 2500

    def test_malformed_env_ignored_when_argument_given(self, monkeypatch):
        monkeypatch.setenv("NOTION_TOKEN", "env_token")
        monkeypatch.setenv("NOTION_MAX_RETRIES", "many")
        assert ClientConfig.from_env(max_retries=0).max_retries == 0

    def test_missing_credential(self, monkeypatch):
        monkeypatch.delenv("NOTION_TOKEN", raising=False)
        monkeypatch.delenv("NOTION_API_KEY", raising=False)
        with pytest.raises(NotionConfigError):
            ClientConfig.from_env()
