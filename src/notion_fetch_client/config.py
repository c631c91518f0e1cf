"""
Configuration models and validation for notion-fetch-client.
"""
import os
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, SecretStr, field_validator

from .core.transport import HttpxTransport, Transport
from .errors import NotionConfigError

# Constants
DEFAULT_BASE_URL = "https://api.notion.com"
DEFAULT_NOTION_VERSION = "2022-06-28"
DEFAULT_TIMEOUT_MS = 60000
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_ON_RATE_LIMIT = True
DEFAULT_CONTENT_TYPE = "application/json"
API_VERSION_PREFIX = "/v1"

ENV_AUTH = ["NOTION_TOKEN", "NOTION_API_KEY"]
ENV_BASE_URL = "NOTION_BASE_URL"
ENV_NOTION_VERSION = "NOTION_VERSION"
ENV_TIMEOUT_MS = "NOTION_TIMEOUT_MS"
ENV_MAX_RETRIES = "NOTION_MAX_RETRIES"
ENV_RETRY_ON_RATE_LIMIT = "NOTION_RETRY_ON_RATE_LIMIT"


class ClientConfig(BaseModel):
    """Client configuration. Immutable once constructed."""
    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    auth: SecretStr
    base_url: str = DEFAULT_BASE_URL
    notion_version: str = DEFAULT_NOTION_VERSION
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    retry_on_rate_limit: bool = DEFAULT_RETRY_ON_RATE_LIMIT

    # Injected transport; defaults to HttpxTransport
    transport: Optional[Any] = None

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("auth")
    @classmethod
    def validate_auth(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("auth must be a non-empty integration token")
        return v

    @field_validator("transport")
    @classmethod
    def validate_transport(cls, v: Any) -> Any:
        if v is not None and not callable(v):
            raise ValueError("transport must be an async callable")
        return v

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """
        Build a config from keyword arguments, falling back to environment
        variables and then to defaults:
        1. Direct argument (if not None)
        2. Environment variables
        3. Default value
        """
        auth = _resolve(overrides.pop("auth", None), ENV_AUTH, None)
        if not auth:
            raise NotionConfigError(
                f"Missing Notion credential. Tried env vars: {', '.join(ENV_AUTH)}"
            )
        return cls(
            auth=auth,
            base_url=_resolve(overrides.pop("base_url", None), ENV_BASE_URL, DEFAULT_BASE_URL),
            notion_version=_resolve(
                overrides.pop("notion_version", None), ENV_NOTION_VERSION, DEFAULT_NOTION_VERSION
            ),
            timeout_ms=_resolve_int(overrides.pop("timeout_ms", None), ENV_TIMEOUT_MS, DEFAULT_TIMEOUT_MS),
            max_retries=_resolve_int(
                overrides.pop("max_retries", None), ENV_MAX_RETRIES, DEFAULT_MAX_RETRIES
            ),
            retry_on_rate_limit=_resolve_bool(
                overrides.pop("retry_on_rate_limit", None),
                ENV_RETRY_ON_RATE_LIMIT,
                DEFAULT_RETRY_ON_RATE_LIMIT,
            ),
            **overrides,
        )


def _lookup_env(env_keys: Union[str, List[str]]) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(name, value)`` of the first set variable in ``env_keys``."""
    if isinstance(env_keys, str):
        env_keys = [env_keys]
    for key in env_keys:
        val = os.getenv(key)
        if val is not None:
            return key, val
    return None, None


def _resolve(arg: Any, env_keys: Union[str, List[str]], default: Any) -> Any:
    if arg is not None:
        return arg
    _, val = _lookup_env(env_keys)
    return default if val is None else val


def _resolve_int(arg: Any, env_keys: Union[str, List[str]], default: int) -> Any:
    # Direct arguments are left to the model's own validation
    if arg is not None:
        return arg
    key, val = _lookup_env(env_keys)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError as e:
        raise NotionConfigError(f"{key} must be an integer (got {val!r})") from e


def _resolve_bool(arg: Any, env_keys: Union[str, List[str]], default: bool) -> bool:
    val = _resolve(arg, env_keys, default)
    if isinstance(val, str):
        return val.strip().lower() in ("true", "1", "yes", "on")
    return bool(val)


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully resolved configuration ready for usage."""
    auth: SecretStr
    base_url: str
    api_url: str
    notion_version: str
    timeout_ms: int
    max_retries: int
    retry_on_rate_limit: bool
    transport: Transport
    owns_transport: bool

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Apply defaults and return resolved config."""
    transport = config.transport
    owns_transport = transport is None
    if transport is None:
        transport = HttpxTransport(timeout_seconds=config.timeout_ms / 1000)
    return ResolvedConfig(
        auth=config.auth,
        base_url=config.base_url,
        api_url=f"{config.base_url}{API_VERSION_PREFIX}",
        notion_version=config.notion_version,
        timeout_ms=config.timeout_ms,
        max_retries=config.max_retries,
        retry_on_rate_limit=config.retry_on_rate_limit,
        transport=transport,
        owns_transport=owns_transport,
    )
