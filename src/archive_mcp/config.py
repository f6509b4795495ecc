"""Server configuration — read once from the environment at startup."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError, field_validator

from archive_mcp.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_PORT = 8000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MODEL_LABEL = "Claude (MCP)"
DEFAULT_SERVER_NAME = "Remote MCP Server"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# ServerConfig field -> environment variable
_ENV_VARS = {
    "base_url": "BASE_URL",
    "port": "PORT",
    "host": "HOST",
    "request_timeout": "MCP_REQUEST_TIMEOUT",
    "model_label": "MCP_MODEL_LABEL",
    "server_name": "MCP_SERVER_NAME",
    "log_level": "LOG_LEVEL",
    "otlp_endpoint": "MCP_OTLP_ENDPOINT",
}


class ServerConfig(BaseModel):
    """Immutable server settings.

    ``base_url`` points at the conversation store; everything else has a
    default. Build it with :meth:`from_env` in the entry point and pass it
    down explicitly.
    """

    model_config = {"frozen": True}

    base_url: str = Field(min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    host: str = DEFAULT_HOST
    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    model_label: str = DEFAULT_MODEL_LABEL
    server_name: str = DEFAULT_SERVER_NAME
    log_level: str = "INFO"
    otlp_endpoint: str | None = None

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build a config from *environ* (defaults to ``os.environ``).

        Raises
        ------
        ConfigError
            If ``BASE_URL`` is unset or any value fails validation.
        """
        env = os.environ if environ is None else environ
        if not env.get("BASE_URL", "").strip():
            msg = "BASE_URL is not set in environment variables."
            raise ConfigError(msg)

        values = {
            field: env[var].strip()
            for field, var in _ENV_VARS.items()
            if env.get(var, "").strip()
        }
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

    @property
    def store_url(self) -> str:
        """Base URL of the conversation store, without a trailing slash."""
        return self.base_url.rstrip("/")
