# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Process settings resolved once from the environment."""

import re
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from _settings._constants import (
    DEFAULT_GLUETUN_URL,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_QBITTORRENT_URL,
    ENV_GLUETUN_URL,
    ENV_HTTP_TIMEOUT,
    ENV_LOG_LEVEL,
    ENV_PASSWORD,
    ENV_POLL_INTERVAL,
    ENV_QBITTORRENT_URL,
    ENV_USERNAME,
    ENV_VARS,
    MAX_POLL_INTERVAL,
)
from _settings._logging import LogLevel

_DIGITS = re.compile(r"^[0-9]+$")
_UNDEFINED = "is undefined - make sure you're setting your environment variables properly"


class ConfigError(ValueError):
    """Raised when the environment does not yield valid settings."""


class Settings(BaseModel):
    """Immutable process-wide configuration.

    Fields are populated from the environment variable names (aliases) by
    load_settings(), or by field name in code and tests.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str = Field(alias=ENV_USERNAME)
    password: str = Field(alias=ENV_PASSWORD, repr=False)
    poll_interval: int = Field(
        default=DEFAULT_POLL_INTERVAL, alias=ENV_POLL_INTERVAL, ge=0, le=MAX_POLL_INTERVAL
    )
    log_level: LogLevel = Field(default=LogLevel(DEFAULT_LOG_LEVEL), alias=ENV_LOG_LEVEL)
    qbittorrent_url: str = Field(default=DEFAULT_QBITTORRENT_URL, alias=ENV_QBITTORRENT_URL)
    gluetun_url: str = Field(default=DEFAULT_GLUETUN_URL, alias=ENV_GLUETUN_URL)
    http_timeout: int = Field(default=DEFAULT_HTTP_TIMEOUT, alias=ENV_HTTP_TIMEOUT, gt=0)

    @field_validator("username", "password", mode="before")
    @classmethod
    def _not_empty(cls, value: Any) -> Any:
        if isinstance(value, str) and not value:
            raise ValueError(_UNDEFINED)
        return value

    @field_validator("poll_interval", "http_timeout", mode="before")
    @classmethod
    def _digits_only(cls, value: Any) -> Any:
        if isinstance(value, str) and not _DIGITS.match(value):
            raise ValueError("is not a number, but it should be")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: Any) -> Any:
        if isinstance(value, LogLevel):
            return value
        if value not in {level.value for level in LogLevel}:
            raise ValueError(
                f'was set to an invalid value: "{value}". '
                f"Valid values are DEBUG, INFO, and ERROR. Default value is {DEFAULT_LOG_LEVEL}"
            )
        return value

    @field_validator("qbittorrent_url", "gluetun_url", mode="before")
    @classmethod
    def _http_url(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"is not a valid URL: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f'is not a valid http(s) URL: "{value}"')
        return value.rstrip("/")

    def redacted(self) -> dict[str, Any]:
        """Settings as a dict safe to log."""
        data = self.model_dump(mode="json")
        data["password"] = "********"
        return data


def _describe(error: Mapping[str, Any]) -> str:
    """Turn one pydantic error into a line naming the environment variable."""
    name = ".".join(str(part) for part in error["loc"]) or "settings"
    if error["type"] == "missing":
        return f"{name} {_UNDEFINED}"
    if error["type"] == "value_error":
        return f"{name} {error['ctx']['error']}"
    return f"{name} is invalid: {error['msg']}"


def load_settings(environ: Mapping[str, str]) -> Settings:
    """Build Settings from environment variables.

    Raises:
        ConfigError: a required value is missing or any value is invalid.
    """
    # Empty values fall back to the defaults, like unset ones.
    values = {name: environ[name] for name in ENV_VARS if environ.get(name)}
    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        raise ConfigError("; ".join(_describe(error) for error in e.errors())) from e
