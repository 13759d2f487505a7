"""Immutable library configuration and its fluent builder."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Self

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notify_dispatch.exceptions import InvalidArgumentError, require_not_none


class NotificationConfig(BaseSettings):
    """Provider properties plus the default retry knobs.

    Built once (usually through :meth:`builder`) and shared by reference
    across every service and channel derived from it.
    """

    model_config = SettingsConfigDict(env_prefix="NOTIFY_", frozen=True)

    properties: dict[str, str] = Field(default_factory=dict)
    retry_attempts: int = Field(default=3, ge=0)
    base_delay_ms: int = Field(default=1000, ge=1)
    log_level: str = "INFO"

    @field_validator("properties", mode="after")
    @classmethod
    def _freeze_properties(cls, value: dict[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def get_property(self, key: str, default: str | None = None) -> str | None:
        return self.properties.get(key, default)

    @classmethod
    def builder(cls) -> "NotificationConfigBuilder":
        return NotificationConfigBuilder()


class NotificationConfigBuilder:
    """Fluent builder for :class:`NotificationConfig`.

    Setters validate immediately so that a bad value is reported where it
    was supplied, not at ``build()`` time.
    """

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}
        self._settings: dict[str, Any] = {}

    def property(self, key: str, value: str) -> Self:
        require_not_none(key, "key")
        require_not_none(value, "value")
        self._properties[key] = value
        return self

    def properties(self, properties: Mapping[str, str]) -> Self:
        require_not_none(properties, "properties")
        for key, value in properties.items():
            self.property(key, value)
        return self

    def retry_attempts(self, retry_attempts: int) -> Self:
        require_not_none(retry_attempts, "retry_attempts")
        if retry_attempts < 0:
            raise InvalidArgumentError(
                f"retry_attempts must be >= 0, got {retry_attempts}"
            )
        self._settings["retry_attempts"] = retry_attempts
        return self

    def base_delay_ms(self, base_delay_ms: int) -> Self:
        require_not_none(base_delay_ms, "base_delay_ms")
        if base_delay_ms < 1:
            raise InvalidArgumentError(
                f"base_delay_ms must be >= 1, got {base_delay_ms}"
            )
        self._settings["base_delay_ms"] = base_delay_ms
        return self

    def log_level(self, log_level: str) -> Self:
        require_not_none(log_level, "log_level")
        self._settings["log_level"] = log_level
        return self

    def build(self) -> NotificationConfig:
        return NotificationConfig(properties=self._properties, **self._settings)
