import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from notify_dispatch.config import NotificationConfig
from notify_dispatch.exceptions import InvalidArgumentError, NullArgumentError


class TestNotificationConfigDefaults:
    def test_defaults(self) -> None:
        config = NotificationConfig()
        assert config.retry_attempts == 3
        assert config.base_delay_ms == 1000
        assert config.log_level == "INFO"
        assert dict(config.properties) == {}

    def test_from_env(self) -> None:
        env = {
            "NOTIFY_RETRY_ATTEMPTS": "5",
            "NOTIFY_BASE_DELAY_MS": "250",
            "NOTIFY_PROPERTIES": '{"email.from": "ops@example.com"}',
        }
        with patch.dict(os.environ, env, clear=False):
            config = NotificationConfig()
        assert config.retry_attempts == 5
        assert config.base_delay_ms == 250
        assert config.get_property("email.from") == "ops@example.com"

    def test_negative_retry_attempts_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NotificationConfig(retry_attempts=-1)

    def test_zero_base_delay_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NotificationConfig(base_delay_ms=0)

    def test_invalid_env_value_rejected(self) -> None:
        with patch.dict(os.environ, {"NOTIFY_BASE_DELAY_MS": "soon"}, clear=False):
            with pytest.raises(ValidationError):
                NotificationConfig()


class TestNotificationConfigImmutability:
    def test_fields_are_frozen(self) -> None:
        config = NotificationConfig()
        with pytest.raises(ValidationError):
            config.retry_attempts = 7  # type: ignore[misc]

    def test_properties_are_read_only(self) -> None:
        config = NotificationConfig.builder().property("sms.provider", "twilio").build()
        with pytest.raises(TypeError):
            config.properties["sms.provider"] = "sns"  # type: ignore[index]

    def test_builder_changes_do_not_leak_into_built_config(self) -> None:
        builder = NotificationConfig.builder().property("a", "1")
        config = builder.build()
        builder.property("b", "2")
        assert config.get_property("b") is None


class TestGetProperty:
    def test_returns_value(self) -> None:
        config = NotificationConfig.builder().property("email.from", "a@b.c").build()
        assert config.get_property("email.from") == "a@b.c"

    def test_missing_key_returns_default(self) -> None:
        config = NotificationConfig()
        assert config.get_property("email.from") is None
        assert config.get_property("email.from", "unconfigured") == "unconfigured"


class TestNotificationConfigBuilder:
    def test_fluent_build(self) -> None:
        config = (
            NotificationConfig.builder()
            .property("sms.provider", "twilio")
            .properties({"push.provider": "fcm", "push.project.id": "demo"})
            .retry_attempts(0)
            .base_delay_ms(1)
            .log_level("DEBUG")
            .build()
        )
        assert config.retry_attempts == 0
        assert config.base_delay_ms == 1
        assert config.log_level == "DEBUG"
        assert dict(config.properties) == {
            "sms.provider": "twilio",
            "push.provider": "fcm",
            "push.project.id": "demo",
        }

    def test_negative_retry_attempts_rejected_immediately(self) -> None:
        with pytest.raises(InvalidArgumentError, match="retry_attempts"):
            NotificationConfig.builder().retry_attempts(-1)

    def test_sub_minimum_delay_rejected_immediately(self) -> None:
        with pytest.raises(InvalidArgumentError, match="base_delay_ms"):
            NotificationConfig.builder().base_delay_ms(0)

    def test_null_property_value_rejected(self) -> None:
        with pytest.raises(NullArgumentError, match="value"):
            NotificationConfig.builder().property("email.from", None)  # type: ignore[arg-type]

    def test_null_properties_map_rejected(self) -> None:
        with pytest.raises(NullArgumentError, match="properties"):
            NotificationConfig.builder().properties(None)  # type: ignore[arg-type]

    def test_null_retry_attempts_rejected(self) -> None:
        with pytest.raises(NullArgumentError, match="retry_attempts"):
            NotificationConfig.builder().retry_attempts(None)  # type: ignore[arg-type]

    def test_null_base_delay_rejected(self) -> None:
        with pytest.raises(NullArgumentError, match="base_delay_ms"):
            NotificationConfig.builder().base_delay_ms(None)  # type: ignore[arg-type]
