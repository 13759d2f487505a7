"""Shared fixtures for notify_dispatch tests."""

import pytest

from notify_dispatch.config import NotificationConfig
from notify_dispatch.requests import EmailRequest, PushRequest, SmsRequest


@pytest.fixture()
def config() -> NotificationConfig:
    """Config with tiny backoff so retry tests stay fast."""
    return (
        NotificationConfig.builder()
        .property("email.from", "noreply@example.com")
        .property("push.project.id", "test-project")
        .retry_attempts(3)
        .base_delay_ms(1)
        .build()
    )


@pytest.fixture()
def email_request() -> EmailRequest:
    return EmailRequest(to="user@example.com", subject="Welcome!", body="Hello!")


@pytest.fixture()
def sms_request() -> SmsRequest:
    return SmsRequest(phone_number="+15550001111", message="Your code is 1234")


@pytest.fixture()
def push_request() -> PushRequest:
    return PushRequest(device_token="device-token-1", title="Ping", body="")
