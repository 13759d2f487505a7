"""Tests for the built-in stub channels."""

import logging
from unittest.mock import patch

import pytest

from notify_dispatch.channels import EmailChannel, PushChannel, SmsChannel
from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.requests import EmailRequest, PushRequest, SmsRequest
from notify_dispatch.results import Failure, Success


class TestEmailChannel:
    def test_send_returns_success(
        self, config: NotificationConfig, email_request: EmailRequest
    ) -> None:
        result = EmailChannel(config).send(email_request)

        assert isinstance(result, Success)
        assert result.message_id.startswith("SG.")
        assert result.timestamp.tzinfo is not None

    def test_message_ids_are_unique(
        self, config: NotificationConfig, email_request: EmailRequest
    ) -> None:
        channel = EmailChannel(config)
        first = channel.send(email_request)
        second = channel.send(email_request)

        assert isinstance(first, Success) and isinstance(second, Success)
        assert first.message_id != second.message_id

    def test_logs_configured_sender(
        self,
        config: NotificationConfig,
        email_request: EmailRequest,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="notify_dispatch.channels.email"):
            EmailChannel(config).send(email_request)

        record = next(r for r in caplog.records if r.getMessage() == "Email sent (stub)")
        assert record.sender == "noreply@example.com"
        assert record.provider == "sendgrid"
        assert record.recipient == "user@example.com"

    def test_unexpected_error_becomes_failure(
        self, config: NotificationConfig, email_request: EmailRequest
    ) -> None:
        with patch("notify_dispatch.channels.email.uuid.uuid4", side_effect=OSError("no entropy")):
            result = EmailChannel(config).send(email_request)

        assert result == Failure(code="EMAIL_SEND_ERROR", reason="no entropy")

    def test_channel_kind(self, config: NotificationConfig) -> None:
        assert EmailChannel(config).channel_kind() is ChannelKind.EMAIL


class TestSmsChannel:
    def test_send_returns_success(
        self, config: NotificationConfig, sms_request: SmsRequest
    ) -> None:
        result = SmsChannel(config).send(sms_request)

        assert isinstance(result, Success)
        assert result.message_id.startswith("SM")

    def test_unexpected_error_becomes_failure(
        self, config: NotificationConfig, sms_request: SmsRequest
    ) -> None:
        with patch("notify_dispatch.channels.sms.uuid.uuid4", side_effect=RuntimeError("boom")):
            result = SmsChannel(config).send(sms_request)

        assert result == Failure(code="SMS_SEND_ERROR", reason="boom")

    def test_channel_kind(self, config: NotificationConfig) -> None:
        assert SmsChannel(config).channel_kind() is ChannelKind.SMS


class TestPushChannel:
    def test_send_returns_success_with_project_scoped_name(
        self, config: NotificationConfig, push_request: PushRequest
    ) -> None:
        result = PushChannel(config).send(push_request)

        assert isinstance(result, Success)
        assert result.message_id.startswith("projects/test-project/messages/")
        assert len(result.message_id.rsplit("/", 1)[1]) == 19

    def test_default_project_id(self, push_request: PushRequest) -> None:
        result = PushChannel(NotificationConfig()).send(push_request)

        assert isinstance(result, Success)
        assert result.message_id.startswith("projects/notify-demo/messages/")

    def test_channel_kind(self, config: NotificationConfig) -> None:
        assert PushChannel(config).channel_kind() is ChannelKind.PUSH
