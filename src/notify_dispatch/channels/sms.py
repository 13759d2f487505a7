"""SMS delivery channel (dev stub)."""

import logging
import uuid
from datetime import datetime, timezone

from notify_dispatch.channels.base import NotificationChannel
from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.requests import SmsRequest
from notify_dispatch.results import Failure, NotificationResult, Success

logger = logging.getLogger(__name__)


class SmsChannel(NotificationChannel[SmsRequest]):
    """Stub SMS channel that logs instead of sending.

    Ready for integration with Twilio/AWS SNS; replace the send()
    body with actual API calls.
    """

    def __init__(self, config: NotificationConfig) -> None:
        self._config = config

    def send(self, request: SmsRequest) -> NotificationResult:
        provider = self._config.get_property("sms.provider", "twilio")
        account_sid = self._config.get_property("sms.account.sid", "AC_demo")
        sender = self._config.get_property("sms.from", "+15551234567")
        try:
            preview = request.message[:50] if request.message else "(empty)"
            sid = f"SM{uuid.uuid4().hex}"
            logger.info(
                "SMS queued (stub)",
                extra={
                    "provider": provider,
                    "account_sid": account_sid,
                    "sender": sender,
                    "recipient": request.phone_number,
                    "body_preview": preview,
                    "message_id": sid,
                },
            )
        except Exception as exc:
            logger.exception("SMS send failed", extra={"provider": provider})
            return Failure(code="SMS_SEND_ERROR", reason=str(exc) or type(exc).__name__)
        return Success(message_id=sid, timestamp=datetime.now(timezone.utc))

    def channel_kind(self) -> ChannelKind:
        return ChannelKind.SMS
