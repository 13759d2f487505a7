"""Email delivery channel (dev stub)."""

import logging
import uuid
from datetime import datetime, timezone

from notify_dispatch.channels.base import NotificationChannel
from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.requests import EmailRequest
from notify_dispatch.results import Failure, NotificationResult, Success

logger = logging.getLogger(__name__)


class EmailChannel(NotificationChannel[EmailRequest]):
    """Stub email channel that logs instead of sending.

    Ready for integration with SendGrid/SES/SMTP; replace the send()
    body with actual API calls.
    """

    def __init__(self, config: NotificationConfig) -> None:
        self._config = config
        logger.debug(
            "Email channel initialized",
            extra={"sender": config.get_property("email.from", "unconfigured")},
        )

    def send(self, request: EmailRequest) -> NotificationResult:
        provider = self._config.get_property("email.provider", "sendgrid")
        sender = self._config.get_property("email.from", "unconfigured")
        try:
            logger.info(
                "Email sent (stub)",
                extra={
                    "provider": provider,
                    "sender": sender,
                    "recipient": request.to,
                    "subject": request.subject,
                },
            )
            message_id = f"SG.{uuid.uuid4().hex}"
        except Exception as exc:
            logger.exception("Email send failed", extra={"provider": provider})
            return Failure(code="EMAIL_SEND_ERROR", reason=str(exc) or type(exc).__name__)
        return Success(message_id=message_id, timestamp=datetime.now(timezone.utc))

    def channel_kind(self) -> ChannelKind:
        return ChannelKind.EMAIL
