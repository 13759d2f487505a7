"""Push notification delivery channel (dev stub)."""

import logging
import uuid
from datetime import datetime, timezone

from notify_dispatch.channels.base import NotificationChannel
from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.requests import PushRequest
from notify_dispatch.results import Failure, NotificationResult, Success

logger = logging.getLogger(__name__)


class PushChannel(NotificationChannel[PushRequest]):
    """Stub push channel that logs instead of sending.

    Ready for integration with FCM/APNs; replace the send()
    body with actual API calls.
    """

    def __init__(self, config: NotificationConfig) -> None:
        self._config = config

    def send(self, request: PushRequest) -> NotificationResult:
        provider = self._config.get_property("push.provider", "fcm")
        project_id = self._config.get_property("push.project.id", "notify-demo")
        try:
            message_name = f"projects/{project_id}/messages/{str(uuid.uuid4())[:19]}"
            logger.info(
                "Push sent (stub)",
                extra={
                    "provider": provider,
                    "device_token": request.device_token,
                    "title": request.title,
                    "message_id": message_name,
                },
            )
        except Exception as exc:
            logger.exception("Push send failed", extra={"provider": provider})
            return Failure(code="PUSH_SEND_ERROR", reason=str(exc) or type(exc).__name__)
        return Success(message_id=message_name, timestamp=datetime.now(timezone.utc))

    def channel_kind(self) -> ChannelKind:
        return ChannelKind.PUSH
