"""Synchronous notification routing."""

import logging
from typing import Any, assert_never

from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.exceptions import UnsupportedRequestTypeError, require_not_none
from notify_dispatch.factory import create_channel
from notify_dispatch.requests import EmailRequest, PushRequest, SmsRequest
from notify_dispatch.results import Failure, NotificationResult, Success

logger = logging.getLogger(__name__)


def resolve_kind(request: object) -> ChannelKind:
    """Return the channel kind implied by the request's type.

    Raises UnsupportedRequestTypeError for anything that is not one of the
    known request variants.
    """
    match request:
        case EmailRequest():
            return ChannelKind.EMAIL
        case SmsRequest():
            return ChannelKind.SMS
        case PushRequest():
            return ChannelKind.PUSH
        case _:
            raise UnsupportedRequestTypeError(
                f"Unsupported request type: {type(request).__qualname__}"
            )


class NotificationService:
    """Routes each request to a freshly created channel and returns its result.

    The service is a pure router: it does not retry, cache or batch unless
    constructed with ``retry=True``, in which case every channel it creates
    is wrapped with the config's default retry policy.
    """

    def __init__(self, config: NotificationConfig, *, retry: bool = False) -> None:
        require_not_none(config, "config")
        self._config = config
        self._retry = retry
        logger.info("Notification service initialized", extra={"retry": retry})

    @property
    def config(self) -> NotificationConfig:
        return self._config

    def send(self, request: Any) -> NotificationResult:
        """Send *request* through the channel implied by its type."""
        require_not_none(request, "request")
        kind = resolve_kind(request)
        logger.info("Channel resolved from request type", extra={"channel": kind})
        return self._dispatch(kind, request)

    def send_via(self, kind: ChannelKind, request: Any) -> NotificationResult:
        """Send *request* through an explicitly chosen channel.

        The caller is responsible for *request* matching *kind*; no check
        beyond None is made.
        """
        require_not_none(kind, "kind")
        require_not_none(request, "request")
        logger.info("Dispatching via explicit channel", extra={"channel": kind})
        return self._dispatch(kind, request)

    def _dispatch(self, kind: ChannelKind, request: Any) -> NotificationResult:
        channel = create_channel(kind, self._config, retry=self._retry)
        result = channel.send(request)
        _log_result(kind, result)
        return result


def _log_result(kind: ChannelKind, result: NotificationResult) -> None:
    match result:
        case Success(message_id=message_id, timestamp=timestamp):
            logger.info(
                "Notification delivered",
                extra={"channel": kind, "message_id": message_id, "delivered_at": timestamp},
            )
        case Failure(code=code, reason=reason):
            logger.warning(
                "Notification failed",
                extra={"channel": kind, "code": code, "reason": reason},
            )
        case _:
            assert_never(result)
