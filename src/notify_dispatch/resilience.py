"""Retry-with-exponential-backoff decorator for notification channels."""

import logging

from notify_dispatch.cancellation import current_token
from notify_dispatch.channels.base import NotificationChannel, RequestT
from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.exceptions import (
    DispatchCancelledError,
    InvalidArgumentError,
    require_not_none,
)
from notify_dispatch.results import Failure, NotificationResult, Success

logger = logging.getLogger(__name__)


class RetryChannelDecorator(NotificationChannel[RequestT]):
    """Wraps a channel and retries failed sends with exponential backoff.

    The first attempt runs immediately. After each ``Failure`` the
    decorator waits ``base_delay_ms * 2**i`` milliseconds, where ``i`` is
    the zero-based index of the retry about to run, and tries again, up to
    ``max_retries`` extra attempts. The first ``Success`` is returned as
    soon as it arrives; if every attempt fails, the last ``Failure`` is
    returned unchanged and earlier ones are only logged.

    Waits honour the cancellation token bound by
    :func:`~notify_dispatch.cancellation.cancellation_scope`: a
    cancellation seen mid-wait abandons the send and raises
    :class:`DispatchCancelledError`.
    """

    def __init__(
        self,
        delegate: NotificationChannel[RequestT],
        max_retries: int,
        base_delay_ms: int,
    ) -> None:
        require_not_none(delegate, "delegate")
        require_not_none(max_retries, "max_retries")
        require_not_none(base_delay_ms, "base_delay_ms")
        if max_retries < 0:
            raise InvalidArgumentError(f"max_retries must be >= 0, got {max_retries}")
        if base_delay_ms < 1:
            raise InvalidArgumentError(
                f"base_delay_ms must be >= 1, got {base_delay_ms}"
            )
        self._delegate = delegate
        self._max_retries = max_retries
        self._base_delay_ms = base_delay_ms

    @classmethod
    def from_config(
        cls,
        delegate: NotificationChannel[RequestT],
        config: NotificationConfig,
    ) -> "RetryChannelDecorator[RequestT]":
        """Build a decorator using the config's default retry knobs."""
        require_not_none(config, "config")
        return cls(delegate, config.retry_attempts, config.base_delay_ms)

    @property
    def delegate(self) -> NotificationChannel[RequestT]:
        return self._delegate

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def base_delay_ms(self) -> int:
        return self._base_delay_ms

    def send(self, request: RequestT) -> NotificationResult:
        result = self._delegate.send(request)

        for attempt in range(1, self._max_retries + 1):
            if isinstance(result, Success):
                return result

            delay_ms = self.backoff_delay_ms(attempt - 1)
            logger.warning(
                "Send failed, retrying",
                extra={
                    "channel": self.channel_kind(),
                    "attempt": attempt,
                    "max_retries": self._max_retries,
                    "delay_ms": delay_ms,
                    "code": result.code,
                    "reason": result.reason,
                },
            )
            self._pause(delay_ms)
            result = self._delegate.send(request)

        if isinstance(result, Failure):
            logger.error(
                "All retries exhausted",
                extra={
                    "channel": self.channel_kind(),
                    "max_retries": self._max_retries,
                    "code": result.code,
                    "reason": result.reason,
                },
            )
        return result

    def channel_kind(self) -> ChannelKind:
        return self._delegate.channel_kind()

    def backoff_delay_ms(self, attempt_index: int) -> int:
        """Return the wait before the retry at zero-based *attempt_index*."""
        return self._base_delay_ms * (1 << attempt_index)

    def _pause(self, delay_ms: int) -> None:
        token = current_token()
        if token.wait(delay_ms / 1000):
            logger.warning(
                "Retry wait cancelled",
                extra={"channel": self.channel_kind(), "delay_ms": delay_ms},
            )
            raise DispatchCancelledError(
                f"send via {self.channel_kind()} cancelled during retry backoff"
            )
