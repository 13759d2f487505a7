"""Outcome of a single send attempt."""

from dataclasses import dataclass
from datetime import datetime

from notify_dispatch.exceptions import InvalidArgumentError, require_not_none


def _require_text(value: str, name: str) -> None:
    require_not_none(value, name)
    if not value.strip():
        raise InvalidArgumentError(f"{name} must not be blank")


@dataclass(frozen=True, slots=True)
class Success:
    """The provider accepted the notification."""

    message_id: str
    timestamp: datetime

    def __post_init__(self) -> None:
        _require_text(self.message_id, "message_id")
        require_not_none(self.timestamp, "timestamp")


@dataclass(frozen=True, slots=True)
class Failure:
    """The notification was not delivered.

    ``code`` is machine-readable (e.g. ``"SMS_SEND_ERROR"``); ``reason``
    is meant for humans.
    """

    code: str
    reason: str

    def __post_init__(self) -> None:
        _require_text(self.code, "code")
        _require_text(self.reason, "reason")


NotificationResult = Success | Failure
