"""Exception types raised by notify_dispatch.

Delivery failures are never raised; they are returned as ``Failure``
values. Everything here signals misuse of the API or a lifecycle event.
"""

from concurrent.futures import CancelledError


class NotificationError(Exception):
    """Base class for all notify_dispatch errors."""


class InvalidArgumentError(NotificationError, ValueError):
    """An argument violates a construction or call-time constraint."""


class NullArgumentError(InvalidArgumentError):
    """A required argument is ``None``."""


class UnsupportedRequestTypeError(NotificationError, TypeError):
    """The request is not one of the known request variants."""


class DispatchCancelledError(NotificationError, CancelledError):
    """Cancellation was observed while waiting between retry attempts."""


class ServiceClosedError(NotificationError, RuntimeError):
    """A send was scheduled after the async service was closed."""


def require_not_none(value: object, name: str) -> None:
    """Raise NullArgumentError if *value* is None."""
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
