"""Cooperative cancellation for blocking waits inside a send.

Threads cannot be interrupted from the outside, so the async service binds
a :class:`CancellationToken` to each worker through a context variable and
the retry decorator waits on that token instead of sleeping blindly.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar


class CancellationToken:
    """A one-shot, thread-safe cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float) -> bool:
        """Block for up to *timeout* seconds.

        Returns True as soon as the token is cancelled, False if the
        timeout elapsed first.
        """
        return self._event.wait(timeout)


_current_token: ContextVar[CancellationToken | None] = ContextVar(
    "notify_dispatch_cancellation_token", default=None
)


def current_token() -> CancellationToken:
    """Return the token bound to the current context.

    Outside any :func:`cancellation_scope` a fresh, never-cancelled token
    is returned, which turns waits into plain timed sleeps.
    """
    token = _current_token.get()
    if token is None:
        return CancellationToken()
    return token


@contextmanager
def cancellation_scope(token: CancellationToken) -> Iterator[CancellationToken]:
    """Bind *token* to the current context for the duration of the block."""
    reset = _current_token.set(token)
    try:
        yield token
    finally:
        _current_token.reset(reset)
