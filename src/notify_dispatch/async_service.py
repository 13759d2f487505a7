"""Non-blocking facade over :class:`NotificationService`.

Every send runs on its own thread and is handed back to the caller as a
:class:`DispatchFuture`. Delivery is I/O-bound and mostly spent waiting on
providers or in retry backoff, so one short-lived thread per call is used
instead of a bounded pool; there is no queue and no admission control.
"""

import itertools
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, InvalidStateError
from types import TracebackType
from typing import Any, Self

from notify_dispatch.cancellation import CancellationToken, cancellation_scope
from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.exceptions import ServiceClosedError, require_not_none
from notify_dispatch.results import NotificationResult
from notify_dispatch.service import NotificationService

logger = logging.getLogger(__name__)


class DispatchFuture(Future[NotificationResult]):
    """Future for a single asynchronous send.

    Unlike a plain executor future, it can be cancelled while the send is
    already executing: :meth:`cancel` also fires the worker's cancellation
    token, which unblocks a pending retry wait. The future never enters the
    RUNNING state, so :meth:`running` always reports False.
    """

    def __init__(self) -> None:
        super().__init__()
        self._token = CancellationToken()

    @property
    def token(self) -> CancellationToken:
        return self._token

    def cancel(self) -> bool:
        cancelled = super().cancel()
        if cancelled:
            self._token.cancel()
        return cancelled


class AsyncNotificationService:
    """Dispatches notifications without blocking the caller.

    The service owns its worker threads and must be closed explicitly,
    either with :meth:`close` or by using it as a context manager.
    Closing drains in-flight sends by default; pass ``cancel_pending=True``
    to cancel them instead. Worker threads are not daemonic, so sends that
    are still running when the interpreter exits are allowed to finish.

    Example::

        with AsyncNotificationService(config, retry=True) as notifier:
            future = notifier.send_async(EmailRequest(to="a@b.c", subject="Hi", body=""))
            result = future.result(timeout=5)
    """

    def __init__(self, config: NotificationConfig, *, retry: bool = False) -> None:
        require_not_none(config, "config")
        self._service = NotificationService(config, retry=retry)
        self._lock = threading.Lock()
        self._workers: dict[threading.Thread, DispatchFuture] = {}
        self._closed = False
        self._thread_ids = itertools.count(1)
        logger.info("Async notification service initialized")

    @property
    def service(self) -> NotificationService:
        return self._service

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def in_flight(self) -> int:
        """Number of sends whose worker thread has not finished yet."""
        with self._lock:
            return len(self._workers)

    def send_async(self, request: Any) -> DispatchFuture:
        """Schedule :meth:`NotificationService.send` and return immediately."""
        require_not_none(request, "request")
        return self._submit(self._service.send, request)

    def send_via_async(self, kind: ChannelKind, request: Any) -> DispatchFuture:
        """Schedule :meth:`NotificationService.send_via` and return immediately."""
        require_not_none(kind, "kind")
        require_not_none(request, "request")
        return self._submit(self._service.send_via, kind, request)

    def close(self, wait: bool = True, *, cancel_pending: bool = False) -> None:
        """Stop accepting sends and release the worker threads.

        Args:
            wait: Block until every in-flight send has finished.
            cancel_pending: Cancel in-flight sends before waiting. Sends
                blocked in a retry wait are unblocked; a provider call that
                is already executing still runs to completion.
        """
        with self._lock:
            already_closed = self._closed
            self._closed = True
            workers = list(self._workers.items())

        if cancel_pending:
            for _, future in workers:
                future.cancel()

        if wait:
            current = threading.current_thread()
            for worker, _ in workers:
                if worker is not current:
                    worker.join()

        if not already_closed:
            logger.info(
                "Async notification service closed",
                extra={"in_flight": len(workers), "cancel_pending": cancel_pending},
            )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _submit(
        self, fn: Callable[..., NotificationResult], *args: Any
    ) -> DispatchFuture:
        future = DispatchFuture()
        with self._lock:
            if self._closed:
                raise ServiceClosedError("cannot schedule new sends after close()")
            worker = threading.Thread(
                target=self._run,
                args=(future, fn, args),
                name=f"notify-dispatch-{next(self._thread_ids)}",
            )
            # registered only once running, so close() never joins an unstarted thread
            worker.start()
            self._workers[worker] = future
        return future

    def _run(
        self,
        future: DispatchFuture,
        fn: Callable[..., NotificationResult],
        args: tuple[Any, ...],
    ) -> None:
        try:
            if future.cancelled():
                return
            try:
                with cancellation_scope(future.token):
                    result = fn(*args)
            except BaseException as exc:
                _settle(future, exception=exc)
            else:
                _settle(future, result=result)
        finally:
            with self._lock:
                self._workers.pop(threading.current_thread(), None)


def _settle(
    future: DispatchFuture,
    result: NotificationResult | None = None,
    exception: BaseException | None = None,
) -> None:
    if future.cancelled():
        logger.info("Send finished after cancellation, outcome dropped")
        return
    try:
        if exception is not None:
            future.set_exception(exception)
        else:
            future.set_result(result)  # type: ignore[arg-type]
    except InvalidStateError:
        # cancelled between the check above and the set
        logger.info("Send finished after cancellation, outcome dropped")
