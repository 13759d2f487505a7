"""Abstract notification channel interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from notify_dispatch.enums import ChannelKind
from notify_dispatch.results import NotificationResult

RequestT = TypeVar("RequestT")


class NotificationChannel(ABC, Generic[RequestT]):
    """Base class for everything that can deliver a request.

    Concrete provider channels and decorators such as the retry wrapper
    share this contract, so they can be nested freely.
    """

    @abstractmethod
    def send(self, request: RequestT) -> NotificationResult:
        """Attempt to deliver *request*.

        Expected delivery failures must be returned as ``Failure`` rather
        than raised.
        """

    @abstractmethod
    def channel_kind(self) -> ChannelKind:
        """Return the kind of channel this instance delivers through."""
