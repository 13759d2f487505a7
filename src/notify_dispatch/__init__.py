"""Route typed notification requests to pluggable delivery channels."""

from notify_dispatch.async_service import AsyncNotificationService, DispatchFuture
from notify_dispatch.cancellation import CancellationToken, cancellation_scope
from notify_dispatch.channels import (
    EmailChannel,
    NotificationChannel,
    PushChannel,
    SmsChannel,
)
from notify_dispatch.config import NotificationConfig, NotificationConfigBuilder
from notify_dispatch.enums import ChannelKind
from notify_dispatch.exceptions import (
    DispatchCancelledError,
    InvalidArgumentError,
    NotificationError,
    NullArgumentError,
    ServiceClosedError,
    UnsupportedRequestTypeError,
)
from notify_dispatch.factory import create_channel
from notify_dispatch.requests import (
    EmailRequest,
    NotificationRequest,
    PushRequest,
    SmsRequest,
)
from notify_dispatch.resilience import RetryChannelDecorator
from notify_dispatch.results import Failure, NotificationResult, Success
from notify_dispatch.service import NotificationService

__all__ = [
    "AsyncNotificationService",
    "CancellationToken",
    "ChannelKind",
    "DispatchCancelledError",
    "DispatchFuture",
    "EmailChannel",
    "EmailRequest",
    "Failure",
    "InvalidArgumentError",
    "NotificationChannel",
    "NotificationConfig",
    "NotificationConfigBuilder",
    "NotificationError",
    "NotificationRequest",
    "NotificationResult",
    "NotificationService",
    "NullArgumentError",
    "PushChannel",
    "PushRequest",
    "RetryChannelDecorator",
    "ServiceClosedError",
    "SmsChannel",
    "SmsRequest",
    "Success",
    "UnsupportedRequestTypeError",
    "cancellation_scope",
    "create_channel",
]
