"""Notification channels: the abstract contract and the built-in stubs."""

from notify_dispatch.channels.base import NotificationChannel
from notify_dispatch.channels.email import EmailChannel
from notify_dispatch.channels.push import PushChannel
from notify_dispatch.channels.sms import SmsChannel

__all__ = [
    "NotificationChannel",
    "EmailChannel",
    "SmsChannel",
    "PushChannel",
]
