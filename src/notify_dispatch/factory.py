"""Channel kind to channel instance mapping."""

from typing import Any, assert_never

from notify_dispatch.channels import EmailChannel, NotificationChannel, PushChannel, SmsChannel
from notify_dispatch.config import NotificationConfig
from notify_dispatch.enums import ChannelKind
from notify_dispatch.exceptions import require_not_none
from notify_dispatch.resilience import RetryChannelDecorator


def create_channel(
    kind: ChannelKind,
    config: NotificationConfig,
    *,
    retry: bool = False,
) -> NotificationChannel[Any]:
    """Return a new channel for *kind*.

    A fresh instance is created on every call. With ``retry=True`` the
    channel is wrapped in a :class:`RetryChannelDecorator` using the
    config's ``retry_attempts`` and ``base_delay_ms``.

    Raises NullArgumentError if *kind* or *config* is None.
    """
    require_not_none(kind, "kind")
    require_not_none(config, "config")

    channel: NotificationChannel[Any]
    match kind:
        case ChannelKind.EMAIL:
            channel = EmailChannel(config)
        case ChannelKind.SMS:
            channel = SmsChannel(config)
        case ChannelKind.PUSH:
            channel = PushChannel(config)
        case _:
            assert_never(kind)

    if retry:
        return RetryChannelDecorator.from_config(channel, config)
    return channel
