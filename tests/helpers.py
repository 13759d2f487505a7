"""Result and channel doubles shared by the test modules."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from notify_dispatch.channels import NotificationChannel
from notify_dispatch.enums import ChannelKind
from notify_dispatch.results import Failure, NotificationResult, Success


def success(message_id: str = "msg-1") -> Success:
    return Success(message_id=message_id, timestamp=datetime.now(timezone.utc))


def failure(n: int = 1) -> Failure:
    return Failure(code=f"ERR_{n}", reason=f"attempt {n} failed")


def make_channel(
    *results: NotificationResult,
    kind: ChannelKind = ChannelKind.EMAIL,
) -> MagicMock:
    """Channel double returning *results* in order, one per send()."""
    channel = MagicMock(spec=NotificationChannel)
    channel.send.side_effect = list(results)
    channel.channel_kind.return_value = kind
    return channel


def always(result: NotificationResult, kind: ChannelKind = ChannelKind.EMAIL) -> MagicMock:
    """Channel double returning the same *result* on every send()."""
    channel = MagicMock(spec=NotificationChannel)
    channel.send.return_value = result
    channel.channel_kind.return_value = kind
    return channel
