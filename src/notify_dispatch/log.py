"""Structured JSON logging setup for applications using notify_dispatch.

The library itself only emits records through module loggers; calling
:func:`setup_logging` is left to the application.
"""

import json
import logging
import sys
from collections.abc import Sequence
from datetime import datetime, timezone

from notify_dispatch.config import NotificationConfig
from notify_dispatch.exceptions import require_not_none

# Standard LogRecord attributes, used to pick out fields passed via `extra`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime", "taskName"}
)


class JsonFormatter(logging.Formatter):
    """Single-line JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                log_entry[key] = value

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: str = "INFO",
    suppress: Sequence[str] = (),
) -> None:
    """Configure the root logger with the JSON formatter on stdout.

    Args:
        level: Root log level (e.g. "INFO", "DEBUG").
        suppress: Logger names to raise to WARNING, e.g.
                  "notify_dispatch.channels" to hide per-provider chatter.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in suppress:
        logging.getLogger(name).setLevel(logging.WARNING)


CHANNEL_LOGGERS = (
    "notify_dispatch.channels.email",
    "notify_dispatch.channels.sms",
    "notify_dispatch.channels.push",
)


def setup_logging_from_config(
    config: NotificationConfig,
    verbose_channels: bool = False,
) -> None:
    """Configure JSON logging at ``config.log_level``.

    Per-provider channel records are raised to WARNING unless
    *verbose_channels* is set, leaving routing and retry records visible.
    """
    require_not_none(config, "config")
    setup_logging(config.log_level, suppress=() if verbose_channels else CHANNEL_LOGGERS)
