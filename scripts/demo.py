#!/usr/bin/env python3
"""Demo: send one notification per channel, synchronously and asynchronously.

Usage:
    python scripts/demo.py [--retry] [--log-level LEVEL]
"""

import argparse

from notify_dispatch import (
    AsyncNotificationService,
    EmailRequest,
    Failure,
    NotificationConfig,
    NotificationService,
    PushRequest,
    SmsRequest,
    Success,
)
from notify_dispatch.log import setup_logging_from_config

REQUESTS = [
    EmailRequest(to="alice@example.com", subject="Welcome!", body="Thanks for signing up."),
    SmsRequest(phone_number="+15550001111", message="Your code is 123456"),
    PushRequest(device_token="fcm-device-token-abc", title="Order shipped", body=""),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Send demo notifications")
    parser.add_argument(
        "--retry",
        action="store_true",
        help="Wrap every channel with the default retry policy",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Root log level (default: WARNING)",
    )
    parser.add_argument(
        "--verbose-channels",
        action="store_true",
        help="Show per-provider channel log records",
    )
    args = parser.parse_args()

    config = (
        NotificationConfig.builder()
        .property("email.from", "noreply@example.com")
        .property("sms.account.sid", "AC_demo")
        .property("push.project.id", "notify-demo")
        .retry_attempts(2)
        .base_delay_ms(200)
        .log_level(args.log_level)
        .build()
    )

    setup_logging_from_config(config, verbose_channels=args.verbose_channels)

    print("Synchronous dispatch:")
    service = NotificationService(config, retry=args.retry)
    for request in REQUESTS:
        _print_result(type(request).__name__, service.send(request))

    print("\nAsynchronous dispatch:")
    with AsyncNotificationService(config, retry=args.retry) as notifier:
        futures = [(type(r).__name__, notifier.send_async(r)) for r in REQUESTS]
        for name, future in futures:
            _print_result(name, future.result(timeout=10))


def _print_result(name: str, result: Success | Failure) -> None:
    match result:
        case Success(message_id=message_id):
            print(f"  {name:14s} -> delivered  id={message_id}")
        case Failure(code=code, reason=reason):
            print(f"  {name:14s} -> FAILED     {code}: {reason}")


if __name__ == "__main__":
    main()
