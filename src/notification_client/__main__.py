"""Entry point for a local dispatch demo.

Builds a client with the built-in stub providers (configured from the
environment), sends one notification per channel synchronously, then
the same batch asynchronously.

Usage:
    python -m notification_client [--log-level LEVEL] [--workers N]
"""

import argparse
import logging
import uuid
from collections.abc import Sequence

from pydantic import ValidationError as PydanticValidationError

from notification_client.client import NotificationClient
from notification_client.config import DispatchConfig
from notification_client.errors import NotificationError
from notification_client.log import setup_logging
from notification_client.models import (
    EmailNotification,
    Notification,
    PushNotification,
    SMSNotification,
)
from notification_client.providers import create_default_providers

logger = logging.getLogger(__name__)


def _demo_batch() -> list[Notification]:
    return [
        EmailNotification(
            recipient="alice@example.com",
            subject="Hello World",
            body="This is a test",
        ),
        SMSNotification(recipient="+15551234567", message="Hello Alice!"),
        PushNotification(
            recipient=str(uuid.uuid4()),
            title="Title",
            body="Body",
            data={"key1": "value1", "key2": "value2"},
        ),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    try:
        dispatch_config = DispatchConfig()
    except PydanticValidationError:
        setup_logging()
        logger.exception("Dispatch settings are invalid")
        return 1

    parser = argparse.ArgumentParser(description="Send demo notifications")
    parser.add_argument("--log-level", default=dispatch_config.log_level)
    parser.add_argument(
        "--workers",
        type=int,
        default=dispatch_config.max_workers,
        help=f"Async worker pool size (default: {dispatch_config.max_workers})",
    )
    args = parser.parse_args(argv)
    if args.workers <= 0:
        parser.error(f"--workers must be positive, got {args.workers}")

    setup_logging(args.log_level)

    try:
        providers = create_default_providers()
    except PydanticValidationError:
        logger.exception("Provider settings are missing or invalid")
        return 1

    builder = NotificationClient.builder().with_config(dispatch_config)
    builder.with_max_workers(args.workers)
    for provider in providers:
        builder.register_provider(provider)

    batch = _demo_batch()
    with builder.build() as client:
        try:
            client.send_all(batch)
            logger.info("Sync sends completed", extra={"count": len(batch)})

            client.send_all_async(batch).result()
            logger.info("Async sends completed", extra={"count": len(batch)})
        except NotificationError:
            logger.exception("Demo send failed")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
