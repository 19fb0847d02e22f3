"""Test fixtures for notification_client tests."""

from collections.abc import Generator
from concurrent.futures import ThreadPoolExecutor

import pytest

from notification_client.client import NotificationClient
from notification_client.models import (
    EmailNotification,
    PushNotification,
    SMSNotification,
)

from tests.fakes import (
    RecordingEmailProvider,
    RecordingPushProvider,
    RecordingSMSProvider,
)


@pytest.fixture()
def email_provider() -> RecordingEmailProvider:
    return RecordingEmailProvider()


@pytest.fixture()
def sms_provider() -> RecordingSMSProvider:
    return RecordingSMSProvider()


@pytest.fixture()
def push_provider() -> RecordingPushProvider:
    return RecordingPushProvider()


@pytest.fixture()
def executor() -> Generator[ThreadPoolExecutor, None, None]:
    pool = ThreadPoolExecutor(max_workers=4, thread_name_prefix="test-dispatch")
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture()
def client(
    email_provider: RecordingEmailProvider,
    sms_provider: RecordingSMSProvider,
    push_provider: RecordingPushProvider,
    executor: ThreadPoolExecutor,
) -> NotificationClient:
    return (
        NotificationClient.builder()
        .register_provider(email_provider)
        .register_provider(sms_provider)
        .register_provider(push_provider)
        .with_executor(executor)
        .build()
    )


@pytest.fixture()
def email() -> EmailNotification:
    return EmailNotification(
        recipient="user@example.com", subject="Hi", body="Body", attachments=[]
    )


@pytest.fixture()
def sms() -> SMSNotification:
    return SMSNotification(recipient="+15551234567", message="Hi")


@pytest.fixture()
def push() -> PushNotification:
    return PushNotification(
        recipient="token123", title="Title", body="Body", data={"k": "v"}
    )
