"""Push notification delivery provider (FCM dev stub)."""

import logging
import uuid
from typing import ClassVar

from notification_client.config import FCMConfig
from notification_client.enums import Channel
from notification_client.models import PushNotification
from notification_client.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


class FCMPushProvider(DeliveryProvider):
    """Stub FCM provider that logs instead of sending.

    Ready for integration with FCM/APNs. Replace the send()
    body with actual API calls.
    """

    channel: ClassVar[Channel] = Channel.PUSH

    def __init__(self, config: FCMConfig | None = None) -> None:
        self._config = config or FCMConfig()

    def send(self, notification: PushNotification) -> DeliveryResult:
        message_name = (
            f"projects/{self._config.project_id}/messages/{uuid.uuid4().hex[:12]}"
        )
        logger.info(
            "Push sent (stub)",
            extra={
                "device_token": notification.recipient,
                "title": notification.title,
                "data_keys": sorted(notification.data),
                "message_name": message_name,
            },
        )
        return DeliveryResult(success=True, details=message_name)
