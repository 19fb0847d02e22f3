"""SMS delivery provider (Twilio dev stub)."""

import logging
from typing import ClassVar

from notification_client.config import TwilioConfig
from notification_client.enums import Channel
from notification_client.models import SMSNotification
from notification_client.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)


class TwilioSMSProvider(DeliveryProvider):
    """Stub Twilio provider that logs instead of sending.

    Ready for integration with the Twilio Messages API. Replace the
    send() body with actual API calls.
    """

    channel: ClassVar[Channel] = Channel.SMS

    def __init__(self, config: TwilioConfig) -> None:
        self._config = config

    @property
    def messages_path(self) -> str:
        return f"/2010-04-01/Accounts/{self._config.account_sid}/Messages.json"

    def send(self, notification: SMSNotification) -> DeliveryResult:
        preview = notification.message[:50]
        logger.info(
            "SMS sent (stub)",
            extra={
                "path": self.messages_path,
                "from_number": self._config.from_phone_number,
                "recipient": notification.recipient,
                "body_preview": preview,
            },
        )
        return DeliveryResult(success=True, details=f"SMS queued: {preview}")
