"""Email delivery provider (SendGrid dev stub)."""

import logging
from typing import ClassVar

from notification_client.config import SendGridConfig
from notification_client.enums import Channel
from notification_client.errors import ValidationError
from notification_client.models import EmailNotification
from notification_client.providers.base import DeliveryProvider, DeliveryResult

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


def mask_key(key: str | None) -> str:
    """Keep the first four characters of an API key, mask the rest."""
    if key is not None and len(key) > 4:
        return key[:4] + "****"
    return "****"


class SendGridEmailProvider(DeliveryProvider):
    """Stub SendGrid provider that logs the request instead of sending.

    Ready for integration with the SendGrid v3 API. Replace the send()
    body with the actual HTTP call.
    """

    channel: ClassVar[Channel] = Channel.EMAIL

    def __init__(self, config: SendGridConfig) -> None:
        self._config = config

    def send(self, notification: EmailNotification) -> DeliveryResult:
        if "invalid" in notification.recipient:
            logger.error(
                "SendGrid rejected recipient",
                extra={"recipient": notification.recipient},
            )
            raise ValidationError(
                f"Invalid recipient address '{notification.recipient}'"
            )

        logger.info(
            "Email sent (stub)",
            extra={
                "url": SENDGRID_SEND_URL,
                "auth": f"Bearer {mask_key(self._config.api_key)}",
                "from_email": self._config.from_email,
                "recipient": notification.recipient,
                "subject": notification.subject,
                "attachments": len(notification.attachments),
            },
        )
        return DeliveryResult(success=True, details="202 Accepted")
