"""Abstract delivery provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from notification_client.enums import Channel
from notification_client.models import Notification


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of a delivery attempt."""

    success: bool
    details: str


class DeliveryProvider(ABC):
    """Base class for all channel delivery providers.

    A provider is bound to exactly one channel. Instances may be invoked
    from several worker threads at once and must be safe for that.
    """

    channel: ClassVar[Channel]

    @property
    def name(self) -> str:
        return type(self).__name__

    def supports(self, channel: Channel) -> bool:
        """Return True if this provider delivers notifications of *channel*."""
        return channel == self.channel

    @abstractmethod
    def send(self, notification: Notification) -> DeliveryResult | None:
        """Attempt to deliver a notification.

        Raise ValidationError to reject the payload; any other exception,
        or a result with ``success=False``, is reported to the caller as a
        DeliveryError.
        """
