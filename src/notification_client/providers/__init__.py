"""Provider registry for channel-based delivery dispatch."""

from collections.abc import Iterable, Iterator

from notification_client.config import SendGridConfig, TwilioConfig
from notification_client.errors import ValidationError
from notification_client.models import Notification
from notification_client.providers.base import DeliveryProvider, DeliveryResult
from notification_client.providers.email import SendGridEmailProvider
from notification_client.providers.push import FCMPushProvider
from notification_client.providers.sms import TwilioSMSProvider

__all__ = [
    "DeliveryProvider",
    "DeliveryResult",
    "FCMPushProvider",
    "ProviderRegistry",
    "SendGridEmailProvider",
    "TwilioSMSProvider",
    "create_default_providers",
]


class ProviderRegistry:
    """Ordered collection of providers, searched by channel at dispatch time.

    Several providers may claim the same channel; the first registered
    wins. Registries are expected to hold a handful of providers, so
    resolution is a plain scan in registration order.
    """

    def __init__(self, providers: Iterable[DeliveryProvider] = ()) -> None:
        self._providers: list[DeliveryProvider] = list(providers)

    def register(self, provider: DeliveryProvider) -> None:
        self._providers.append(provider)

    def resolve(self, notification: Notification) -> DeliveryProvider:
        """Return the provider for a notification.

        Raises ValidationError if no registered provider supports the
        notification's channel.
        """
        for provider in self._providers:
            if provider.supports(notification.channel):
                return provider
        raise ValidationError(
            "No provider registered for notification type: "
            f"{type(notification).__name__}"
        )

    def __iter__(self) -> Iterator[DeliveryProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)


def create_default_providers() -> list[DeliveryProvider]:
    """Create one built-in provider per channel, configured from the environment."""
    return [
        SendGridEmailProvider(SendGridConfig()),  # type: ignore[call-arg]
        TwilioSMSProvider(TwilioConfig()),  # type: ignore[call-arg]
        FCMPushProvider(),
    ]
