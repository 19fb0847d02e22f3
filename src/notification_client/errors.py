"""Error vocabulary surfaced by the dispatch client."""


class NotificationError(Exception):
    """Base class for all notification client errors."""


class ValidationError(NotificationError):
    """The notification is malformed, unroutable, or rejected by a provider."""


class DeliveryError(NotificationError):
    """A provider attempted delivery and failed.

    The message names the provider; the underlying cause is chained as
    ``__cause__``.
    """

    def __init__(self, provider: str) -> None:
        super().__init__(f"Failed to send notification via {provider}")
        self.provider = provider
