from notification_client.client import ClientBuilder, NotificationClient
from notification_client.enums import Channel
from notification_client.errors import DeliveryError, NotificationError, ValidationError
from notification_client.models import (
    AnyNotification,
    EmailNotification,
    Notification,
    PushNotification,
    SMSNotification,
    parse_notification,
)

__all__ = [
    "AnyNotification",
    "Channel",
    "ClientBuilder",
    "DeliveryError",
    "EmailNotification",
    "Notification",
    "NotificationClient",
    "NotificationError",
    "PushNotification",
    "SMSNotification",
    "ValidationError",
    "parse_notification",
]
