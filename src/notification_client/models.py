"""Immutable notification payloads, one model per channel.

Models validate on construction and fail closed: any invalid or missing
field raises :class:`notification_client.errors.ValidationError`.
"""

import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from notification_client.enums import Channel
from notification_client.errors import ValidationError

_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+")
_PHONE_PATTERN = re.compile(r"\+[1-9][0-9]{1,14}")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _describe(exc: PydanticValidationError) -> str:
    """Return the message of the first validation failure."""
    error = exc.errors()[0]
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, Exception):
        return str(cause)
    location = ".".join(str(part) for part in error["loc"])
    return f"Invalid {location}: {error['msg']}"


class Notification(BaseModel):
    """Base for all deliverable messages.

    Subclasses set ``channel``, the tag the provider registry routes on.
    Fields may be passed positionally in declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    channel: ClassVar[Channel]

    recipient: str

    def __init__(self, *args: Any, **data: Any) -> None:
        if type(self) is Notification:
            raise TypeError(
                "Notification is abstract; construct EmailNotification, "
                "SMSNotification or PushNotification"
            )
        if args:
            names = list(type(self).model_fields)
            if len(args) > len(names):
                raise TypeError(
                    f"{type(self).__name__} takes at most {len(names)} "
                    f"positional arguments ({len(args)} given)"
                )
            for name, value in zip(names, args):
                if name in data:
                    raise TypeError(
                        f"{type(self).__name__} got multiple values for {name!r}"
                    )
                data[name] = value
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise ValidationError(_describe(exc)) from exc


class EmailNotification(Notification):
    channel: ClassVar[Channel] = Channel.EMAIL

    subject: str
    body: str = ""
    attachments: tuple[Path, ...] = ()

    @field_validator("recipient", mode="before")
    @classmethod
    def _check_recipient(cls, value: Any) -> Any:
        if _is_blank(value):
            raise ValueError("The recipient email cannot be null or blank")
        if isinstance(value, str) and not _EMAIL_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid email format for recipient: {value}")
        return value

    @field_validator("subject", mode="before")
    @classmethod
    def _check_subject(cls, value: Any) -> Any:
        if _is_blank(value):
            raise ValueError("The email subject cannot be null or blank")
        return value


class SMSNotification(Notification):
    channel: ClassVar[Channel] = Channel.SMS

    message: str

    @field_validator("recipient", mode="before")
    @classmethod
    def _check_recipient(cls, value: Any) -> Any:
        if not isinstance(value, str) or not _PHONE_PATTERN.fullmatch(value):
            raise ValueError(
                "Invalid phone number format. "
                "Expected E.164 format (e.g., +1234567890)"
            )
        return value

    @field_validator("message", mode="before")
    @classmethod
    def _check_message(cls, value: Any) -> Any:
        if _is_blank(value):
            raise ValueError("Message cannot be null or blank")
        return value


class PushNotification(Notification):
    """Push message; ``recipient`` is the device token."""

    channel: ClassVar[Channel] = Channel.PUSH

    title: str = ""
    body: str = ""
    data: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("recipient", mode="before")
    @classmethod
    def _check_recipient(cls, value: Any) -> Any:
        if _is_blank(value):
            raise ValueError("Device token cannot be null or blank")
        return value

    @field_validator("data")
    @classmethod
    def _freeze_data(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


AnyNotification = EmailNotification | SMSNotification | PushNotification

_NOTIFICATION_REGISTRY: dict[str, type[Notification]] = {
    Channel.EMAIL: EmailNotification,
    Channel.SMS: SMSNotification,
    Channel.PUSH: PushNotification,
}


def parse_notification(raw: dict[str, Any]) -> AnyNotification:
    """Deserialize a raw dict (e.g. decoded JSON) into a typed notification.

    The ``channel`` key selects the model. Raises ValidationError if the
    channel is missing or unknown, or if any field is invalid.
    """
    try:
        channel = raw["channel"]
    except (KeyError, TypeError) as exc:
        raise ValidationError("Missing channel in raw notification") from exc

    notification_cls = (
        _NOTIFICATION_REGISTRY.get(channel) if isinstance(channel, str) else None
    )
    if notification_cls is None:
        raise ValidationError(f"Unknown notification channel: {channel!r}")

    fields = {key: value for key, value in raw.items() if key != "channel"}
    return notification_cls(**fields)  # type: ignore[return-value]
