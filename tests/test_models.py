"""Tests for notification models and construction-time validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from notification_client.enums import Channel
from notification_client.errors import ValidationError
from notification_client.models import (
    EmailNotification,
    Notification,
    PushNotification,
    SMSNotification,
    parse_notification,
)


class TestEmailNotification:
    def test_valid_email_positional(self) -> None:
        email = EmailNotification("user@example.com", "Hi", "Body", [])

        assert email.recipient == "user@example.com"
        assert email.subject == "Hi"
        assert email.body == "Body"
        assert email.attachments == ()
        assert email.channel == Channel.EMAIL

    def test_attachments_become_paths(self) -> None:
        email = EmailNotification(
            recipient="user@example.com",
            subject="Report",
            attachments=["reports/q1.pdf"],
        )

        assert email.attachments == (Path("reports/q1.pdf"),)

    def test_invalid_email_fails_at_construction(self) -> None:
        with pytest.raises(ValidationError, match="Invalid email format for recipient:"):
            EmailNotification("not-an-email", "Hi", "Body", [])

    def test_blank_recipient(self) -> None:
        with pytest.raises(ValidationError, match="cannot be null or blank"):
            EmailNotification(recipient="  ", subject="Hi")

    @pytest.mark.parametrize("subject", [None, "", "   "])
    def test_blank_subject(self, subject: str | None) -> None:
        with pytest.raises(ValidationError, match="subject cannot be null or blank"):
            EmailNotification(recipient="test@valid.com", subject=subject)

    def test_missing_subject(self) -> None:
        with pytest.raises(ValidationError, match="subject"):
            EmailNotification(recipient="test@valid.com")

    def test_pydantic_error_is_chained(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmailNotification("not-an-email", "Hi")

        assert exc_info.value.__cause__ is not None

    def test_is_immutable(self) -> None:
        email = EmailNotification("user@example.com", "Hi")

        with pytest.raises(PydanticValidationError, match="frozen"):
            email.subject = "Changed"  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cc"):
            EmailNotification(recipient="user@example.com", subject="Hi", cc="x")

    def test_too_many_positional_arguments(self) -> None:
        with pytest.raises(TypeError, match="positional"):
            EmailNotification("user@example.com", "Hi", "Body", [], "extra")

    def test_duplicate_argument(self) -> None:
        with pytest.raises(TypeError, match="multiple values"):
            EmailNotification("user@example.com", "Hi", recipient="other@example.com")


class TestSMSNotification:
    def test_valid_sms(self) -> None:
        sms = SMSNotification("+15551234567", "Hi")

        assert sms.recipient == "+15551234567"
        assert sms.message == "Hi"
        assert sms.channel == Channel.SMS

    @pytest.mark.parametrize(
        "phone",
        ["0505-8888", "15551234567", "+0123", "+1٣٣٣٣٣٣", None],
    )
    def test_non_e164_phone(self, phone: str | None) -> None:
        with pytest.raises(ValidationError, match="E.164"):
            SMSNotification(recipient=phone, message="Hola")

    def test_blank_message(self) -> None:
        with pytest.raises(ValidationError, match="Message cannot be null or blank"):
            SMSNotification(recipient="+15551234567", message=" ")


class TestPushNotification:
    def test_valid_push(self) -> None:
        push = PushNotification("token123", "Title", "Body", {"key1": "value1"})

        assert push.recipient == "token123"
        assert push.data == {"key1": "value1"}
        assert push.channel == Channel.PUSH

    def test_defaults(self) -> None:
        push = PushNotification(recipient="token123")

        assert push.title == ""
        assert push.body == ""
        assert push.data == {}

    def test_blank_device_token(self) -> None:
        with pytest.raises(ValidationError, match="Device token"):
            PushNotification(recipient="")

    def test_data_is_read_only(self) -> None:
        push = PushNotification("token123", "T", "B", {"k": "v"})

        with pytest.raises(TypeError):
            push.data["k"] = "changed"  # type: ignore[index]
        assert push.data["k"] == "v"

    def test_data_detached_from_caller_dict(self) -> None:
        source = {"k": "v"}
        push = PushNotification("token123", data=source)

        source["k"] = "changed"

        assert push.data == {"k": "v"}

    def test_default_data_is_read_only(self) -> None:
        push = PushNotification(recipient="token123")

        with pytest.raises(TypeError):
            push.data["k"] = "v"  # type: ignore[index]


class TestNotificationBase:
    def test_base_class_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError, match="abstract"):
            Notification(recipient="x")


class TestParseNotification:
    def test_parses_each_channel(self) -> None:
        email = parse_notification(
            {"channel": "email", "recipient": "user@example.com", "subject": "Hi"}
        )
        sms = parse_notification(
            {"channel": "sms", "recipient": "+15551234567", "message": "Hi"}
        )
        push = parse_notification({"channel": "push", "recipient": "token123"})

        assert isinstance(email, EmailNotification)
        assert isinstance(sms, SMSNotification)
        assert isinstance(push, PushNotification)

    def test_missing_channel(self) -> None:
        with pytest.raises(ValidationError, match="Missing channel"):
            parse_notification({"recipient": "user@example.com"})

    def test_unknown_channel(self) -> None:
        with pytest.raises(ValidationError, match="Unknown notification channel"):
            parse_notification({"channel": "fax", "recipient": "123"})

    def test_invalid_fields(self) -> None:
        with pytest.raises(ValidationError, match="E.164"):
            parse_notification({"channel": "sms", "recipient": "123", "message": "x"})
