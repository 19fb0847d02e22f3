from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DispatchConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NOTIFICATION_")

    log_level: str = "INFO"
    max_workers: int = Field(default=10, gt=0)
    thread_name_prefix: str = "notification-dispatch"


class SendGridConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SENDGRID_")

    api_key: str
    from_email: str = "noreply@example.com"


class TwilioConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TWILIO_")

    account_sid: str
    auth_token: str
    from_phone_number: str = ""


class FCMConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FCM_")

    project_id: str = "my-app"
