"""Immutable request value objects, one per channel kind."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from notify_dispatch.exceptions import require_not_none


class _Request(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    def __init__(self, **data: Any) -> None:
        # None is rejected before pydantic runs so callers get NullArgumentError
        for name in type(self).model_fields:
            if name in data:
                require_not_none(data[name], name)
        super().__init__(**data)


def _not_blank(value: str, field_name: str) -> str:
    if not value.strip():
        raise ValueError(f"{field_name} must not be blank")
    return value


class EmailRequest(_Request):
    to: str
    subject: str
    body: str

    @field_validator("to")
    @classmethod
    def _check_to(cls, value: str) -> str:
        return _not_blank(value, "to")


class SmsRequest(_Request):
    phone_number: str
    message: str

    @field_validator("phone_number")
    @classmethod
    def _check_phone_number(cls, value: str) -> str:
        return _not_blank(value, "phone_number")


class PushRequest(_Request):
    device_token: str
    title: str
    body: str

    @field_validator("device_token")
    @classmethod
    def _check_device_token(cls, value: str) -> str:
        return _not_blank(value, "device_token")


NotificationRequest = EmailRequest | SmsRequest | PushRequest
