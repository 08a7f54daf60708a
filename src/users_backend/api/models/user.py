"""Pydantic models for user endpoints."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_name(value: str) -> str:
    if not value:
        msg = "Name is required"
        raise ValueError(msg)
    return value


def _check_email(value: str) -> str:
    if EMAIL_PATTERN.fullmatch(value) is None:
        msg = "Invalid email format"
        raise ValueError(msg)
    return value


class UserCreate(BaseModel):
    """Payload for creating a new user."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _check_name(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)


class UserUpdate(BaseModel):
    """Payload for a partial user update; omitted or null fields stay unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        return value if value is None else _check_name(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        return value if value is None else _check_email(value)

    def changes(self) -> dict[str, str]:
        """Fields the client actually supplied."""
        return self.model_dump(exclude_none=True)


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
