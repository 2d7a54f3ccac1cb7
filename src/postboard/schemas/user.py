"""Pydantic schemas for signup and login.

Learn: Fields default to "" and validate_default is on, so a missing
field runs the same validator as an empty one and reports the friendly
message ("Name is required") instead of pydantic's generic "Field required".
"""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6


def _check_email(value: str) -> str:
    if not EMAIL_RE.match(value):
        raise ValueError("Invalid email")
    return value


class SignupRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""

    model_config = {"validate_default": True}

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_long_enough(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        return v


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""

    model_config = {"validate_default": True}

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class UserRead(BaseModel):
    """Public view of a user. Never includes the password hash."""
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class TokenResponse(BaseModel):
    token: str
