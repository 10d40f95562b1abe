# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator

from dispatchdesk.schemas.user import UserResponse

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class RegisterRequest(BaseModel):
    """Registration request; the account stays pending until approved."""

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    # bcrypt only considers the first 72 bytes
    password: str = Field(..., min_length=8, max_length=72)
    first_name: str | None = Field(None, min_length=2, max_length=100)
    last_name: str | None = Field(None, min_length=2, max_length=100)
    phone: str | None = Field(None, max_length=30)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username must contain only alphanumeric characters and underscores")
        return v


class RegisterResponse(BaseModel):
    """Registration result."""

    message: str
    requires_approval: bool = True


class AuthResponse(BaseModel):
    """Authenticated user with their effective capabilities."""

    user: UserResponse
    capabilities: dict[str, bool]
