"""
Authentication I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Schema for registering a new account."""

    username: str = Field(min_length=1, max_length=50, description="Unique login name")
    email: str = Field(min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$", description="Unique email")
    password: str = Field(min_length=1, description="Plain text password; stored only as a bcrypt hash")
    full_name: Optional[str] = Field(default=None, max_length=100)


class SigninRequest(BaseModel):
    """Schema for signing in with email and password."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SigninResponse(BaseModel):
    """Account summary plus the tokens issued at sign-in."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    email: str
    role: str
    access_token: Optional[str] = Field(alias="accessToken")
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")


class TokenVerifyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: int = Field(alias="userId")


class RefreshTokenRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    refresh_token: str = Field(min_length=1, alias="refreshToken")


class RefreshTokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_token: str = Field(alias="newToken")
    status: str = "success"


class PasswordResetRequest(BaseModel):
    email: str = Field(min_length=1)


class PasswordResetConfirm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(min_length=1)
    new_password: str = Field(min_length=1, alias="newPassword")
