"""Pydantic schemas for registration, login and user payloads."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from brandkit.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """Schema for creating an account."""

    username: str = Field(..., min_length=1, max_length=255, description="Login name")
    password: str = Field(..., min_length=1, max_length=1024, description="Plain-text password")
    email: EmailStr = Field(..., description="Email address")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")

    @field_validator("username", "name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError("Value cannot be empty or whitespace only")
        return v


class LoginRequest(CamelModel):
    """Schema for signing in."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=1024)


class UserResponse(CamelModel):
    """Account as returned to its owner. The password hash is never included."""

    id: int
    username: str
    email: str
    name: str
    created_at: datetime


class UserSummary(CamelModel):
    """Public identity shown next to projects and memberships."""

    id: int
    name: str
    username: str
