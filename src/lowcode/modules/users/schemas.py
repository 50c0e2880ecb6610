"""Pydantic schemas for user operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from lowcode.core.constants import MAX_NAME_LENGTH, MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from lowcode.core.permissions.roles import Role


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserBase(BaseModel):
    """Base schema for user data."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    role: Role

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("name")
    @classmethod
    def name_trimmed(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty")
        return v


class UserCreate(UserBase):
    """Schema for creating a new user with password."""

    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )


class UserResponse(UserBase):
    """Schema for user response data. The password hash is never exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    """Schema for listing users."""

    items: list[UserResponse]
    total: int
    limit: int
    offset: int


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: EmailStr
    password: str
