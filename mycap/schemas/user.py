"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserTypeResponse(BaseModel):
    """User type (tier) response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    username: str
    email: str
    remaining_time: int
    reached_time_limit: bool
    type_id: int
    type: UserTypeResponse
    created_at: datetime
    updated_at: datetime


class UserUpdate(BaseModel):
    """Full replacement of a user's mutable attributes."""

    name: str = Field(..., min_length=1, max_length=255)
    remaining_time: int = Field(..., ge=0)
    reached_time_limit: bool
    type_id: int | None = None
