"""Group schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mycap.models.enums import GroupType
from mycap.schemas.user import UserResponse


class GroupCreate(BaseModel):
    """Create a group chat or conference.

    ``type`` stays a plain string here; it is checked against GroupType only
    after the duplicate-admin and quota checks have run.
    """

    type: str = Field(..., max_length=50)


class JoinGroup(BaseModel):
    """Join the group owned by ``admin_username``."""

    admin_username: str = Field(..., min_length=1, max_length=255)


class LeaveGroup(BaseModel):
    """Leave a group, reporting the caller's remaining time."""

    admin_username: str = Field(..., min_length=1, max_length=255)
    remaining_time: int = Field(..., ge=0)


class GroupResponse(BaseModel):
    """Group response with admin and participants expanded."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    admin_id: int
    admin_username: str
    admin: UserResponse
    type: GroupType
    participants: list[UserResponse]
    created_at: datetime
    updated_at: datetime
