"""SQLAlchemy models."""

from mycap.models.group import Group, GroupParticipant
from mycap.models.user import User, UserType

__all__ = [
    "User",
    "UserType",
    "Group",
    "GroupParticipant",
]
