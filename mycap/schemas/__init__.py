"""Pydantic schemas for API requests and responses."""

from mycap.schemas.auth import AuthResponse, UserLogin, UserRegister
from mycap.schemas.base import HTTPResponse
from mycap.schemas.group import GroupCreate, GroupResponse, JoinGroup, LeaveGroup
from mycap.schemas.user import UserResponse, UserTypeResponse, UserUpdate

__all__ = [
    "HTTPResponse",
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "UserTypeResponse",
    "UserUpdate",
    "GroupCreate",
    "JoinGroup",
    "LeaveGroup",
    "GroupResponse",
]
