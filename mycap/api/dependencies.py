"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from mycap.database import get_db
from mycap.errors import UnauthorizedError
from mycap.models.user import User
from mycap.services.auth import decode_access_token
from mycap.services.group_service import GroupService
from mycap.services.user_service import UserService

security = HTTPBearer(auto_error=False)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service bound to the request session."""
    return UserService(db)


def get_group_service(
    db: Annotated[Session, Depends(get_db)],
) -> GroupService:
    """Get group service bound to the request session."""
    return GroupService(db)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None:
        raise UnauthorizedError("Missing or malformed JWT.")

    claims = decode_access_token(credentials.credentials)

    user = user_service.get_by_email(claims.email)
    if user is None:
        raise UnauthorizedError("User not found.")

    return user
