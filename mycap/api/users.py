"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mycap.api.dependencies import get_current_user, get_user_service
from mycap.api.responses import envelope
from mycap.models.user import User
from mycap.schemas.base import HTTPResponse
from mycap.schemas.user import UserResponse, UserUpdate
from mycap.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=HTTPResponse[list[UserResponse]])
async def get_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    """Get all users."""
    users = [UserResponse.model_validate(u) for u in user_service.list_all()]
    return envelope(users, "Success get all users.")


@router.put("/{user_id}", response_model=HTTPResponse[UserResponse])
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    """Update a user by ID."""
    user = user_service.update(
        user_id,
        name=user_data.name,
        remaining_time=user_data.remaining_time,
        reached_time_limit=user_data.reached_time_limit,
        type_id=user_data.type_id,
    )
    return envelope(UserResponse.model_validate(user), "Success update user.")


@router.delete("/{user_id}", response_model=HTTPResponse[None])
async def delete_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    """Delete a user by ID."""
    user_service.delete(user_id)
    return envelope(None, "Success delete user.")
