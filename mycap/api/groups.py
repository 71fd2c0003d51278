"""Group API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from mycap.api.dependencies import get_current_user, get_group_service
from mycap.api.responses import envelope
from mycap.models.user import User
from mycap.schemas.base import HTTPResponse
from mycap.schemas.group import GroupCreate, GroupResponse, JoinGroup, LeaveGroup
from mycap.services.group_service import GroupService

router = APIRouter(prefix="/api/v1", tags=["groups"])


@router.get("/groups", response_model=HTTPResponse[list[GroupResponse]])
async def get_groups(
    group_service: Annotated[GroupService, Depends(get_group_service)],
) -> JSONResponse:
    """Get all live groups with admin and participants."""
    groups = [GroupResponse.model_validate(g) for g in group_service.list_all()]
    return envelope(groups, "Success get all groups.")


@router.post(
    "/groups",
    response_model=HTTPResponse[GroupResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_group(
    group_data: GroupCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    group_service: Annotated[GroupService, Depends(get_group_service)],
) -> JSONResponse:
    """Create a group chat or conference owned by the caller."""
    group = group_service.create(current_user, group_data.type)
    return envelope(
        GroupResponse.model_validate(group),
        "Success create a new group.",
        status.HTTP_201_CREATED,
    )


@router.post("/join-groups", response_model=HTTPResponse[GroupResponse])
async def join_group(
    join_data: JoinGroup,
    current_user: Annotated[User, Depends(get_current_user)],
    group_service: Annotated[GroupService, Depends(get_group_service)],
) -> JSONResponse:
    """Join the group owned by another user."""
    group = group_service.join(current_user, join_data.admin_username)
    return envelope(GroupResponse.model_validate(group), "Success joining a group.")


@router.post("/leave-groups", response_model=HTTPResponse[GroupResponse])
async def leave_group(
    leave_data: LeaveGroup,
    current_user: Annotated[User, Depends(get_current_user)],
    group_service: Annotated[GroupService, Depends(get_group_service)],
) -> JSONResponse:
    """Leave a group. When the admin leaves, the group is closed."""
    group = group_service.leave(current_user, leave_data.admin_username, leave_data.remaining_time)
    return envelope(GroupResponse.model_validate(group), "Success leaving group.")
