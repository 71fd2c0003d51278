"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from mycap.api.dependencies import get_user_service
from mycap.api.responses import envelope
from mycap.schemas.auth import AuthResponse, UserLogin, UserRegister
from mycap.schemas.base import HTTPResponse
from mycap.schemas.user import UserResponse, UserTypeResponse
from mycap.services.auth import create_access_token
from mycap.services.user_service import UserService

router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post(
    "/register",
    response_model=HTTPResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserRegister,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    """Register a new user."""
    user = user_service.register(
        name=user_data.name,
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        type_id=user_data.type_id,
    )

    auth = AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=create_access_token(user.name, user.email),
    )
    return envelope(auth, "Success register a new user.", status.HTTP_201_CREATED)


@router.post("/login", response_model=HTTPResponse[AuthResponse])
async def login(
    credentials: UserLogin,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    """Login with email and password."""
    user = user_service.authenticate(credentials.email, credentials.password)

    auth = AuthResponse(
        user=UserResponse.model_validate(user),
        access_token=create_access_token(user.name, user.email),
    )
    return envelope(auth, "Success login.")


@router.get("/user-types", response_model=HTTPResponse[list[UserTypeResponse]])
async def get_user_types(
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    """List the available user types."""
    user_types = [UserTypeResponse.model_validate(t) for t in user_service.list_types()]
    return envelope(user_types, "Success get all user types.")
