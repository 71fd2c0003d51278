"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field

from mycap.schemas.user import UserResponse


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    type_id: int | None = None  # 1: Free, 2: Premium, 3: Pro


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class AuthResponse(BaseModel):
    """Authentication payload with token and user info."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"  # noqa: S105
