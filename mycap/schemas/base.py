"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class HTTPResponse(BaseModel, Generic[DataT]):
    """Uniform response body: ``{success, data, status, message}``."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    data: DataT | None = Field(default=None, description="Response payload")
    status: int = Field(default=200, description="HTTP status code of the response")
    message: str = Field(default="", description="Human-readable result message")
