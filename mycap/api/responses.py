"""Helpers that wrap payloads and errors in the response envelope."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mycap.schemas.base import HTTPResponse


def _dump(item: Any) -> Any:
    return item.model_dump(mode="json") if isinstance(item, BaseModel) else item


def envelope(data: Any, message: str, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Successful response with ``data`` as payload."""
    data = [_dump(item) for item in data] if isinstance(data, list) else _dump(data)

    body = HTTPResponse[Any](success=True, data=data, status=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def error_envelope(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    """Failed response carrying only a status and message."""
    body = HTTPResponse[Any](success=False, data=None, status=status_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )
