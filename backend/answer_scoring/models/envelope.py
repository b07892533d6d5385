"""Generic API response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiError(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    field: str | None = None


class ApiResponse(BaseModel, Generic[T]):
    """Standard response envelope wrapping all API responses."""

    status: str = "success"
    data: T | None = None
    errors: list[ApiError] = []
    meta: dict = {}


def success_response(data: object, **meta: object) -> dict:
    """Build a success envelope dict."""
    return ApiResponse[object](data=data, meta=meta).model_dump()


def error_response(errors: list[ApiError], **meta: object) -> dict:
    """Build an error envelope dict."""
    return ApiResponse[object](status="error", errors=errors, meta=meta).model_dump()
