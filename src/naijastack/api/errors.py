"""Structured error response models for consistent API error handling."""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from naijastack.core.errors import UpstreamAPIError


class ErrorResponse(BaseModel):
    """Standardized error response schema."""

    error: bool = True
    code: str
    message: str
    details: dict[str, Any] | None = None


def create_error_response(code: str, message: str, details: dict[str, Any] | None = None) -> ErrorResponse:
    """Create standardized error response."""
    return ErrorResponse(code=code, message=message, details=details)


async def upstream_error_handler(request: Request, exc: UpstreamAPIError) -> JSONResponse:
    """Map an UpstreamAPIError escaping a route to a 502 with the upstream status in the body."""
    body = create_error_response(
        code="upstream_error",
        message=exc.message,
        details={"provider": exc.provider, "upstream_status": exc.status_code},
    )
    return JSONResponse(status_code=502, content=body.model_dump())
