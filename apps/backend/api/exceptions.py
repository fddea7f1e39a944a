"""
Custom exceptions and error handlers for the API.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class APIError(HTTPException):
    """Base API error with structured error response."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error = error
        self.message = message
        self.details = details
        super().__init__(status_code=status_code, detail=message)


class NotFoundError(APIError):
    """Route has nothing to show."""

    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        if identifier not in (None, ""):
            message = f"{resource} {identifier!r} not found"
        super().__init__(
            status_code=404,
            error="not_found",
            message=message,
            details={"resource": resource, "id": identifier},
        )


class ValidationError(APIError):
    """Request validation error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            status_code=422,
            error="validation_error",
            message=message,
            details=details,
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions and return structured JSON response."""
    content = {
        "error": exc.error,
        "message": exc.message,
    }
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)
