"""
Error handling middleware for API

Converts exceptions raised inside endpoints into the ErrorResponse envelope:
- Domain errors (frame not available, render loop missing)
- Unexpected errors (500)
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
import uuid
from typing import Optional

from api.schemas.error import ErrorResponse, ErrorDetail
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.API)


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
        status_code: int = 400
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)


class FrameNotAvailableError(DomainError):
    """No frame committed yet"""
    def __init__(self):
        super().__init__(
            code="FRAME_NOT_AVAILABLE",
            message="No frame has been committed yet",
            status_code=404
        )


class RendererUnavailableError(DomainError):
    """Render loop not registered with the API"""
    def __init__(self):
        super().__init__(
            code="RENDERER_UNAVAILABLE",
            message="Render loop not initialized. Renderer may still be starting.",
            status_code=503
        )


def _error_response(code: str, message: str, details: Optional[dict], status_code: int, request_id: str) -> JSONResponse:
    response = ErrorResponse(
        error=ErrorDetail(
            code=code,
            message=message,
            details=details,
            timestamp=datetime.now(timezone.utc)
        ),
        request_id=request_id
    )
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app"""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        request_id = str(uuid.uuid4())
        log.warn(f"Domain error: {exc.code} - {exc.message}", request_id=request_id, path=request.url.path)
        return _error_response(exc.code, exc.message, exc.details, exc.status_code, request_id)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        request_id = str(uuid.uuid4())
        log.error(
            f"Unexpected error: {type(exc).__name__}: {exc}",
            request_id=request_id,
            path=request.url.path
        )
        return _error_response(
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred. Please try again.",
            {"request_id": request_id},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            request_id
        )
