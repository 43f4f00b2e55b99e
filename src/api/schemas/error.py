"""
Error schemas - Pydantic models for error responses
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any
from datetime import datetime, timezone


class ErrorDetail(BaseModel):
    """Detailed error information"""
    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional context"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the error occurred"
    )


class ErrorResponse(BaseModel):
    """API error response - standardized format

    All API errors use this structure so clients can handle them the same way.
    """
    error: ErrorDetail = Field(description="Error information")
    request_id: Optional[str] = Field(None, description="Request ID for logging/debugging")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": {
                    "code": "FRAME_NOT_AVAILABLE",
                    "message": "No frame has been committed yet",
                    "details": None,
                    "timestamp": "2026-01-12T10:30:00Z"
                },
                "request_id": "5f0c8a52-6a8e-4a43-9f1e-2a3d1b0c9e11"
            }
        }
    )
