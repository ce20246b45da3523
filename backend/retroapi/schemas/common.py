"""
Retro Board Backend — Shared Response Schemas
==============================================

What:  The response envelope used by every route, plus the error, health
       and endpoint-listing payloads.

Envelope shape:
    Success:  {"response": <data>, "success": true}
    Failure:  {"response": {"error": ..., "message": ..., "request_id": ...}, "success": false}
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Wrapper for every successful response body."""

    response: T
    success: bool = Field(default=True, description="False only on error responses")


def envelope(data: Any) -> dict:
    """Build a success envelope around already-serializable data."""
    return {"response": data, "success": True}


class ErrorBody(BaseModel):
    """
    What:  Body of the `response` field on failures.

    Fields:
        error: Machine-readable error code (e.g., "invalid_input", "not_found")
        message: Human-readable description, safe for display
        details: Optional extra context (e.g., which fields failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ErrorResponse(BaseModel):
    response: ErrorBody
    success: bool = False


class WelcomeResponse(BaseModel):
    message: str
    endpoints: str


class EndpointInfo(BaseModel):
    path: str
    methods: List[str]


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
