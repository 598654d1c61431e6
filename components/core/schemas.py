"""Core schemas for the application."""

from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Service readiness, including the database round trip."""
    service_name: str
    status: str  # "healthy" or "unhealthy"
    database: str  # "ok" or "unreachable"


class MessageResponse(BaseModel):
    """Schema for plain message responses."""
    message: str
