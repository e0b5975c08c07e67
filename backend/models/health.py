"""
Health and service info schemas.

Dependencies: pydantic
System role: Liveness API contracts
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str
    timestamp: str


class DatabaseHealthResponse(BaseModel):
    """Database connectivity check response."""

    status: str
    database: bool


class ServiceInfoResponse(BaseModel):
    """Static capability listing."""

    message: str
    version: str
    endpoints: dict[str, str]
