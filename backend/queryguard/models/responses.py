"""API response models."""

from pydantic import BaseModel
from typing import Literal

from queryguard.validators.models import QueryValidationError


class QueryErrorResponse(BaseModel):
    """Body of a 400 response for a query that failed validation."""

    errors: list[QueryValidationError]


class UserQueryResponse(BaseModel):
    """Echo of a validated users query."""

    id: str
    filters: dict[str, str] = {}


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
