"""Core schemas for API responses."""

from coderev.core.schemas.responses import ErrorResponse, HealthResponse

__all__ = ["ErrorResponse", "HealthResponse"]
