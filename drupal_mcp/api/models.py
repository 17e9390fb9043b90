"""Response models for the HTTP host."""

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Liveness check response."""

    ok: bool = True


class ErrorResponse(BaseModel):
    """Body returned when the MCP endpoint fails before answering."""

    ok: bool = False
    error: str
