"""Health check endpoints."""

from fastapi import APIRouter

from drupal_mcp.api.models import HealthCheckResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Report that the process is up. Drupal is not contacted."""
    return HealthCheckResponse(ok=True)
