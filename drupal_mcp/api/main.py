"""FastAPI application hosting the products MCP server over HTTP."""

import logging
from typing import Optional

from fastapi import FastAPI

from drupal_mcp.api.mcp_endpoint import McpHttpEndpoint
from drupal_mcp.api.middleware import CorrelationMiddleware
from drupal_mcp.api.routers import health
from drupal_mcp.mcp.products_server import SERVER_NAME, SERVER_VERSION
from drupal_mcp.services.drupal import DrupalSettings, get_drupal_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[DrupalSettings] = None) -> FastAPI:
    """Create the HTTP host.

    Args:
        settings: Drupal settings; resolved from configuration when omitted

    Raises:
        ConfigurationError: If DRUPAL_JSONAPI_BASE is not configured
    """
    settings = settings or get_drupal_settings()

    app = FastAPI(
        title="Drupal Products MCP",
        description="MCP tool server for Drupal JSON:API products",
        version=SERVER_VERSION,
    )
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health.router)
    app.add_route("/mcp", McpHttpEndpoint(settings), methods=["POST"])

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "health": "/health",
            "endpoints": {
                "health": "GET /health",
                "mcp": "POST /mcp",
            },
        }

    logger.info(f"HTTP host configured for upstream {settings.base_url}")
    return app
