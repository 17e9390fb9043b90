#!/usr/bin/env python
"""Run the products MCP server over stdin/stdout.

Usage:
    python -m drupal_mcp.mcp.stdio

Logs go to stderr; stdout carries the protocol.
"""

import asyncio
import logging

from mcp.server.stdio import stdio_server

from drupal_mcp.lib.config_manager import config
from drupal_mcp.lib.logging_config import setup_logging
from drupal_mcp.lib.telemetry import setup_tracing
from drupal_mcp.mcp.products_server import build_mcp_server
from drupal_mcp.services.drupal import DrupalClient, DrupalSettings, get_drupal_settings

logger = logging.getLogger(__name__)


async def run_stdio(settings: DrupalSettings) -> None:
    """Serve one long-lived MCP session on the process pipes."""
    server = build_mcp_server(DrupalClient(settings))
    logger.info(f"MCP stdio server ready (upstream {settings.base_url})")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Resolve settings, then serve. Missing base URL aborts startup."""
    setup_logging("stdio", config.get("LOG_LEVEL"))
    settings = get_drupal_settings()
    config.log_summary()
    setup_tracing("stdio")
    asyncio.run(run_stdio(settings))


if __name__ == "__main__":
    main()
