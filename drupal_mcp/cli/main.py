#!/usr/bin/env python
"""Command line entry points for the products MCP server.

Usage:
    drupal-mcp stdio                   # serve MCP over stdin/stdout
    drupal-mcp http --port 3000        # serve GET /health and POST /mcp
    drupal-mcp get-product <uuid>      # one-off lookup, prints the envelope
"""

import asyncio
import json
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from drupal_mcp.lib.config_manager import config
from drupal_mcp.lib.logging_config import setup_logging
from drupal_mcp.lib.telemetry import setup_tracing
from drupal_mcp.services.drupal import ConfigurationError, DrupalClient, get_drupal_settings

app = typer.Typer(help="Drupal products MCP server")
console = Console(stderr=True)


def _settings_or_exit():
    try:
        settings = get_drupal_settings()
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    config.log_summary()
    return settings


@app.command()
def stdio() -> None:
    """Serve the MCP tool server over stdin/stdout."""
    from drupal_mcp.mcp.stdio import run_stdio

    setup_logging("stdio", config.get("LOG_LEVEL"))
    settings = _settings_or_exit()
    setup_tracing("stdio")
    asyncio.run(run_stdio(settings))


@app.command()
def http(
    host: Optional[str] = typer.Option(None, help="Bind address (default: HOST config)"),
    port: Optional[int] = typer.Option(None, help="Port (default: PORT config)"),
) -> None:
    """Serve the HTTP host (GET /health, POST /mcp)."""
    from drupal_mcp.api.main import create_app

    setup_logging("http", config.get("LOG_LEVEL"))
    settings = _settings_or_exit()
    fastapi_app = create_app(settings)
    setup_tracing("http", app=fastapi_app)

    bind_host = host or config.get("HOST")
    bind_port = port or config.get("PORT")
    console.print(f"MCP server listening on :{bind_port} (POST /mcp)")
    uvicorn.run(fastapi_app, host=bind_host, port=bind_port, log_config=None)


@app.command("get-product")
def get_product(product_id: str = typer.Argument(..., help="Product UUID")) -> None:
    """Fetch one product and print the tool's JSON envelope."""
    from drupal_mcp.mcp.products_server import get_product_by_id

    setup_logging("cli", config.get("LOG_LEVEL"))
    client = DrupalClient(_settings_or_exit())
    envelope = asyncio.run(get_product_by_id(client, {"id": product_id}))
    Console().print_json(json.dumps(envelope))
    if not envelope["ok"]:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
