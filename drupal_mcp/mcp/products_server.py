"""MCP tool server exposing Drupal products.

Tools provided:
    - get_product_by_id: Fetch a product (node item) by UUID and return it
      flattened, sizes resolved to their names

The server is cheap to build and holds no per-call state, so the HTTP host
builds a fresh one for every inbound request.
"""

import json
import logging
from typing import Any, Optional, assert_never

from mcp.server import Server
from mcp.types import TextContent, Tool
from pydantic import BaseModel, Field

from drupal_mcp.lib.logging_config import log_with_context
from drupal_mcp.lib.telemetry import traced
from drupal_mcp.services.drupal import (
    DrupalClient,
    Found,
    NotFound,
    UnknownToolError,
    flatten_item,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "drupal-products-mcp"
SERVER_VERSION = "1.0.0"
GET_PRODUCT_TOOL = "get_product_by_id"


class GetProductArgs(BaseModel):
    """Arguments of the get_product_by_id tool."""

    id: str = Field(min_length=1, description="Product UUID")


def product_tools() -> list[Tool]:
    return [
        Tool(
            name=GET_PRODUCT_TOOL,
            description="Get a product (node item) by UUID from Drupal JSON:API and return a flattened object",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {
                        "type": "string",
                        "description": "Product UUID",
                        "minLength": 1,
                    }
                },
                "required": ["id"],
            },
        )
    ]


@traced(GET_PRODUCT_TOOL)
async def get_product_by_id(client: DrupalClient, arguments: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Fetch and flatten one product.

    Args:
        client: Drupal JSON:API client
        arguments: Raw tool arguments, validated before any request is made

    Returns:
        `{"ok": True, "product": {...}}`, or
        `{"ok": False, "error": "not_found", "id": ...}` when Drupal answers 404

    Raises:
        pydantic.ValidationError: If `id` is missing or empty
        DrupalTransportError: On unexpected upstream status
        PayloadValidationError: If the upstream document is malformed
    """
    args = GetProductArgs.model_validate(arguments or {})
    log_with_context(logger, "info", f"[{GET_PRODUCT_TOOL}] request", id=args.id)

    match await client.get_item(args.id):
        case NotFound():
            log_with_context(logger, "info", f"[{GET_PRODUCT_TOOL}] not_found", id=args.id)
            return {"ok": False, "error": "not_found", "id": args.id}
        case Found(document=document):
            product = flatten_item(document)
        case unexpected:
            assert_never(unexpected)

    log_with_context(logger, "info", f"[{GET_PRODUCT_TOOL}] ok", id=args.id, title=product.title)
    return {"ok": True, "product": product.model_dump(mode="json")}


def build_mcp_server(client: DrupalClient) -> Server:
    """Build a new MCP server bound to the given Drupal client."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return product_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool calls; any raised error becomes a failed tool call."""
        if name != GET_PRODUCT_TOOL:
            raise UnknownToolError(name)

        envelope = await get_product_by_id(client, arguments)
        return [TextContent(type="text", text=json.dumps(envelope))]

    return server
