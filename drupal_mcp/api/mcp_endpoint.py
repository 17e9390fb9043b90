"""Single-shot MCP endpoint for the HTTP host.

Every inbound request gets its own MCP server and stateless
Streamable HTTP transport; both are torn down once the one JSON response has
been sent, so concurrent callers never share protocol state.
"""

import logging

import anyio
from mcp.server.streamable_http import StreamableHTTPServerTransport
from starlette.responses import JSONResponse
from starlette.types import Message, Receive, Scope, Send

from drupal_mcp.api.models import ErrorResponse
from drupal_mcp.mcp.products_server import build_mcp_server
from drupal_mcp.services.drupal import DrupalClient, DrupalSettings

logger = logging.getLogger(__name__)


class McpHttpEndpoint:
    """ASGI app answering one MCP JSON-RPC message per HTTP request."""

    def __init__(self, settings: DrupalSettings):
        self.settings = settings

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        async def run_server(server, transport, *, task_status=anyio.TASK_STATUS_IGNORED) -> None:
            async with transport.connect() as (read_stream, write_stream):
                task_status.started()
                await server.run(
                    read_stream,
                    write_stream,
                    server.create_initialization_options(),
                    stateless=True,
                )

        try:
            server = build_mcp_server(DrupalClient(self.settings))
            transport = StreamableHTTPServerTransport(
                mcp_session_id=None,
                is_json_response_enabled=True,
            )
            async with anyio.create_task_group() as tg:
                await tg.start(run_server, server, transport)
                await transport.handle_request(scope, receive, tracking_send)
                await transport.terminate()
                tg.cancel_scope.cancel()
        except Exception as e:
            logger.exception("MCP error")
            if response_started:
                raise
            response = JSONResponse(ErrorResponse(error=str(e)).model_dump(), status_code=500)
            await response(scope, receive, send)
