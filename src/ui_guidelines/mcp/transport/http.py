"""
HTTP Transport

JSON-RPC over plain HTTP POST, served by starlette + uvicorn.

Routes:
    POST /mcp   - one JSON-RPC message or batch per request
    GET  /mcp   - server info
    GET  /health
"""

from __future__ import annotations

import asyncio

import orjson
import uvicorn
from mcp.types import LATEST_PROTOCOL_VERSION
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from ui_guidelines.foundation.config.logging import get_logger
from ui_guidelines.foundation.config.settings import get_setting

from ..interfaces import MCPRequestHandler
from ..server import MCPServer
from ..types import INTERNAL_ERROR, INVALID_REQUEST, PARSE_ERROR, make_error_response

logger = get_logger("ui_guidelines.mcp.transport.http")

DEFAULT_REQUEST_TIMEOUT = 60.0


def _json(payload, status_code: int = 200) -> Response:
    return Response(content=orjson.dumps(payload), status_code=status_code, media_type="application/json")


def create_http_app(
    handler: MCPRequestHandler,
    request_timeout: float | None = None,
) -> Starlette:
    """Create the Starlette application.

    Args:
        handler: MCP request handler
        request_timeout: Seconds before a request is answered with 504
            (defaults to the `mcp.request_timeout` setting)
    """
    if request_timeout is None:
        request_timeout = float(get_setting("mcp.request_timeout", DEFAULT_REQUEST_TIMEOUT))
    server = MCPServer(handler)

    async def handle_mcp(request: Request) -> Response:
        body = await request.body()
        if not body.strip():
            return _json(make_error_response(None, INVALID_REQUEST, "Invalid Request: Empty body"), 400)

        try:
            data = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            return _json(make_error_response(None, PARSE_ERROR, f"Parse error: {e}"), 400)

        if not isinstance(data, (dict, list)):
            return _json(make_error_response(None, INVALID_REQUEST, "Message must be a JSON object"), 400)

        req_id = data.get("id") if isinstance(data, dict) else None
        try:
            if isinstance(data, list):
                response = await asyncio.wait_for(server.process_batch(data), timeout=request_timeout)
            else:
                response = await asyncio.wait_for(server.process_message(data), timeout=request_timeout)
        except TimeoutError:
            logger.error("Request timeout", id=req_id, timeout=request_timeout)
            return _json(make_error_response(req_id, INTERNAL_ERROR, "Request timeout"), 504)
        except Exception as e:
            logger.error("Error handling MCP request", error=str(e), exc_info=True)
            return _json(make_error_response(req_id, INTERNAL_ERROR, f"Internal error: {e}"), 500)

        # Notifications (and batches of only notifications) get no body
        if not response:
            return Response(status_code=202)
        return _json(response)

    async def handle_info(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "name": get_setting("server.name", "ui-guidelines"),
                "version": get_setting("server.version", "0.1.0"),
                "protocolVersion": LATEST_PROTOCOL_VERSION,
            }
        )

    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "healthy"})

    routes = [
        Route("/mcp", handle_mcp, methods=["POST"]),
        Route("/mcp", handle_info, methods=["GET"]),
        Route("/health", health),
    ]
    return Starlette(routes=routes)


async def run_http(
    handler: MCPRequestHandler,
    host: str = "127.0.0.1",
    port: int = 3000,
    log_level: str = "info",
) -> None:
    """Run the HTTP server until interrupted."""
    await handler.initialize()
    app = create_http_app(handler)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level)
    server = uvicorn.Server(config)
    logger.info("HTTP transport listening", host=host, port=port)
    await server.serve()


__all__ = ["DEFAULT_REQUEST_TIMEOUT", "create_http_app", "run_http"]
