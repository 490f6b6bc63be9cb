"""
handler.py - Guidelines MCP Handler

Implements MCPRequestHandler for the guideline tools:

    initialize  -> protocol negotiation + server info
    ping        -> {}
    tools/list  -> the five guideline tools
    tools/call  -> run a tool, always answered with a text result

Logging: Uses Foundation layer (ui_guidelines.foundation.config.logging)
"""

from __future__ import annotations

import asyncio
from typing import Any

from mcp.shared.version import SUPPORTED_PROTOCOL_VERSIONS
from mcp.types import LATEST_PROTOCOL_VERSION

from ui_guidelines.core.errors import ToolNotFoundError
from ui_guidelines.core.tools import call_tool, list_tools
from ui_guidelines.foundation.config.logging import get_logger
from ui_guidelines.foundation.config.settings import get_setting
from ui_guidelines.mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    JSONRPCResponse,
    make_error_response,
    make_success_response,
)

logger = get_logger("ui_guidelines.handler")


def negotiate_protocol_version(requested: Any) -> str:
    """Echo a supported client version, otherwise offer the latest one."""
    if isinstance(requested, str) and requested in SUPPORTED_PROTOCOL_VERSIONS:
        return requested
    return LATEST_PROTOCOL_VERSION


class GuidelinesMCPHandler:
    """
    MCP adapter over the guideline tool catalogue.

    Stateless apart from the initialized flag: every tool reads the
    immutable corpus, so concurrent requests need no locking.
    """

    def __init__(self):
        self._initialized = False
        self._initialize_lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        if self._initialized:
            return
        async with self._initialize_lock:
            if self._initialized:
                return
            self._initialized = True
            logger.info("Guidelines handler ready", tools=len(list_tools()))

    async def handle_request(self, request: dict[str, Any]) -> JSONRPCResponse:
        """Handle a JSON-RPC request."""
        if not self._initialized:
            await self.initialize()

        method = request.get("method", "")
        req_id = request.get("id")

        try:
            if method == "initialize":
                return self._handle_initialize(request)
            elif method == "ping":
                return make_success_response(req_id, {})
            elif method == "tools/list":
                return make_success_response(req_id, {"tools": list_tools()})
            elif method == "tools/call":
                return await self._handle_call_tool(request)
            elif method in ("resources/list", "prompts/list"):
                return make_success_response(req_id, {method.split("/")[0]: []})
            else:
                return make_error_response(req_id, METHOD_NOT_FOUND, f"Method not found: {method}")

        except Exception as e:
            logger.error("Request error", method=method, error=str(e), exc_info=True)
            return make_error_response(req_id, INTERNAL_ERROR, str(e))

    async def handle_notification(self, method: str, params: Any | None) -> None:
        """Handle notifications from MCP client."""
        if method == "notifications/initialized":
            logger.info("Client initialized")
        else:
            logger.debug("Received notification", method=method)

    def _handle_initialize(self, request: dict[str, Any]) -> JSONRPCResponse:
        params = request.get("params") or {}
        if not isinstance(params, dict):
            return make_error_response(request.get("id"), INVALID_PARAMS, "Params must be an object")
        version = negotiate_protocol_version(params.get("protocolVersion"))
        client = params.get("clientInfo") or {}
        logger.info("Initialize", client=client.get("name"), protocol=version)

        return make_success_response(
            request.get("id"),
            {
                "protocolVersion": version,
                "serverInfo": {
                    "name": get_setting("server.name", "ui-guidelines"),
                    "version": get_setting("server.version", "0.1.0"),
                },
                "capabilities": {"tools": {"listChanged": False}},
            },
        )

    async def _handle_call_tool(self, request: dict[str, Any]) -> JSONRPCResponse:
        req_id = request.get("id")
        params = request.get("params") or {}
        if not isinstance(params, dict):
            return make_error_response(req_id, INVALID_PARAMS, "Params must be an object")
        name = params.get("name")
        arguments = params.get("arguments") or {}

        if not isinstance(name, str) or not name:
            return make_error_response(req_id, INVALID_PARAMS, "Missing tool name")
        if not isinstance(arguments, dict):
            return make_error_response(req_id, INVALID_PARAMS, "Tool arguments must be an object")

        try:
            result = await call_tool(name, arguments)
        except ToolNotFoundError as e:
            return make_error_response(req_id, INVALID_PARAMS, str(e))

        logger.debug("Tool call", tool=name, is_error=result.get("isError", False))
        return make_success_response(req_id, result)


def create_handler() -> GuidelinesMCPHandler:
    return GuidelinesMCPHandler()


__all__ = ["GuidelinesMCPHandler", "create_handler", "negotiate_protocol_version"]
