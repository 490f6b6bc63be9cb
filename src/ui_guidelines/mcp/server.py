"""
server.py - MCP Server Core

Orchestrates transport and handler. Pure message routing, no business logic.

Architecture:
    Transport <-> MCPServer <-> Handler
"""

from __future__ import annotations

import asyncio
from typing import Any

from ui_guidelines.foundation.config.logging import get_logger

from .interfaces import MCPRequestHandler, MCPTransport
from .types import INVALID_REQUEST, JSONRPCResponse, make_error_response

logger = get_logger("ui_guidelines.mcp.server")


class MCPServer:
    """
    Minimal MCP Server.

    Validates the JSON-RPC envelope, forwards notifications and routes
    requests to the handler. It knows nothing about tools.
    """

    def __init__(
        self,
        handler: MCPRequestHandler,
        transport: MCPTransport | None = None,
    ):
        self.handler = handler
        self.transport = transport
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the MCP server (and its transport, if any)."""
        self._running = True
        await self.handler.initialize()
        if self.transport is not None:
            await self.transport.start()

    async def stop(self) -> None:
        """Stop the MCP server."""
        self._running = False
        if self.transport is not None:
            await self.transport.stop()

    async def process_message(self, message: Any) -> JSONRPCResponse | None:
        """
        Process a single JSON-RPC message.

        Returns:
            The response, or None for notifications.
        """
        if not isinstance(message, dict):
            return make_error_response(
                None, INVALID_REQUEST, "Invalid JSON-RPC message: must be an object"
            )

        if message.get("jsonrpc") != "2.0":
            return make_error_response(
                message.get("id"), INVALID_REQUEST, "Invalid JSON-RPC version"
            )

        method = message.get("method")
        msg_id = message.get("id")

        if not isinstance(method, str) or not method:
            return make_error_response(msg_id, INVALID_REQUEST, "Invalid JSON-RPC message: missing method")

        # Notifications (no id)
        if msg_id is None:
            if method.startswith("notifications/"):
                await self.handler.handle_notification(method, message.get("params"))
                return None
            return make_error_response(
                None, INVALID_REQUEST, "Invalid JSON-RPC message: request must have id"
            )

        return await self.handler.handle_request(message)

    async def process_batch(self, messages: list[Any]) -> list[JSONRPCResponse]:
        """
        Process a JSON-RPC batch concurrently.

        Returns:
            Responses for requests only, in completion order.
        """
        if not messages:
            return [make_error_response(None, INVALID_REQUEST, "Invalid JSON-RPC batch: empty")]

        responses: list[JSONRPCResponse] = []

        async def _process_and_collect(msg: Any) -> None:
            result = await self.process_message(msg)
            if result is not None:
                responses.append(result)

        async with asyncio.TaskGroup() as tg:
            for msg in messages:
                tg.create_task(_process_and_collect(msg))

        return responses

    async def run_forever(self) -> None:
        """Run the transport's message loop until it closes."""
        run_loop = getattr(self.transport, "run_loop", None)
        if run_loop is None:
            raise RuntimeError("Transport has no message loop")
        try:
            await run_loop(self)
        finally:
            await self.stop()


__all__ = ["MCPServer"]
