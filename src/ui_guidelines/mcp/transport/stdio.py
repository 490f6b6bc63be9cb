"""
Stdio Transport (orjson-powered)

Newline-delimited JSON-RPC over stdin/stdout.
No business logic - only message transport.

stdout carries protocol frames exclusively; all logging goes to stderr.
"""

from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING, Any, BinaryIO

import orjson

from ui_guidelines.foundation.config.logging import get_logger

from ..types import INVALID_REQUEST, PARSE_ERROR, make_error_response

if TYPE_CHECKING:
    from ..server import MCPServer

logger = get_logger("ui_guidelines.mcp.transport.stdio")

# Per-line read limit for stdin (asyncio defaults to 64 KiB)
MAX_FRAME_BYTES = 16 * 1024 * 1024


class StdioTransport:
    """
    Stdio transport.

    - Reads raw bytes from stdin (orjson accepts bytes directly)
    - Writes raw bytes to stdout.buffer, one frame per line

    Usage:
        transport = StdioTransport()
        server = MCPServer(handler, transport)
        await server.start()
        await server.run_forever()
    """

    def __init__(
        self,
        reader: asyncio.StreamReader | None = None,
        writer: BinaryIO | None = None,
    ):
        """
        Args:
            reader: Pre-built stream reader; when omitted stdin is attached on start()
            writer: Binary output stream (defaults to sys.stdout.buffer)
        """
        self._reader = reader
        self._writer = writer
        self._pipe: asyncio.ReadTransport | None = None
        self._running = False

    @property
    def is_connected(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the stdio transport."""
        self._running = True
        if self._reader is None:
            self._reader = asyncio.StreamReader(limit=MAX_FRAME_BYTES)
            loop = asyncio.get_running_loop()
            self._pipe, _ = await loop.connect_read_pipe(
                lambda: asyncio.StreamReaderProtocol(self._reader),
                sys.stdin,
            )

    async def stop(self) -> None:
        """Stop the stdio transport."""
        self._running = False
        if self._pipe is not None:
            self._pipe.close()
            self._pipe = None

    async def run_loop(self, server: MCPServer) -> None:
        """
        Read frames until EOF and route each one through the server.

        Args:
            server: MCPServer instance to route messages through
        """
        while self._running and self._reader is not None:
            try:
                line_bytes = await self._reader.readline()
            except ValueError as e:
                # Oversized frame: readline has already dropped it from the buffer
                logger.warning("Dropped oversized frame", error=str(e))
                self._write(make_error_response(None, INVALID_REQUEST, "Invalid Request: message too large"))
                continue
            if not line_bytes:
                logger.info("stdin closed, stopping")
                break
            if not line_bytes.strip():
                continue
            try:
                await self._process_message(line_bytes, server)
            except Exception as e:
                logger.error("Failed to process message", error=str(e), exc_info=True)

    async def _process_message(self, line_bytes: bytes, server: MCPServer) -> None:
        """Process a single frame (bytes -> orjson -> route)."""
        try:
            data = orjson.loads(line_bytes)
        except orjson.JSONDecodeError as e:
            self._write(make_error_response(None, PARSE_ERROR, f"Parse error: {e}"))
            return

        if isinstance(data, list):
            responses = await server.process_batch(data)
            if responses:
                self._write(responses)
            return

        if not isinstance(data, dict):
            self._write(make_error_response(None, INVALID_REQUEST, "Message must be a JSON object"))
            return

        response = await server.process_message(data)
        if response is not None:
            self._write(response)

    def _write(self, payload: Any) -> None:
        """Write one frame to the output stream."""
        out = self._writer if self._writer is not None else sys.stdout.buffer
        out.write(orjson.dumps(payload, option=orjson.OPT_APPEND_NEWLINE))
        out.flush()


__all__ = ["MAX_FRAME_BYTES", "StdioTransport"]
