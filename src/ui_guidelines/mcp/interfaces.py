"""
interfaces.py - MCP Server Interfaces

Dependency inversion: the transport layer only talks to these protocols.
The guidelines handler implements MCPRequestHandler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .types import JSONRPCResponse


@runtime_checkable
class MCPRequestHandler(Protocol):
    """
    Protocol for handling MCP requests.

    The transport layer only knows this protocol, never the concrete handler.
    """

    async def handle_request(self, request: dict[str, Any]) -> JSONRPCResponse:
        """
        Handle a JSON-RPC request with ID (expects response).
        """
        ...

    async def handle_notification(self, method: str, params: Any | None) -> None:
        """
        Handle a JSON-RPC notification (no response expected).
        """
        ...

    async def initialize(self) -> None:
        """
        Called before the first request is served.
        """
        ...


@runtime_checkable
class MCPTransport(Protocol):
    """Protocol for transport layer implementations."""

    async def start(self) -> None:
        """Start the transport."""
        ...

    async def stop(self) -> None:
        """Stop the transport."""
        ...

    @property
    def is_connected(self) -> bool:
        """Check if transport is connected."""
        ...


__all__ = [
    "MCPRequestHandler",
    "MCPTransport",
]
