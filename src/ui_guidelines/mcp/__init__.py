"""
ui_guidelines.mcp - MCP protocol plumbing

Server core, handler/transport protocols and JSON-RPC helpers.
No guideline logic lives here.
"""

from .interfaces import MCPRequestHandler, MCPTransport
from .server import MCPServer
from .types import make_error_response, make_success_response

__all__ = [
    "MCPRequestHandler",
    "MCPServer",
    "MCPTransport",
    "make_error_response",
    "make_success_response",
]
