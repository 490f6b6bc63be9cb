"""
JSON-RPC 2.0 Message Types

Plain dicts for outgoing messages; error codes come from the MCP SDK.
"""

from __future__ import annotations

from typing import Any, NotRequired, TypeAlias, TypedDict

from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
)

RequestId: TypeAlias = str | int | None


class JSONRPCError(TypedDict):
    """Error object for JSON-RPC error responses."""

    code: int
    message: str


class JSONRPCResponse(TypedDict):
    """JSON-RPC response: exactly one of result / error is present."""

    jsonrpc: str
    id: RequestId
    result: NotRequired[Any]
    error: NotRequired[JSONRPCError]


def make_success_response(id_val: RequestId, result: Any) -> JSONRPCResponse:
    """Create a success response. JSON-RPC 2.0: only 'result', no 'error' key."""
    return {
        "jsonrpc": "2.0",
        "id": id_val,
        "result": result,
    }


def make_error_response(id_val: RequestId, code: int, message: str) -> JSONRPCResponse:
    """Create an error response. JSON-RPC 2.0: only 'error', no 'result' key."""
    return {
        "jsonrpc": "2.0",
        "id": id_val,
        "error": {"code": code, "message": message},
    }


__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "JSONRPCError",
    "JSONRPCResponse",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "RequestId",
    "make_error_response",
    "make_success_response",
]
