"""Tests for GuidelinesMCPHandler request routing."""

from __future__ import annotations

from typing import Any
from unittest.mock import patch

import pytest
from mcp.types import LATEST_PROTOCOL_VERSION

from ui_guidelines.handler import GuidelinesMCPHandler, create_handler, negotiate_protocol_version
from ui_guidelines.mcp.interfaces import MCPRequestHandler
from ui_guidelines.mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND


def _request(method: str, params: Any = None, req_id: int = 1) -> dict:
    message = {"jsonrpc": "2.0", "id": req_id, "method": method}
    if params is not None:
        message["params"] = params
    return message


class TestProtocol:
    def test_implements_request_handler(self):
        assert isinstance(create_handler(), MCPRequestHandler)

    def test_negotiate_echoes_supported_version(self):
        assert negotiate_protocol_version("2024-11-05") == "2024-11-05"

    def test_negotiate_falls_back_to_latest(self):
        assert negotiate_protocol_version("1999-01-01") == LATEST_PROTOCOL_VERSION
        assert negotiate_protocol_version(None) == LATEST_PROTOCOL_VERSION


class TestHandleRequest:
    @pytest.mark.asyncio
    async def test_initialize(self):
        handler = GuidelinesMCPHandler()
        response = await handler.handle_request(
            _request("initialize", {"protocolVersion": "2024-11-05", "clientInfo": {"name": "test"}})
        )
        result = response["result"]
        assert response["id"] == 1
        assert "error" not in response
        assert result["protocolVersion"] == "2024-11-05"
        assert result["serverInfo"] == {"name": "ui-guidelines", "version": "0.1.0"}
        assert result["capabilities"] == {"tools": {"listChanged": False}}
        assert handler.is_ready

    @pytest.mark.asyncio
    async def test_ping(self):
        response = await GuidelinesMCPHandler().handle_request(_request("ping", req_id=7))
        assert response == {"jsonrpc": "2.0", "id": 7, "result": {}}

    @pytest.mark.asyncio
    async def test_tools_list(self):
        response = await GuidelinesMCPHandler().handle_request(_request("tools/list"))
        names = [tool["name"] for tool in response["result"]["tools"]]
        assert names == [
            "get_guidelines",
            "search_guidelines",
            "validate_pattern",
            "get_updated_docs",
            "get_quick_tips",
        ]

    @pytest.mark.asyncio
    async def test_tools_call(self):
        response = await GuidelinesMCPHandler().handle_request(
            _request("tools/call", {"name": "get_quick_tips", "arguments": {"scenario": "buttons"}})
        )
        result = response["result"]
        assert result["isError"] is False
        assert result["content"][0]["text"].startswith("## Buttons Quick Tips")

    @pytest.mark.asyncio
    async def test_tools_call_bad_arguments_is_tool_error(self):
        response = await GuidelinesMCPHandler().handle_request(
            _request("tools/call", {"name": "get_quick_tips", "arguments": {"scenario": "tables"}})
        )
        assert "error" not in response
        assert response["result"]["isError"] is True

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        response = await GuidelinesMCPHandler().handle_request(
            _request("tools/call", {"name": "nope", "arguments": {}})
        )
        assert response["error"]["code"] == INVALID_PARAMS
        assert "nope" in response["error"]["message"]

    @pytest.mark.asyncio
    async def test_missing_tool_name(self):
        response = await GuidelinesMCPHandler().handle_request(_request("tools/call", {}))
        assert response["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["tools/call", "initialize"])
    @pytest.mark.parametrize("params", [["search_guidelines"], "search_guidelines", 3])
    async def test_non_object_params(self, method, params):
        response = await GuidelinesMCPHandler().handle_request(_request(method, params))
        assert response["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_non_object_arguments(self):
        response = await GuidelinesMCPHandler().handle_request(
            _request("tools/call", {"name": "search_guidelines", "arguments": ["x"]})
        )
        assert response["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_empty_resources_and_prompts(self):
        handler = GuidelinesMCPHandler()
        assert (await handler.handle_request(_request("resources/list")))["result"] == {"resources": []}
        assert (await handler.handle_request(_request("prompts/list")))["result"] == {"prompts": []}

    @pytest.mark.asyncio
    async def test_unknown_method(self):
        response = await GuidelinesMCPHandler().handle_request(_request("sampling/createMessage"))
        assert response["error"] == {
            "code": METHOD_NOT_FOUND,
            "message": "Method not found: sampling/createMessage",
        }

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_internal_error(self):
        with patch("ui_guidelines.handler.call_tool", side_effect=RuntimeError("boom")):
            response = await GuidelinesMCPHandler().handle_request(
                _request("tools/call", {"name": "search_guidelines", "arguments": {"query": "x"}})
            )
        assert response["error"] == {"code": INTERNAL_ERROR, "message": "boom"}

    @pytest.mark.asyncio
    async def test_notification_is_accepted(self):
        assert await GuidelinesMCPHandler().handle_notification("notifications/initialized", None) is None
