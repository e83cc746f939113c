"""Tests for tools/registry.py — registration, descriptors, schemas."""
from unittest.mock import patch

import pytest

from toolserver.tools import list_tools, get_tool, all_tools, register_tool, ToolParam
from toolserver.tools.registry import ErrorCode, ToolError, ToolResult

EXPECTED = ["get_current_time", "calculate_sum", "echo_message", "fetch_data"]


class TestListTools:
    def test_exactly_four_tools(self):
        names = [d["name"] for d in list_tools()]
        assert names == EXPECTED

    def test_each_name_once(self):
        names = [d["name"] for d in list_tools()]
        for name in EXPECTED:
            assert names.count(name) == 1

    def test_idempotent(self):
        assert list_tools() == list_tools()

    def test_descriptor_shape(self):
        for d in list_tools():
            assert set(d) == {"name", "description", "inputSchema"}
            assert d["description"]
            assert d["inputSchema"]["type"] == "object"

    def test_get_current_time_has_no_args(self):
        schema = get_tool("get_current_time").input_schema()
        assert schema == {"type": "object", "properties": {}, "required": []}

    def test_calculate_sum_schema(self):
        schema = get_tool("calculate_sum").input_schema()
        assert schema["required"] == ["a", "b"]
        assert schema["properties"]["a"] == {"type": "number", "description": "First number"}
        assert schema["properties"]["b"] == {"type": "number", "description": "Second number"}

    def test_echo_message_schema(self):
        schema = get_tool("echo_message").input_schema()
        assert schema["required"] == ["message"]
        assert schema["properties"]["message"]["type"] == "string"

    def test_fetch_data_schema(self):
        schema = get_tool("fetch_data").input_schema()
        assert schema["required"] == ["url"]
        assert schema["properties"]["url"]["type"] == "string"


class TestRegisterTool:
    def test_unknown_lookup(self):
        assert get_tool("nope") is None

    def test_all_tools_is_a_copy(self):
        tools = all_tools()
        tools.pop("echo_message")
        assert get_tool("echo_message") is not None

    def test_register_and_optional_param(self):
        with patch.dict("toolserver.tools.registry._tools"):
            @register_tool("greet", params=[
                ToolParam("name"),
                ToolParam("loud", type="boolean", required=False),
            ])
            async def greet(name, loud=False, **kwargs):
                """Say hello"""
                return f"hello {name}"

            tool = get_tool("greet")
            assert tool.description == "Say hello"
            assert tool.required == ["name"]
            assert set(tool.input_schema()["properties"]) == {"name", "loud"}
        assert get_tool("greet") is None

    def test_duplicate_name_rejected(self):
        with patch.dict("toolserver.tools.registry._tools"):
            with pytest.raises(ValueError, match="echo_message"):
                @register_tool("echo_message")
                async def other(**kwargs):
                    return ""


class TestToolResult:
    def test_failure(self):
        r = ToolResult.failure(ErrorCode.InvalidParams, "bad")
        assert r.type == "error"
        assert not r.ok
        assert r.error.code == ErrorCode.InvalidParams
        assert r.error.message == "bad"

    def test_success(self):
        r = ToolResult(type="text", text="x")
        assert r.ok

    def test_error_codes_are_jsonrpc(self):
        assert int(ErrorCode.MethodNotFound) == -32601
        assert int(ErrorCode.InvalidParams) == -32602
        assert int(ErrorCode.InternalError) == -32603

    def test_tool_error_message(self):
        e = ToolError(ErrorCode.InternalError, "boom")
        assert str(e) == "boom"
        assert "InternalError" in repr(e)
