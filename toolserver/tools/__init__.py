"""Tool system — registry and executor."""
from .registry import (
    register_tool, get_tool, all_tools, list_tools,
    ToolResult, ToolParam, ToolDef, ToolError, ErrorCode,
)
from .executor import execute_tool

# Auto-import builtin tools to trigger @register_tool decorators
from .builtin import *  # noqa
