"""Tool executor — validates arguments and dispatches tool calls by name."""
import logging
import time
from collections.abc import Mapping
from typing import Any, Optional

from .registry import get_tool, ToolResult, ToolError, ErrorCode

logger = logging.getLogger(__name__)


def _validate_args(args: Any, required) -> Optional[ToolResult]:
    """Return an InvalidParams result for the first problem found, else None.

    Only presence and nullity are checked; argument types are left to the tool.
    """
    if not isinstance(args, Mapping):
        return ToolResult.failure(ErrorCode.InvalidParams, "Tool arguments must be an object")

    for field in required:
        if args.get(field) is None:
            return ToolResult.failure(ErrorCode.InvalidParams, f"Missing required argument: {field}")
    return None


async def execute_tool(tool_name: str, args: Optional[Mapping[str, Any]] = None) -> ToolResult:
    """Execute a registered tool by name.

    Never raises: failures come back as a ToolResult carrying a ToolError.
    """
    tool = get_tool(tool_name)
    if not tool:
        logger.warning(f"Unknown tool: {tool_name}")
        return ToolResult.failure(ErrorCode.MethodNotFound, f"Unknown tool: {tool_name}")

    if args is None:
        args = {}

    invalid = _validate_args(args, tool.required)
    if invalid:
        logger.warning(f"Rejected call to {tool_name}: {invalid.text}")
        return invalid

    arg_str = ", ".join(f"{k}={v!r}" for k, v in args.items())
    logger.info(f"Executing tool: {tool_name}({arg_str})")
    t0 = time.monotonic()

    try:
        text = await tool.handler(**args)
        result = ToolResult(type="text", text=str(text))
    except ToolError as e:
        result = ToolResult(type="error", text=e.message, error=e)
    except Exception as e:
        logger.error(f"Tool {tool_name} failed: {e}", exc_info=True)
        result = ToolResult.failure(ErrorCode.InternalError, f"Error executing tool {tool_name}: {e}")

    elapsed = time.monotonic() - t0
    logger.info(f"Tool {tool_name}: {elapsed:.3f}s -> {result.type}")
    return result
