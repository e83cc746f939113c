"""Tool registry — decorator-based tool registration and lookup."""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Awaitable, Dict, List, Optional

from mcp import types

logger = logging.getLogger(__name__)


class ErrorCode(IntEnum):
    """JSON-RPC error codes a tool call can fail with."""
    MethodNotFound = types.METHOD_NOT_FOUND
    InvalidParams = types.INVALID_PARAMS
    InternalError = types.INTERNAL_ERROR


class ToolError(Exception):
    """Typed protocol error. Raised by tools, passed through the executor unchanged."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self):
        return f"ToolError({self.code.name}, {self.message!r})"


@dataclass
class ToolParam:
    name: str
    type: str = "string"
    description: str = ""
    required: bool = True


@dataclass
class ToolResult:
    type: str  # "text" | "error"
    text: str = ""
    error: Optional[ToolError] = None

    @classmethod
    def failure(cls, code: ErrorCode, message: str) -> "ToolResult":
        return cls(type="error", text=message, error=ToolError(code, message))

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ToolDef:
    name: str
    description: str
    params: List[ToolParam]
    handler: Callable[..., Awaitable[Any]]

    @property
    def required(self) -> List[str]:
        return [p.name for p in self.params if p.required]

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema for the tool's arguments.

        The ``required`` list is the same one the executor validates against.
        """
        return {
            "type": "object",
            "properties": {
                p.name: {"type": p.type, "description": p.description}
                for p in self.params
            },
            "required": self.required,
        }

    def descriptor(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


_tools: Dict[str, ToolDef] = {}


def register_tool(
    name: str,
    description: str = "",
    params: Optional[List[ToolParam]] = None,
):
    """Decorator to register a tool function."""
    def decorator(func):
        if name in _tools:
            raise ValueError(f"Tool already registered: {name}")
        tool = ToolDef(
            name=name,
            description=description or func.__doc__ or "",
            params=params or [],
            handler=func,
        )
        _tools[name] = tool
        logger.info(f"Registered tool: {name}")
        return func
    return decorator


def get_tool(name: str) -> Optional[ToolDef]:
    return _tools.get(name)


def all_tools() -> Dict[str, ToolDef]:
    return dict(_tools)


def list_tools() -> List[Dict[str, Any]]:
    """Descriptors for every registered tool, in registration order."""
    return [tool.descriptor() for tool in _tools.values()]
