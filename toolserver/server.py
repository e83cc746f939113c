"""MCP binding — serves the tool registry and executor over stdio."""
import sys
from typing import List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .config import Settings, settings as default_settings
from .tools import list_tools, execute_tool


class ToolServer:
    """Answers tools/list and tools/call for the registered tools.

    Error results from the executor are raised as McpError so the client
    receives a JSON-RPC error carrying the code, not a successful response.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.server = Server(self.settings.server_name, version=self.settings.server_version)
        self._setup_tool_handlers()

    def _setup_tool_handlers(self):
        @self.server.list_tools()
        async def _list_tools() -> List[types.Tool]:
            return [types.Tool(**d) for d in list_tools()]

        # Registered directly: the SDK's call_tool decorator would turn
        # our typed errors into isError tool results.
        self.server.request_handlers[types.CallToolRequest] = self._handle_call_tool

    async def _handle_call_tool(self, req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        result = await execute_tool(name, req.params.arguments)
        if not result.ok:
            raise McpError(types.ErrorData(code=int(result.error.code), message=result.error.message))
        return types.ServerResult(
            types.CallToolResult(content=[types.TextContent(type="text", text=result.text)])
        )

    async def run(self):
        """Serve until stdin closes."""
        async with stdio_server() as (read_stream, write_stream):
            # Unconditional: not subject to the configured log level
            print("MCP Server running on stdio", file=sys.stderr, flush=True)
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
