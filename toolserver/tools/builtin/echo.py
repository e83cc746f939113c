"""Echo tool."""
from ..registry import register_tool, ToolParam


@register_tool(
    "echo_message",
    description="Echo back a message with a prefix",
    params=[
        ToolParam("message", description="Message to echo back"),
    ],
)
async def echo_message(message, **kwargs) -> str:
    return f"Echo: {message}"
