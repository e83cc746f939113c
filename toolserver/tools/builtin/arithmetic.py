"""Arithmetic tool."""
from ..registry import register_tool, ToolParam


def _fmt(value) -> str:
    # Rendered as JSON would: true/false, and 5.0 as 5
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@register_tool(
    "calculate_sum",
    description="Calculate the sum of two numbers",
    params=[
        ToolParam("a", type="number", description="First number"),
        ToolParam("b", type="number", description="Second number"),
    ],
)
async def calculate_sum(a, b, **kwargs) -> str:
    # No type check on a/b: whatever `+` does with the supplied values is the answer
    total = a + b
    return f"The sum of {_fmt(a)} and {_fmt(b)} is {_fmt(total)}"
