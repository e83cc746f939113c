"""Clock tool."""
from datetime import datetime, timezone

from ..registry import register_tool


def _iso_utc(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@register_tool(
    "get_current_time",
    description="Get the current date and time in ISO format",
)
async def get_current_time(**kwargs) -> str:
    return _iso_utc(datetime.now(timezone.utc))
