"""Fetch tool — single GET request, JSON body pretty-printed back as text."""
import json
import logging

import httpx

from ...config import settings
from ..registry import register_tool, ToolParam

logger = logging.getLogger(__name__)


class FetchError(Exception):
    pass


async def _get_json(url: str):
    async with httpx.AsyncClient(timeout=settings.fetch_timeout_s, follow_redirects=True) as client:
        resp = await client.get(url)
        if not resp.is_success:
            raise FetchError(f"HTTP error! status: {resp.status_code}")
        return resp.json()


@register_tool(
    "fetch_data",
    description="Fetch data from a URL (GET request)",
    params=[
        ToolParam("url", description="URL to fetch data from"),
    ],
)
async def fetch_data(url, **kwargs) -> str:
    try:
        data = await _get_json(url)
    except Exception as e:
        logger.error(f"Fetch {url} failed: {e}")
        raise FetchError(f"Failed to fetch from {url}: {str(e) or type(e).__name__}") from e

    return json.dumps(data, indent=2, ensure_ascii=False)
