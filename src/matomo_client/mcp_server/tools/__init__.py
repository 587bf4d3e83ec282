"""
Tool modules. Each exposes ``register(mcp, ctx)``.
"""

import json
from typing import Any, Awaitable, Literal

import structlog

from matomo_client.dispatch.interface import MatomoError

logger = structlog.get_logger(__name__)

Period = Literal["day", "week", "month", "year", "range"]

READ_ONLY = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}

WRITE = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "idempotentHint": False,
    "openWorldHint": True,
}

DESTRUCTIVE = {
    "readOnlyHint": False,
    "destructiveHint": True,
    "idempotentHint": True,
    "openWorldHint": True,
}


def annotations(title: str, hints: dict) -> dict:
    """Build a tool annotations mapping."""
    return {"title": title, **hints}


def render(result: Any) -> str:
    """Render an API result as indented JSON text."""
    if isinstance(result, str):
        return result
    return json.dumps(result, indent=2, ensure_ascii=False, default=str)


async def run_tool(tool: str, pending: Awaitable[Any]) -> str:
    """
    Await a façade call and render its result.

    A MatomoError becomes ``"Error: ..."`` text for the caller.
    """
    try:
        result = await pending
    except MatomoError as e:
        logger.warning("tool_failed", tool=tool, error=str(e))
        return f"Error: {e}"
    return render(result)
