"""Drop-in tool for listing the system trash."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from backends import TrashError
from tool_registry import ToolSpec
from ._delegate import current_trash, run_blocking

log = logging.getLogger(__name__)

UNSUPPORTED = "list_trash is not supported on this platform (Linux/Windows only)"


class ListTrashParams(BaseModel):
    pass


async def run() -> str:
    """Return the names of the items currently in the trash."""
    trash = current_trash()
    if not trash.supports_listing:
        return UNSUPPORTED
    try:
        items = await run_blocking(trash.list_items)
    except (TrashError, OSError) as exc:
        log.warning("Failed to list trash: %s", exc)
        return f"Failed to list trash: {exc}"
    if not items:
        return "Trash is empty"
    names = "\n".join(item.name for item in items)
    return f"Trash contents ({len(items)} items):\n{names}"


TOOL = ToolSpec(
    name="list_trash",
    model=ListTrashParams,
    handler=run,
    description="List items currently in the system trash (Linux/Windows only)",
    instructions="Takes no arguments; returns one item name per line.",
    read_only=True,
)
