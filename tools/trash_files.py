"""Drop-in tool for moving several paths to the system trash in one call."""

from __future__ import annotations

import logging
from typing import Annotated, List

from pydantic import BaseModel, Field

from backends import BatchTrashError, TrashError
from tool_registry import ToolSpec
from ._delegate import current_trash, run_blocking
from ._path_guard import first_denied, partition_existing

log = logging.getLogger(__name__)

PATHS_DESCRIPTION = "List of paths to move to trash"


class TrashFilesParams(BaseModel):
    paths: List[str] = Field(..., description=PATHS_DESCRIPTION)


def _failure(exc: Exception) -> str:
    msg = f"Failed to trash: {exc}"
    if isinstance(exc, BatchTrashError) and exc.trashed:
        msg += f"\nMoved before failure: {', '.join(exc.trashed)}"
    return msg


async def run(paths: Annotated[List[str], Field(description=PATHS_DESCRIPTION)]) -> str:
    """Move every existing path to the trash; report the ones that were not found."""
    existing, missing = partition_existing(paths)
    if not existing:
        return "No valid paths to trash"

    denied = first_denied(existing)
    if denied is not None:
        log.warning("Refusing batch of %d items: %s", len(existing), denied)
        return _failure(denied)

    try:
        await run_blocking(current_trash().delete_all, existing)
    except TrashError as exc:
        log.warning("Failed to trash batch of %d items: %s", len(existing), exc)
        return _failure(exc)

    log.info("Moved %d items to trash (%d skipped)", len(existing), len(missing))
    msg = f"Moved {len(existing)} items to trash"
    if missing:
        msg += f"\nSkipped (not found): {', '.join(missing)}"
    return msg


TOOL = ToolSpec(
    name="trash_files",
    model=TrashFilesParams,
    handler=run,
    description="Move multiple files or directories to the system trash/recycle bin",
    instructions="Provide 'paths'; existing entries are trashed in one call, missing ones are listed as skipped.",
)
