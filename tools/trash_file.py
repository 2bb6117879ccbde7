"""Drop-in tool for moving one path to the system trash."""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import BaseModel, Field

from backends import TrashError
from tool_registry import ToolSpec
from ._delegate import current_trash, run_blocking
from ._path_guard import ensure_path_allowed, path_exists

log = logging.getLogger(__name__)

PATH_DESCRIPTION = "Path to the file or directory to move to trash"


class TrashFileParams(BaseModel):
    path: str = Field(..., description=PATH_DESCRIPTION)


async def run(path: Annotated[str, Field(description=PATH_DESCRIPTION)]) -> str:
    """Move a single file or directory to the trash."""
    if not path_exists(path):
        return f"Path does not exist: {path}"
    try:
        ensure_path_allowed(path)
        await run_blocking(current_trash().delete, path)
    except (TrashError, PermissionError) as exc:
        log.warning("Failed to trash %s: %s", path, exc)
        return f"Failed to trash: {exc}"
    log.info("Moved to trash: %s", path)
    return f"Moved to trash: {path}"


TOOL = ToolSpec(
    name="trash_file",
    model=TrashFileParams,
    handler=run,
    description="Move a file or directory to the system trash/recycle bin",
    instructions="Provide 'path'. Missing paths are reported, not treated as errors.",
)
