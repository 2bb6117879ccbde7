"""Access to the trash backend shared by all tools."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional, TypeVar

from backends import TrashBackend, get_backend
from tool_registry import registry

T = TypeVar("T")


def install_trash(trash: Optional[TrashBackend] = None) -> TrashBackend:
    """Resolve the backend once, at startup; an unknown TRASH_BACKEND raises here."""
    trash = trash or registry.ctx.get("trash") or get_backend()
    registry.ctx["trash"] = trash
    return trash


def current_trash() -> TrashBackend:
    trash = registry.ctx.get("trash")
    if trash is None:
        raise RuntimeError("trash backend not installed; call install_trash() at startup")
    return trash


async def run_blocking(fn: Callable[..., T], *args: Any) -> T:
    """Run a blocking delegate call without stalling the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, fn, *args)
