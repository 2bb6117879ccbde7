# trash-mcp/backends/__init__.py
# Purpose: Backend factory for the platform trash delegate.
from __future__ import annotations

import os
from typing import Optional

from .base import BatchTrashError, TrashBackend, TrashError, TrashItem
from .system import SystemTrash, listing_available

__all__ = [
    "BatchTrashError",
    "SystemTrash",
    "TrashBackend",
    "TrashError",
    "TrashItem",
    "get_backend",
    "listing_available",
]


def get_backend(name: Optional[str] = None) -> TrashBackend:
    name = (name or os.getenv("TRASH_BACKEND", "system")).lower()
    if name in ("system", "send2trash", "os"):
        return SystemTrash()
    raise ValueError(f"Unknown trash backend: {name}")
