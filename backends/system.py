from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional, Sequence

from send2trash import send2trash

from .base import BatchTrashError, TrashBackend, TrashError, TrashItem

log = logging.getLogger(__name__)

LISTING_PLATFORMS = ("linux", "win32")


def listing_available(platform: Optional[str] = None) -> bool:
    """Whether the trash can be enumerated on ``platform`` (default: this one).

    ``TRASH_LISTING=off`` disables listing for the deployment.
    """
    if os.getenv("TRASH_LISTING", "auto").strip().lower() == "off":
        return False
    platform = platform or sys.platform
    return any(platform.startswith(prefix) for prefix in LISTING_PLATFORMS)


class SystemTrash(TrashBackend):
    """Platform trash via send2trash.

    Env:
      TRASH_LISTING (default: auto; "off" disables list_items)
    """

    def __init__(self, *, supports_listing: Optional[bool] = None):
        self.supports_listing = (
            listing_available() if supports_listing is None else supports_listing
        )

    def delete(self, path: str) -> None:
        try:
            send2trash(path)
        except OSError as e:
            raise TrashError(str(e)) from e

    def delete_all(self, paths: Sequence[str]) -> None:
        trashed: List[str] = []
        for path in paths:
            try:
                send2trash(path)
            except OSError as e:
                if trashed:
                    log.warning("Batch stopped after %d of %d items", len(trashed), len(paths))
                raise BatchTrashError(str(e), trashed=trashed) from e
            trashed.append(path)

    def list_items(self) -> List[TrashItem]:
        if not self.supports_listing:
            raise TrashError(f"listing is not supported on {sys.platform}")
        try:
            if sys.platform == "win32":
                from . import recycle_bin

                return recycle_bin.list_items()
            from . import freedesktop

            return freedesktop.list_items()
        except OSError as e:
            raise TrashError(str(e)) from e
