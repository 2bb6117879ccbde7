from __future__ import annotations

import abc
from typing import List, Optional, Sequence

from pydantic import BaseModel


class TrashError(Exception):
    """A trash operation failed; ``str(exc)`` is the delegate's message."""


class BatchTrashError(TrashError):
    def __init__(self, message: str, *, trashed: Sequence[str] = ()):
        super().__init__(message)
        self.trashed: List[str] = list(trashed)


class TrashItem(BaseModel):
    name: str
    original_path: Optional[str] = None
    deleted_at: Optional[str] = None


class TrashBackend(abc.ABC):
    # Fixed when the backend is built; never re-detected per request.
    supports_listing: bool = False

    @abc.abstractmethod
    def delete(self, path: str) -> None:
        """Move one filesystem entry to the trash. Raise TrashError on failure."""
        raise NotImplementedError

    @abc.abstractmethod
    def delete_all(self, paths: Sequence[str]) -> None:
        """Move every entry to the trash, raising BatchTrashError on the first failure."""
        raise NotImplementedError

    def list_items(self) -> List[TrashItem]:
        raise TrashError("listing is not supported by this backend")
