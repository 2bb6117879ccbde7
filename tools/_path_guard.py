"""Shared helpers for path existence and the trash allowlist."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple


__all__ = ["ensure_path_allowed", "first_denied", "list_allowed_paths", "partition_existing", "path_exists"]


def path_exists(path: str) -> bool:
    # os.path.exists treats "" and broken symlinks as missing.
    return os.path.exists(path)


def partition_existing(paths: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split ``paths`` into (existing, missing), keeping order and duplicates."""
    existing: List[str] = []
    missing: List[str] = []
    for path in paths:
        (existing if path_exists(path) else missing).append(path)
    return existing, missing


def list_allowed_paths() -> List[str]:
    raw = os.getenv("TRASH_ALLOWED", "all").strip()
    if raw.lower() == "all":
        return ["all"]
    return [p.strip() for p in raw.split(",") if p.strip()]


def ensure_path_allowed(path: str) -> None:
    allowed = list_allowed_paths()
    if "all" in allowed:
        return
    norm = Path(path).expanduser().resolve()
    for prefix in allowed:
        base = Path(prefix).expanduser().resolve()
        if norm == base or base in norm.parents:
            return
    raise PermissionError(f"File access not allowed: {path}")


def first_denied(paths: Sequence[str]) -> Optional[PermissionError]:
    for path in paths:
        try:
            ensure_path_allowed(path)
        except PermissionError as exc:
            return exc
    return None
