"""Read-only view of freedesktop.org trash directories (Linux)."""

from __future__ import annotations

import configparser
import logging
import os
import re
from pathlib import Path
from typing import Iterator, List, Optional
from urllib.parse import unquote

from .base import TrashError, TrashItem

log = logging.getLogger(__name__)

INFO_SUFFIX = ".trashinfo"
# /proc/self/mounts escapes whitespace in mount points as octal, e.g. "\040".
_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def home_trash_dir() -> Path:
    data_home = os.getenv("XDG_DATA_HOME") or os.path.join(
        os.path.expanduser("~"), ".local", "share"
    )
    return Path(data_home) / "Trash"


def _mount_points() -> List[Path]:
    try:
        with open("/proc/self/mounts", "r", encoding="utf-8") as fh:
            lines = fh.readlines()
    except OSError:
        return []
    points: List[Path] = []
    for line in lines:
        fields = line.split()
        if len(fields) >= 2:
            points.append(Path(_OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), fields[1])))
    return points


def _is_dir(path: Path) -> bool:
    # Path.is_dir() raises PermissionError on EACCES before Python 3.13.
    try:
        return path.is_dir()
    except OSError:
        return False


def topdir_trash_dirs() -> Iterator[tuple[Path, Path]]:
    """Yield ``(trash_dir, topdir)`` for per-volume trash directories."""
    uid = os.getuid()
    for topdir in _mount_points():
        for candidate in (topdir / ".Trash" / str(uid), topdir / f".Trash-{uid}"):
            if _is_dir(candidate / "info"):
                yield candidate, topdir


def read_trashinfo(info_file: Path, topdir: Optional[Path] = None) -> TrashItem:
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(info_file.read_text(encoding="utf-8", errors="replace"))
        raw_path = parser.get("Trash Info", "Path")
    except (configparser.Error, OSError) as exc:
        raise TrashError(f"invalid trash info {info_file}: {exc}") from exc
    original = Path(unquote(raw_path))
    if topdir is not None and not original.is_absolute():
        original = topdir / original
    return TrashItem(
        name=original.name or info_file.name[: -len(INFO_SUFFIX)],
        original_path=str(original),
        deleted_at=parser.get("Trash Info", "DeletionDate", fallback=None),
    )


def list_trash_dir(trash_dir: Path, topdir: Optional[Path] = None) -> List[TrashItem]:
    """Items of one trash directory; unreadable or corrupt entries are skipped."""
    info_dir = trash_dir / "info"
    if not _is_dir(info_dir):
        return []
    try:
        entries = sorted(info_dir.iterdir())
    except OSError as exc:
        raise TrashError(f"cannot read {info_dir}: {exc}") from exc
    items: List[TrashItem] = []
    for entry in entries:
        if not entry.name.endswith(INFO_SUFFIX):
            continue
        try:
            items.append(read_trashinfo(entry, topdir))
        except TrashError as exc:
            log.warning("Skipping trash entry: %s", exc)
    return items


def list_items(*, include_volumes: bool = True) -> List[TrashItem]:
    items = list_trash_dir(home_trash_dir())
    if include_volumes:
        for trash_dir, topdir in topdir_trash_dirs():
            try:
                items.extend(list_trash_dir(trash_dir, topdir))
            except TrashError as exc:
                log.warning("Skipping trash directory: %s", exc)
    return items
