import os
from pathlib import Path

import pytest

from backends import freedesktop


def _trashinfo(trash_dir: Path, stem: str, original: str, when: str = "2024-05-01T10:00:00") -> None:
    info = trash_dir / "info"
    info.mkdir(parents=True, exist_ok=True)
    (info / f"{stem}.trashinfo").write_text(
        f"[Trash Info]\nPath={original}\nDeletionDate={when}\n", encoding="utf-8"
    )


def test_home_trash_respects_xdg_data_home(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert freedesktop.home_trash_dir() == tmp_path / "Trash"


def test_lists_home_trash(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    trash = tmp_path / "Trash"
    _trashinfo(trash, "report", "/home/u/report.pdf")
    _trashinfo(trash, "notes 2", "/home/u/my%20notes.txt", "2024-05-02T08:30:00")
    (trash / "info" / "stray.txt").write_text("ignored", encoding="utf-8")

    items = freedesktop.list_items(include_volumes=False)

    assert [item.name for item in items] == ["my notes.txt", "report.pdf"]
    assert items[0].original_path == "/home/u/my notes.txt"
    assert items[0].deleted_at == "2024-05-02T08:30:00"


def test_missing_trash_is_empty(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert freedesktop.list_items(include_volumes=False) == []


def test_relative_paths_resolve_against_topdir(tmp_path: Path):
    trash = tmp_path / ".Trash-1000"
    _trashinfo(trash, "clip", "videos/clip.mp4")
    items = freedesktop.list_trash_dir(trash, topdir=tmp_path)
    assert items[0].name == "clip.mp4"
    assert items[0].original_path == str(tmp_path / "videos" / "clip.mp4")


def test_corrupt_entry_is_skipped_not_fatal(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    trash = tmp_path / "Trash"
    _trashinfo(trash, "good", "/home/u/good.txt")
    (trash / "info" / "half.trashinfo").write_text("", encoding="utf-8")
    (trash / "info" / "junk.trashinfo").write_text("not an ini file", encoding="utf-8")

    items = freedesktop.list_items(include_volumes=False)

    assert [item.name for item in items] == ["good.txt"]


def test_unreadable_mount_points_are_skipped(monkeypatch, tmp_path: Path):
    locked = tmp_path / "locked"
    volume = tmp_path / "volume"
    _trashinfo(volume / f".Trash-{os.getuid()}", "clip", "clip.mp4")
    monkeypatch.setattr(freedesktop, "_mount_points", lambda: [locked, volume])
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    real_is_dir = Path.is_dir

    def is_dir(self):
        if locked in (self, *self.parents):
            raise PermissionError(13, "Permission denied", str(self))
        return real_is_dir(self)

    monkeypatch.setattr(Path, "is_dir", is_dir)

    items = freedesktop.list_items()

    assert [item.name for item in items] == ["clip.mp4"]
    assert items[0].original_path == str(volume / "clip.mp4")


@pytest.mark.asyncio
async def test_list_trash_tool_reads_real_home_trash(monkeypatch, tmp_path: Path):
    from backends import SystemTrash
    from tool_registry import autodiscover_tools, registry

    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    monkeypatch.setattr(freedesktop, "_mount_points", lambda: [])
    trash = tmp_path / "Trash"
    _trashinfo(trash, "good", "/home/u/good.txt")
    (trash / "info" / "half.trashinfo").write_text("", encoding="utf-8")
    autodiscover_tools("tools")
    monkeypatch.setitem(registry.ctx, "trash", SystemTrash(supports_listing=True))

    result = await registry.call("list_trash")

    assert result == "Trash contents (1 items):\ngood.txt"
