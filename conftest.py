"""Pytest configuration: asyncio tests without external plugins, plus a fake trash."""

from __future__ import annotations

import asyncio
import inspect
from typing import List, Optional, Sequence

import pytest

from backends import BatchTrashError, TrashBackend, TrashError, TrashItem
from tool_registry import autodiscover_tools, registry


class RecordingTrash(TrashBackend):
    """In-memory backend that records every delegate call."""

    def __init__(self, *, supports_listing: bool = True):
        self.supports_listing = supports_listing
        self.calls: List[tuple] = []
        self.items: List[TrashItem] = []
        self.error: Optional[str] = None
        self.fail_after: Optional[int] = None

    def delete(self, path: str) -> None:
        self.calls.append(("delete", path))
        if self.error:
            raise TrashError(self.error)

    def delete_all(self, paths: Sequence[str]) -> None:
        self.calls.append(("delete_all", list(paths)))
        if self.fail_after is not None:
            raise BatchTrashError(self.error or "failed", trashed=list(paths)[: self.fail_after])
        if self.error:
            raise TrashError(self.error)

    def list_items(self) -> List[TrashItem]:
        self.calls.append(("list",))
        if self.error:
            raise TrashError(self.error)
        return list(self.items)


@pytest.fixture
def fake_trash():
    autodiscover_tools("tools")
    previous = registry.ctx.get("trash")
    trash = RecordingTrash()
    registry.ctx["trash"] = trash
    try:
        yield trash
    finally:
        if previous is None:
            registry.ctx.pop("trash", None)
        else:
            registry.ctx["trash"] = previous


@pytest.fixture(autouse=True)
def _allow_all_paths(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TRASH_ALLOWED", raising=False)
    monkeypatch.delenv("TRASH_LISTING", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Register the custom ``asyncio`` marker used throughout the test suite."""

    config.addinivalue_line(
        "markers",
        "asyncio: mark a test as running inside an asyncio event loop",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute ``async def`` tests by driving them with a fresh event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        funcargs = {
            name: pyfuncitem.funcargs[name]
            for name in pyfuncitem._fixtureinfo.argnames
        }
        loop.run_until_complete(test_function(**funcargs))
        loop.run_until_complete(loop.shutdown_asyncgens())
        loop.run_until_complete(loop.shutdown_default_executor())
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True
