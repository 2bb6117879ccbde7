# trash-mcp/tool_registry.py
# Purpose: Trash tool registry with Pydantic validation and auto-discovery.
from __future__ import annotations

import importlib
import inspect
import pkgutil
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Optional, Type

from pydantic import BaseModel, ValidationError


class ToolError(Exception): ...


@dataclass(slots=True)
class ToolSpec:
    """Lightweight descriptor for a single tool."""

    name: str
    model: Type[BaseModel]
    handler: Callable[..., Awaitable[str]]
    description: str = ""
    instructions: str = ""
    read_only: bool = False


class ToolRegistry:
    """Routing table from tool name to handler, built once at startup."""

    def __init__(self):
        self._specs: Dict[str, ToolSpec] = {}
        # "trash" holds the active TrashBackend once resolved.
        self.ctx: Dict[str, Any] = {}

    def register(self, spec: ToolSpec) -> None:
        if not spec.name or not isinstance(spec.name, str):
            raise ToolError("Tool name must be non-empty str")
        if spec.name in self._specs:
            raise ToolError(f"Tool already registered: {spec.name}")
        if not (isinstance(spec.model, type) and issubclass(spec.model, BaseModel)):
            raise ToolError("Tool must declare a Pydantic BaseModel via model=")
        if not inspect.iscoroutinefunction(spec.handler):
            raise ToolError(f"Tool handler must be async: {spec.name}")
        if not spec.instructions:
            spec.instructions = (spec.handler.__doc__ or "").strip()
        self._specs[spec.name] = spec

    def register_spec(self, spec: ToolSpec, *, module: Optional[str] = None) -> None:
        try:
            self.register(spec)
        except ToolError as exc:
            if "already registered" in str(exc):
                return
            context = f" from {module}" if module else ""
            raise ToolError(f"Failed to register {spec.name}{context}: {exc}") from exc

    def get(self, name: str) -> ToolSpec:
        try:
            return self._specs[name]
        except KeyError as exc:
            raise ToolError(f"Unknown tool: {name}") from exc

    async def call(self, name: str, **kwargs) -> str:
        spec = self.get(name)
        try:
            payload = spec.model(**(kwargs or {}))
        except ValidationError as e:
            raise ToolError(f"Validation failed for {name}: {e}") from e
        return await spec.handler(**payload.model_dump())

    def specs(self) -> Iterator[ToolSpec]:
        for name in self.list():
            yield self._specs[name]

    def list(self) -> List[str]:
        return sorted(self._specs.keys())

    def describe(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": spec.name,
                "description": spec.description.strip(),
                "instructions": spec.instructions.strip(),
                "read_only": spec.read_only,
                "schema": spec.model.model_json_schema(),
            }
            for spec in self.specs()
        ]


registry = ToolRegistry()


def autodiscover_tools(package: str = "tools") -> ToolRegistry:
    """Register the ``TOOL`` of every public module in ``package``."""
    pkg = importlib.import_module(package)
    for modinfo in pkgutil.iter_modules(pkg.__path__, pkg.__name__ + "."):
        short_name = modinfo.name.rsplit(".", 1)[-1]
        if short_name.startswith("_"):
            continue
        module = importlib.import_module(modinfo.name)
        spec = getattr(module, "TOOL", None)
        if isinstance(spec, ToolSpec):
            registry.register_spec(spec, module=modinfo.name)
    return registry
