"""Context – ContextVarStore, the default task-local store."""
from __future__ import annotations

from contextvars import ContextVar
from typing import Mapping

_MDC_VAR: ContextVar[dict[str, str | None] | None] = ContextVar("_mdc_context_map", default=None)


class ContextVarStore:
    """Diagnostic context stored in a ``ContextVar``.

    Every mutation replaces the map instead of editing it, so a context copied
    into an ``asyncio`` task (or ``contextvars.copy_context().run``) never sees
    writes made by its parent afterwards, and vice versa.

    All instances built without *var* are views of the same module-level
    variable.
    """

    def __init__(self, var: ContextVar[dict[str, str | None] | None] | None = None) -> None:
        self._var = var if var is not None else _MDC_VAR

    @property
    def initialized(self) -> bool:
        return self._var.get() is not None

    def get(self, key: str) -> str | None:
        entries = self._var.get()
        if entries is None:
            return None
        return entries.get(key)

    def put(self, key: str, value: str | None) -> None:
        entries = dict(self._var.get() or {})
        entries[key] = value
        self._var.set(entries)

    def remove(self, key: str) -> None:
        entries = self._var.get()
        if not entries or key not in entries:
            return
        entries = dict(entries)
        del entries[key]
        self._var.set(entries)

    def clear(self) -> None:
        self._var.set({})

    def copy_all(self) -> dict[str, str | None]:
        entries = self._var.get()
        if entries is None:
            entries = {}
            self._var.set(entries)
        return dict(entries)

    def set_context_map(self, entries: Mapping[str, str | None] | None) -> None:
        """Replace the whole map; ``None`` returns the store to uninitialised."""
        self._var.set(None if entries is None else dict(entries))


__all__ = ["ContextVarStore"]
