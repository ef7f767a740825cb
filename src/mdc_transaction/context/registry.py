"""Context – process-wide default store and backend lookup."""
from __future__ import annotations

from typing import Callable

from mdc_transaction.context.contextvar import ContextVarStore
from mdc_transaction.context.port import ContextStore
from mdc_transaction.context.structlog_store import StructlogContextStore
from mdc_transaction.kernel.errors import InvalidSettingValueError

BACKENDS: dict[str, Callable[[], ContextStore]] = {
    "contextvar": ContextVarStore,
    "structlog": StructlogContextStore,
}

_default_store: ContextStore | None = None


def get_default_store() -> ContextStore:
    """Return the store used when a builder is created without one.

    Lazily falls back to a :class:`ContextVarStore`.
    """
    global _default_store
    if _default_store is None:
        _default_store = ContextVarStore()
    return _default_store


def set_default_store(store: ContextStore) -> None:
    global _default_store
    _default_store = store


def reset_default_store() -> None:
    global _default_store
    _default_store = None


def store_for_backend(name: str) -> ContextStore:
    """Build a store for a backend name (``"contextvar"`` or ``"structlog"``)."""
    factory = BACKENDS.get(name.strip().lower())
    if factory is None:
        raise InvalidSettingValueError(
            "store", name, f"expected one of {sorted(BACKENDS)}"
        )
    return factory()


__all__ = [
    "BACKENDS",
    "get_default_store",
    "reset_default_store",
    "set_default_store",
    "store_for_backend",
]
