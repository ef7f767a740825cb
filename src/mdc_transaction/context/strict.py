"""Context – StrictContextStore, a wrapper that refuses ``None`` values."""
from __future__ import annotations

from mdc_transaction.context.port import ContextStore
from mdc_transaction.kernel.errors import UnsupportedValueError


class StrictContextStore:
    """Delegate to *inner*, raising :class:`UnsupportedValueError` on ``put(key, None)``.

    Mirrors logging backends whose context adapters cannot hold ``None``.
    """

    def __init__(self, inner: ContextStore) -> None:
        self._inner = inner

    @property
    def inner(self) -> ContextStore:
        return self._inner

    def get(self, key: str) -> str | None:
        return self._inner.get(key)

    def put(self, key: str, value: str | None) -> None:
        if value is None:
            raise UnsupportedValueError(key, value)
        self._inner.put(key, value)

    def remove(self, key: str) -> None:
        self._inner.remove(key)

    def clear(self) -> None:
        self._inner.clear()

    def copy_all(self) -> dict[str, str | None]:
        return self._inner.copy_all()


__all__ = ["StrictContextStore"]
