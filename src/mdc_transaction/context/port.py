"""Context – ContextStore protocol."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from mdc_transaction.kernel.types import ContextValue, Present


@runtime_checkable
class ContextStore(Protocol):
    """Port: the task-local diagnostic context read by the logging pipeline.

    ``copy_all`` is the only existence check; ``get`` returns ``None`` both for
    a missing key and for a key holding ``None``. A store with no map yet must
    initialise an empty one on ``copy_all``.
    """

    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str | None) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def copy_all(self) -> dict[str, str | None]: ...


def apply_value(store: ContextStore, key: str, value: ContextValue) -> None:
    """Write *value* for *key*: ``Present`` sets it, ``Absent`` deletes it."""
    if isinstance(value, Present):
        store.put(key, value.value)
    else:
        store.remove(key)


__all__ = ["ContextStore", "apply_value"]
