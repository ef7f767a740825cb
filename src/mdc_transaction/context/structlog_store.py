"""Context – StructlogContextStore backed by ``structlog.contextvars``."""
from __future__ import annotations

from structlog import contextvars as structlog_contextvars


class StructlogContextStore:
    """Diagnostic context kept in structlog's own context variables.

    Entries written here are merged into every structlog event by
    ``structlog.contextvars.merge_contextvars``, so no extra processor is
    needed. structlog always has a (possibly empty) context, so this store is
    never uninitialised.
    """

    def get(self, key: str) -> str | None:
        return structlog_contextvars.get_contextvars().get(key)

    def put(self, key: str, value: str | None) -> None:
        structlog_contextvars.bind_contextvars(**{key: value})

    def remove(self, key: str) -> None:
        structlog_contextvars.unbind_contextvars(key)

    def clear(self) -> None:
        structlog_contextvars.clear_contextvars()

    def copy_all(self) -> dict[str, str | None]:
        return dict(structlog_contextvars.get_contextvars())


__all__ = ["StructlogContextStore"]
