"""Observability – structlog processors and get_logger helper.

MDCProcessor — merges the diagnostic context into log events.
get_logger(name) — returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog

from mdc_transaction.context import ContextStore, get_default_store


class MDCProcessor:
    """structlog processor that injects every entry of the diagnostic context.

    Fields already present on the event win over context entries. When no
    *store* is given, the default store is looked up on every event, so a
    later :func:`~mdc_transaction.context.set_default_store` takes effect
    without reconfiguring structlog.

    Usage::

        import structlog
        from mdc_transaction.observability.logging import MDCProcessor

        structlog.configure(processors=[MDCProcessor(), ...])
    """

    def __init__(self, store: ContextStore | None = None) -> None:
        self._store = store

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        store = self._store if self._store is not None else get_default_store()
        try:
            entries = store.copy_all()
        except Exception:  # noqa: BLE001
            return event_dict
        for key, value in entries.items():
            event_dict.setdefault(key, value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MDCProcessor", "get_logger"]
