"""Bootstrap – wire the default store and logging from :class:`MDCSettings`."""
from __future__ import annotations

from mdc_transaction.config import EnvSettingsLoader, MDCSettings, SettingsLoader
from mdc_transaction.context import (
    ContextStore,
    StrictContextStore,
    set_default_store,
    store_for_backend,
)
from mdc_transaction.observability.logging import JsonLoggerFactory, get_logger


def configure(
    settings: MDCSettings | None = None,
    *,
    loader: SettingsLoader | None = None,
) -> ContextStore:
    """Install the default context store and, optionally, the logging pipeline.

    When *settings* is omitted they are loaded with *loader* (an
    :class:`EnvSettingsLoader` by default). Returns the installed store.
    """
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(MDCSettings)

    store: ContextStore = store_for_backend(settings.store)
    if not settings.allow_none_values:
        store = StrictContextStore(store)
    set_default_store(store)

    if settings.configure_logging:
        JsonLoggerFactory.configure(
            level=settings.level,
            store=store,
            json_output=settings.json_logs,
        )
    get_logger(__name__).debug(
        "mdc.configured",
        store=settings.store,
        allow_none_values=settings.allow_none_values,
    )
    return store


__all__ = ["configure"]
