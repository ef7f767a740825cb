"""Context – diagnostic context store port, implementations and default registry."""
from mdc_transaction.context.contextvar import ContextVarStore
from mdc_transaction.context.port import ContextStore, apply_value
from mdc_transaction.context.registry import (
    BACKENDS,
    get_default_store,
    reset_default_store,
    set_default_store,
    store_for_backend,
)
from mdc_transaction.context.strict import StrictContextStore
from mdc_transaction.context.structlog_store import StructlogContextStore

__all__ = [
    "BACKENDS",
    "ContextStore",
    "ContextVarStore",
    "StrictContextStore",
    "StructlogContextStore",
    "apply_value",
    "get_default_store",
    "reset_default_store",
    "set_default_store",
    "store_for_backend",
]
