"""Transaction – staged, reversible changes to the diagnostic context."""
from mdc_transaction.transaction.builder import (
    Builder,
    builder,
    clear,
    put,
    put_if_not_none,
    remove,
)
from mdc_transaction.transaction.transaction import MDCTransaction

__all__ = [
    "Builder",
    "MDCTransaction",
    "builder",
    "clear",
    "put",
    "put_if_not_none",
    "remove",
]
