"""
mdc_transaction – reversible changes to the logging diagnostic context.

Import path convention::

    from mdc_transaction import put, remove, MDCTransaction
    from mdc_transaction.context import ContextVarStore, StructlogContextStore
    from mdc_transaction.observability.logging import MDCProcessor

Typical use::

    tx = put("request_id", rid).remove("anonymous").commit()
    try:
        handle(request)
    finally:
        tx.restore()
"""

from mdc_transaction.bootstrap import configure
from mdc_transaction.kernel.errors import AlreadyCommittedError, AlreadyRestoredError
from mdc_transaction.transaction import (
    Builder,
    MDCTransaction,
    builder,
    clear,
    put,
    put_if_not_none,
    remove,
)

__version__ = "0.1.0"
__all__ = [
    "AlreadyCommittedError",
    "AlreadyRestoredError",
    "Builder",
    "MDCTransaction",
    "__version__",
    "builder",
    "clear",
    "configure",
    "put",
    "put_if_not_none",
    "remove",
]
