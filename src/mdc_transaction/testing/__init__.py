"""Testing support – fakes, fixtures, generators.

Import in your ``conftest.py``::

    pytest_plugins = ["mdc_transaction.testing.fixtures"]
"""

from mdc_transaction.testing.fakes import InMemoryContextStore
from mdc_transaction.testing.generators import (
    context_key_strategy,
    context_map_strategy,
    context_value_strategy,
)

__all__ = [
    "InMemoryContextStore",
    "context_key_strategy",
    "context_map_strategy",
    "context_value_strategy",
]
