"""Testing generators – property-based test data."""
from mdc_transaction.testing.generators.strategies import (
    context_key_strategy,
    context_map_strategy,
    context_value_strategy,
)

__all__ = [
    "context_key_strategy",
    "context_map_strategy",
    "context_value_strategy",
]
