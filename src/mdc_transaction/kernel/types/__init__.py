"""Kernel value types — public re-export surface.

Modules:
  context_value.py — Present, Absent, ContextValue, value_in
  diff.py          — ValueDiff
"""

from mdc_transaction.kernel.types.context_value import (
    ABSENT,
    Absent,
    ContextValue,
    Present,
    value_in,
)
from mdc_transaction.kernel.types.diff import ValueDiff

__all__ = [
    "ABSENT",
    "Absent",
    "ContextValue",
    "Present",
    "ValueDiff",
    "value_in",
]
