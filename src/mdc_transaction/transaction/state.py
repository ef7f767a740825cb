"""Transaction – lifecycle states of builders and transactions."""
from __future__ import annotations

import dataclasses
from typing import TypeAlias

from mdc_transaction.kernel.types import ContextValue, ValueDiff


@dataclasses.dataclass(frozen=True)
class Open:
    """Builder still accepting changes."""
    changes: dict[str, ContextValue]


@dataclasses.dataclass(frozen=True)
class Committed:
    """Builder consumed by ``commit()``."""


@dataclasses.dataclass(frozen=True)
class Active:
    """Transaction applied and not yet restored."""
    diff: dict[str, ValueDiff]


@dataclasses.dataclass(frozen=True)
class Restored:
    """Transaction consumed by ``restore()``."""


BuilderState: TypeAlias = Open | Committed
TransactionState: TypeAlias = Active | Restored

__all__ = ["Active", "BuilderState", "Committed", "Open", "Restored", "TransactionState"]
