"""ValueDiff — what a committed transaction found and what it applied for one key."""
from __future__ import annotations

import dataclasses

from mdc_transaction.kernel.types.context_value import ContextValue


@dataclasses.dataclass(frozen=True)
class ValueDiff:
    original: ContextValue
    applied: ContextValue

    def drifted(self, now: ContextValue) -> bool:
        """True when the live value no longer matches what was applied."""
        return now != self.applied


__all__ = ["ValueDiff"]
