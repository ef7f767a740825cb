"""ContextValue — Present and Absent variants of a diagnostic context entry.

A key held in the context with the value ``None`` is ``Present(None)``; a key
not held at all is ``Absent``. The two are never equal.
"""

from __future__ import annotations

from typing import Mapping, TypeAlias


class Present:
    """Key exists in the context, holding *value* (possibly ``None``)."""

    __slots__ = ("_value",)

    def __init__(self, value: str | None) -> None:
        self._value = value

    @property
    def value(self) -> str | None:
        return self._value

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    def value_or(self, default: str | None) -> str | None:  # noqa: ARG002
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent:
    """Key does not exist in the context."""

    __slots__ = ()

    _instance: Absent | None = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    def value_or(self, default: str | None) -> str | None:
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Present, Absent)):
            return NotImplemented
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "Absent"


ABSENT = Absent()

ContextValue: TypeAlias = Present | Absent


def value_in(entries: Mapping[str, str | None], key: str) -> ContextValue:
    """Read *key* from a context snapshot, keeping ``None`` distinct from absence."""
    if key in entries:
        return Present(entries[key])
    return ABSENT


__all__ = ["ABSENT", "Absent", "ContextValue", "Present", "value_in"]
