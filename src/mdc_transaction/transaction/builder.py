"""Transaction – Builder that stages diagnostic context changes until commit."""
from __future__ import annotations

from types import MappingProxyType, TracebackType
from typing import Mapping

from mdc_transaction.context import ContextStore, apply_value, get_default_store
from mdc_transaction.kernel.errors import AlreadyCommittedError
from mdc_transaction.kernel.types import ABSENT, ContextValue, Present, ValueDiff, value_in
from mdc_transaction.observability.logging import get_logger
from mdc_transaction.transaction.state import BuilderState, Committed, Open
from mdc_transaction.transaction.transaction import MDCTransaction


class Builder:
    """Pending changes to the diagnostic context.

    Nothing touches the store until :meth:`commit`. Every mutator returns the
    builder itself so calls chain::

        tx = Builder().put("user", uid).remove("anonymous").commit()

    A builder commits once; afterwards every mutator raises
    :class:`AlreadyCommittedError`.
    """

    def __init__(self, store: ContextStore | None = None) -> None:
        self._store = store if store is not None else get_default_store()
        self._state: BuilderState = Open({})
        self._entered: MDCTransaction | None = None

    @property
    def store(self) -> ContextStore:
        return self._store

    @property
    def committed(self) -> bool:
        return isinstance(self._state, Committed)

    @property
    def pending(self) -> Mapping[str, ContextValue]:
        """Read-only view of the staged ``key -> desired value`` changes."""
        return MappingProxyType(self._changes())

    def _changes(self) -> dict[str, ContextValue]:
        match self._state:
            case Open(changes=changes):
                return changes
            case _:
                raise AlreadyCommittedError()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def put(self, key: str, value: str | None, default: str | None = None) -> Builder:
        """Stage *value* for *key*, or *default* when *value* is ``None``.

        ``put(key, None)`` stages a ``None`` value: the key will exist.
        """
        self._changes()[key] = Present(value if value is not None else default)
        return self

    def put_if_not_none(self, key: str, value: str | None) -> Builder:
        if value is None:
            return self
        return self.put(key, value)

    def remove(self, key: str) -> Builder:
        self._changes()[key] = ABSENT
        return self

    def clear(self) -> Builder:
        """Stage removal of every key in the store right now."""
        changes = self._changes()
        for key in self._store.copy_all():
            changes[key] = ABSENT
        return self

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self) -> MDCTransaction:
        """Apply the staged changes and return the transaction that undoes them.

        Raises
        ------
        AlreadyCommittedError
            When the builder was already committed.
        """
        changes = self._changes()
        self._state = Committed()
        entries = self._store.copy_all()
        diff: dict[str, ValueDiff] = {}
        for key, desired in changes.items():
            diff[key] = ValueDiff(original=value_in(entries, key), applied=desired)
            apply_value(self._store, key, desired)
        transaction = MDCTransaction(diff, self._store)
        get_logger(__name__).debug("mdc.commit", keys=list(diff))
        return transaction

    def __enter__(self) -> MDCTransaction:
        self._entered = self.commit()
        return self._entered

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._entered is not None:
            self._entered.__exit__(exc_type, exc, tb)
            self._entered = None


# ----------------------------------------------------------------------
# Module-level entry points
# ----------------------------------------------------------------------


def builder(store: ContextStore | None = None) -> Builder:
    return Builder(store)


def put(
    key: str,
    value: str | None,
    default: str | None = None,
    *,
    store: ContextStore | None = None,
) -> Builder:
    return Builder(store).put(key, value, default)


def put_if_not_none(key: str, value: str | None, *, store: ContextStore | None = None) -> Builder:
    return Builder(store).put_if_not_none(key, value)


def remove(key: str, *, store: ContextStore | None = None) -> Builder:
    return Builder(store).remove(key)


def clear(*, store: ContextStore | None = None) -> Builder:
    return Builder(store).clear()


__all__ = ["Builder", "builder", "clear", "put", "put_if_not_none", "remove"]
