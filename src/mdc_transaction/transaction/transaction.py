"""Transaction – MDCTransaction, the undo record of a committed builder."""
from __future__ import annotations

from types import MappingProxyType, TracebackType
from typing import TYPE_CHECKING, Mapping

from mdc_transaction.context import ContextStore, apply_value
from mdc_transaction.kernel.errors import AlreadyRestoredError, ContextStoreError
from mdc_transaction.kernel.types import ValueDiff, value_in
from mdc_transaction.observability.logging import get_logger
from mdc_transaction.transaction.state import Active, Restored, TransactionState

if TYPE_CHECKING:
    from mdc_transaction.transaction.builder import Builder


class MDCTransaction:
    """Changes applied to the diagnostic context, ready to be undone.

    Instances come from :meth:`Builder.commit`. Example::

        store.put("foo", "bar")
        store.put("qux", "quux")

        tx = MDCTransaction.put("foo", "baz").put("hello", "world").remove("qux").commit()
        # foo=baz, hello=world, qux absent

        tx.restore()
        # foo=bar, hello absent, qux=quux

    The transaction is also a context manager that restores on exit::

        with MDCTransaction.put("request_id", rid).commit():
            handle(request)
    """

    def __init__(self, diff: Mapping[str, ValueDiff], store: ContextStore) -> None:
        self._store = store
        self._state: TransactionState = Active(dict(diff))

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    @staticmethod
    def builder(store: ContextStore | None = None) -> Builder:
        from mdc_transaction.transaction.builder import Builder

        return Builder(store)

    @staticmethod
    def put(
        key: str,
        value: str | None,
        default: str | None = None,
        *,
        store: ContextStore | None = None,
    ) -> Builder:
        return MDCTransaction.builder(store).put(key, value, default)

    @staticmethod
    def put_if_not_none(key: str, value: str | None, *, store: ContextStore | None = None) -> Builder:
        return MDCTransaction.builder(store).put_if_not_none(key, value)

    @staticmethod
    def remove(key: str, *, store: ContextStore | None = None) -> Builder:
        return MDCTransaction.builder(store).remove(key)

    @staticmethod
    def clear(*, store: ContextStore | None = None) -> Builder:
        return MDCTransaction.builder(store).clear()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def restored(self) -> bool:
        return isinstance(self._state, Restored)

    @property
    def diff(self) -> Mapping[str, ValueDiff]:
        """Read-only view of ``key -> ValueDiff(original, applied)``."""
        return MappingProxyType(self._active())

    def _active(self) -> dict[str, ValueDiff]:
        match self._state:
            case Active(diff=diff):
                return diff
            case _:
                raise AlreadyRestoredError()

    # ------------------------------------------------------------------
    # Restore
    # ------------------------------------------------------------------

    def restore(self) -> None:
        """Undo every change made by this transaction.

        A key whose live value differs from the value this transaction applied
        is left untouched: whoever changed it afterwards owns it now. The
        transaction is consumed even when keys are skipped.

        A store that rejects one write does not stop the others; the first
        :class:`ContextStoreError` is raised once every key was attempted.

        Raises
        ------
        AlreadyRestoredError
            When called a second time.
        ContextStoreError
            When the store rejected at least one revert.
        """
        diff = self._active()
        self._state = Restored()
        log = get_logger(__name__)
        entries = self._store.copy_all()
        restored = skipped = 0
        failures: list[ContextStoreError] = []
        for key, value_diff in diff.items():
            now = value_in(entries, key)
            if value_diff.drifted(now):
                # Changed after commit: the new owner cleans it up.
                log.debug(
                    "mdc.restore.skipped",
                    key=key,
                    expected=repr(value_diff.applied),
                    now=repr(now),
                )
                skipped += 1
                continue
            try:
                apply_value(self._store, key, value_diff.original)
            except ContextStoreError as exc:
                log.warning("mdc.restore.failed", key=key, error=exc.code)
                failures.append(exc)
                continue
            restored += 1
        log.debug("mdc.restore", restored=restored, skipped=skipped, failed=len(failures))
        if failures:
            raise failures[0]

    def __enter__(self) -> MDCTransaction:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.restored:
            self.restore()

    def __repr__(self) -> str:
        match self._state:
            case Active(diff=diff):
                return f"MDCTransaction(keys={sorted(diff)!r})"
            case _:
                return "MDCTransaction(restored)"


__all__ = ["MDCTransaction"]
