"""Unit tests for Builder staging and commit."""

from __future__ import annotations

import pytest

from mdc_transaction import Builder, MDCTransaction
from mdc_transaction.kernel.errors import AlreadyCommittedError, UnsupportedValueError
from mdc_transaction.kernel.types import ABSENT, Present
from mdc_transaction.testing.fakes import InMemoryContextStore


# ---------------------------------------------------------------------------
# Staging
# ---------------------------------------------------------------------------


class TestStaging:
    def test_nothing_written_before_commit(self) -> None:
        store = InMemoryContextStore({"foo": "bar"})
        Builder(store).put("foo", "baz").remove("x").clear()
        assert store.operations == []
        assert store.copy_all() == {"foo": "bar"}

    def test_mutators_chain(self) -> None:
        builder = Builder(InMemoryContextStore())
        assert builder.put("a", "1") is builder
        assert builder.put_if_not_none("b", None) is builder
        assert builder.remove("c") is builder
        assert builder.clear() is builder

    def test_later_staging_overwrites_earlier(self) -> None:
        builder = Builder(InMemoryContextStore()).put("foo", "bar").remove("foo")
        assert dict(builder.pending) == {"foo": ABSENT}

    def test_put_with_default(self) -> None:
        builder = Builder(InMemoryContextStore())
        builder.put("a", "v", "default").put("b", None, "default")
        assert dict(builder.pending) == {"a": Present("v"), "b": Present("default")}

    def test_put_none_stages_present_none(self) -> None:
        builder = Builder(InMemoryContextStore()).put("foo", None)
        assert builder.pending["foo"] == Present(None)

    def test_put_empty_string_is_not_replaced_by_default(self) -> None:
        builder = Builder(InMemoryContextStore()).put("foo", "", "default")
        assert builder.pending["foo"] == Present("")

    def test_put_if_not_none_skips_none(self) -> None:
        builder = Builder(InMemoryContextStore()).put_if_not_none("foo", None)
        assert len(builder.pending) == 0

    def test_put_if_not_none_stages_value(self) -> None:
        builder = Builder(InMemoryContextStore()).put_if_not_none("foo", "bar")
        assert builder.pending["foo"] == Present("bar")

    def test_clear_reads_store_at_call_time(self) -> None:
        store = InMemoryContextStore({"a": "1"})
        builder = Builder(store).clear()
        store.put("b", "2")
        builder.commit()
        assert store.copy_all() == {"b": "2"}

    def test_clear_initializes_uninitialized_store(self) -> None:
        store = InMemoryContextStore(initialized=False)
        builder = Builder(store).clear()
        assert store.initialized
        assert len(builder.pending) == 0

    def test_put_after_clear_wins(self) -> None:
        store = InMemoryContextStore({"a": "1", "b": "2"})
        Builder(store).clear().put("a", "new").commit()
        assert store.copy_all() == {"a": "new"}

    def test_pending_view_is_read_only(self) -> None:
        builder = Builder(InMemoryContextStore()).put("a", "1")
        with pytest.raises(TypeError):
            builder.pending["a"] = ABSENT  # type: ignore[index]


# ---------------------------------------------------------------------------
# Commit
# ---------------------------------------------------------------------------


class TestCommit:
    def test_writes_in_staging_order(self) -> None:
        store = InMemoryContextStore({"c": "3"})
        Builder(store).put("a", "1").remove("c").put("b", None).commit()
        assert store.operations == [
            ("put", "a", "1"),
            ("remove", "c", None),
            ("put", "b", None),
        ]

    def test_default_values(self, mdc_store: InMemoryContextStore) -> None:
        MDCTransaction.put("foo", "bar", "baz").commit()
        assert mdc_store.get("foo") == "bar"
        MDCTransaction.put("foo", None, "baz").commit()
        assert mdc_store.get("foo") == "baz"

    def test_put_if_not_none(self, mdc_store: InMemoryContextStore) -> None:
        MDCTransaction.put_if_not_none("foo", None).commit()
        assert mdc_store.copy_all() == {}
        MDCTransaction.put_if_not_none("foo", "bar").commit()
        assert mdc_store.get("foo") == "bar"

    def test_commit_on_uninitialized_store(self) -> None:
        store = InMemoryContextStore(initialized=False)
        tx = Builder(store).put("foo", "bar").commit()
        assert store.copy_all() == {"foo": "bar"}
        tx.restore()
        assert store.copy_all() == {}

    def test_records_original_values(self) -> None:
        store = InMemoryContextStore({"foo": None})
        tx = Builder(store).put("foo", "bar").put("new", "x").commit()
        assert tx.diff["foo"].original == Present(None)
        assert tx.diff["new"].original is ABSENT

    def test_store_rejecting_none_propagates(self) -> None:
        store = InMemoryContextStore(allow_none=False)
        builder = Builder(store).put("foo", None)
        with pytest.raises(UnsupportedValueError):
            builder.commit()
        assert builder.committed


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_no_mutations_after_commit(self, mdc_store: InMemoryContextStore) -> None:
        builder = MDCTransaction.clear()
        builder.commit()
        with pytest.raises(AlreadyCommittedError):
            builder.put("a", "b")
        with pytest.raises(AlreadyCommittedError):
            builder.put("a", None, "default")
        with pytest.raises(AlreadyCommittedError):
            builder.put_if_not_none("a", "b")
        with pytest.raises(AlreadyCommittedError):
            builder.remove("a")
        with pytest.raises(AlreadyCommittedError):
            builder.clear()

    def test_cannot_commit_twice(self, mdc_store: InMemoryContextStore) -> None:
        builder = MDCTransaction.put("a", "b")
        builder.commit()
        with pytest.raises(AlreadyCommittedError):
            builder.commit()

    def test_failed_mutation_leaves_store_untouched(self, mdc_store: InMemoryContextStore) -> None:
        builder = MDCTransaction.put("a", "b")
        builder.commit()
        mdc_store.operations.clear()
        with pytest.raises(AlreadyCommittedError):
            builder.put("c", "d")
        assert mdc_store.operations == []

    def test_committed_flag(self) -> None:
        builder = Builder(InMemoryContextStore())
        assert not builder.committed
        builder.commit()
        assert builder.committed

    def test_builder_is_truthy_when_empty_and_after_commit(self) -> None:
        builder = Builder(InMemoryContextStore()).put_if_not_none("k", None)
        assert bool(builder)
        assert (builder or None) is builder
        builder.commit()
        assert bool(builder)

    def test_pending_unavailable_after_commit(self) -> None:
        builder = Builder(InMemoryContextStore())
        builder.commit()
        with pytest.raises(AlreadyCommittedError):
            _ = builder.pending

    def test_uses_default_store(self, mdc_store: InMemoryContextStore) -> None:
        assert Builder().store is mdc_store


# ---------------------------------------------------------------------------
# Context manager
# ---------------------------------------------------------------------------


class TestContextManager:
    def test_commits_on_enter_and_restores_on_exit(self) -> None:
        store = InMemoryContextStore({"foo": "bar"})
        with Builder(store).put("foo", "baz") as tx:
            assert store.get("foo") == "baz"
            assert not tx.restored
        assert tx.restored
        assert store.copy_all() == {"foo": "bar"}

    def test_restores_on_exception(self) -> None:
        store = InMemoryContextStore()
        with pytest.raises(RuntimeError):
            with Builder(store).put("foo", "bar"):
                raise RuntimeError("boom")
        assert store.copy_all() == {}

    def test_cannot_reenter(self) -> None:
        builder = Builder(InMemoryContextStore()).put("foo", "bar")
        with builder:
            pass
        with pytest.raises(AlreadyCommittedError):
            with builder:
                pass
