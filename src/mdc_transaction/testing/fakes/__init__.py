"""Testing fakes – in-memory doubles for the context store port."""
from mdc_transaction.testing.fakes.store import InMemoryContextStore

__all__ = ["InMemoryContextStore"]
