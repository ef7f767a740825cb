"""Shared fixtures: every test starts with an empty diagnostic context."""
from __future__ import annotations

import pytest
import structlog

from mdc_transaction.context import ContextVarStore, reset_default_store
from mdc_transaction.testing.fixtures import mdc_store  # noqa: F401


def _reset_context() -> None:
    ContextVarStore().set_context_map(None)
    structlog.contextvars.clear_contextvars()
    reset_default_store()


@pytest.fixture(autouse=True)
def _isolated_context():
    _reset_context()
    yield
    _reset_context()
    structlog.reset_defaults()
