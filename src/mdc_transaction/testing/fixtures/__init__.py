"""Testing fixtures – pytest fixtures for the context store."""
try:
    import pytest  # noqa: F401

    from mdc_transaction.testing.fixtures.mdc import mdc_store

except ImportError:
    pass

__all__ = ["mdc_store"]
