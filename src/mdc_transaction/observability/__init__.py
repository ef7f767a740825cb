"""Observability – logging integration for the diagnostic context."""

from mdc_transaction.observability.logging import JsonLoggerFactory, MDCProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "MDCProcessor",
    "get_logger",
]
