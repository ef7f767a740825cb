"""Observability – structured logging helpers."""
from mdc_transaction.observability.logging.factory import JsonLoggerFactory
from mdc_transaction.observability.logging.processors import MDCProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "MDCProcessor",
    "get_logger",
]
