"""Context store errors — failures raised by a store implementation."""

from __future__ import annotations

from typing import Any

from mdc_transaction.kernel.errors.base import BaseError


class ContextStoreError(BaseError):
    """The diagnostic context store could not perform an operation."""

    default_code = "context_store_error"


class UnsupportedValueError(ContextStoreError):
    """The store refuses a value it cannot hold (typically ``None``)."""

    default_code = "unsupported_value"

    def __init__(
        self,
        key: str,
        value: object = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Context store does not accept {value!r} for key '{key}'",
            **kwargs,
        )
        self.key = key
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["key"] = self.key
        return base


__all__ = ["ContextStoreError", "UnsupportedValueError"]
