"""Usage errors — the caller drove a builder or transaction through an invalid transition."""

from __future__ import annotations

from typing import Any

from mdc_transaction.kernel.errors.base import BaseError


class UsageError(BaseError, RuntimeError):
    """Programming error in the calling code. Never worth retrying."""

    default_code = "usage_error"


class AlreadyCommittedError(UsageError):
    """A builder was mutated or committed after its ``commit()``."""

    default_code = "already_committed"

    def __init__(
        self,
        message: str = "Cannot modify a committed MDCTransaction builder",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class AlreadyRestoredError(UsageError):
    """A transaction was restored twice."""

    default_code = "already_restored"

    def __init__(
        self,
        message: str = "MDCTransaction already restored",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = ["AlreadyCommittedError", "AlreadyRestoredError", "UsageError"]
