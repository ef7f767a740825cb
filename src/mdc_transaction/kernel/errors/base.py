"""Kernel errors – BaseError, the root of every mdc-transaction failure."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the mdc-transaction error tree.

    Each subclass names its failure with a ``default_code`` slug so log
    pipelines can group errors without parsing messages. ``str(err)`` is a
    single JSON line, ready to sit inside a structured log event::

        {"code": "already_restored", "message": "...", "detail": {}}

    Args:
        message: What went wrong, for humans.
        code: Overrides ``default_code``.
        detail: Extra JSON-friendly fields (keys, backend names, ...).
        cause: Underlying exception; also set as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            out["cause"] = repr(self.cause)
        return out

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
