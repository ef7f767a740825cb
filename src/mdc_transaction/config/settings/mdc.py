"""Config settings – MDCSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mdc_transaction.config.settings.base import Settings
from mdc_transaction.context import BACKENDS
from mdc_transaction.kernel.errors import InvalidSettingValueError


@dataclasses.dataclass
class MDCSettings(Settings):
    """Settings read from ``MDC_*`` environment variables.

    ``store``
        Context store backend: ``contextvar`` (default) or ``structlog``.
    ``log_level``
        Root log level name applied when logging is configured.
    ``configure_logging``
        Install the structlog pipeline on :func:`~mdc_transaction.configure`.
    ``json_logs``
        Render JSON lines; otherwise plain console output.
    ``allow_none_values``
        When false, the store rejects ``None`` values.
    """

    _prefix: ClassVar[str] = "MDC"

    store: str = "contextvar"
    log_level: str = "INFO"
    configure_logging: bool = True
    json_logs: bool = True
    allow_none_values: bool = True

    def _validate(self) -> None:
        if self.store.strip().lower() not in BACKENDS:
            raise InvalidSettingValueError(
                "store", self.store, f"expected one of {sorted(BACKENDS)}"
            )
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


__all__ = ["MDCSettings"]
