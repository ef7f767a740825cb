"""Config settings – Settings, the dataclass every loader fills in."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields a :class:`SettingsLoader` reads by name.

    ``_prefix`` selects the variables: ``MDCSettings.store`` is read from
    ``MDC_STORE``. Subclasses check field combinations in :meth:`_validate`,
    which runs right after construction, so a loaded instance is always valid.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for unusable values."""


__all__ = ["Settings"]
