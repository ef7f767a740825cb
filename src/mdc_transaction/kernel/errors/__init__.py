"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── UsageError                   (usage.py)
    │   ├── AlreadyCommittedError
    │   └── AlreadyRestoredError
    ├── ContextStoreError            (store.py)
    │   └── UnsupportedValueError
    └── ConfigError                  (config.py)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from mdc_transaction.kernel.errors.base import BaseError
from mdc_transaction.kernel.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mdc_transaction.kernel.errors.store import ContextStoreError, UnsupportedValueError
from mdc_transaction.kernel.errors.usage import (
    AlreadyCommittedError,
    AlreadyRestoredError,
    UsageError,
)

__all__ = [
    "AlreadyCommittedError",
    "AlreadyRestoredError",
    "BaseError",
    "ConfigError",
    "ContextStoreError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedValueError",
    "UsageError",
]
