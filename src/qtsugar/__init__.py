"""qtsugar public API.

Curated, intentionally small surface: the two debounce schedulers, the
signal binding helper and the configuration error. No side effects at
import time (no implicit QApplication creation).
"""

from __future__ import annotations

from .errors import DebouncerConfigError, DebouncerError  # noqa: F401
from .utils.debouncer import Action, AdvancedDebouncer, Debouncer  # noqa: F401
from .utils.signal_binding import bind_debounced  # noqa: F401

__all__ = [
    "Action",
    "AdvancedDebouncer",
    "Debouncer",
    "DebouncerConfigError",
    "DebouncerError",
    "bind_debounced",
]

__version__ = "0.1.0"
