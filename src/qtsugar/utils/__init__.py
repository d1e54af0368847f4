"""Scheduling utilities (debouncers and signal glue)."""

from .debouncer import Action, AdvancedDebouncer, Debouncer  # noqa: F401
from .signal_binding import bind_debounced  # noqa: F401

__all__ = ["Action", "AdvancedDebouncer", "Debouncer", "bind_debounced"]
