"""Structured errors raised by the debounce schedulers."""

from __future__ import annotations
from typing import Any


class DebouncerError(Exception):
    """Base class for scheduler related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class DebouncerConfigError(DebouncerError, ValueError):
    """Raised at construction when the scheduler configuration is unusable."""
