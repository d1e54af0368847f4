"""Configuration defaults (see ``settings``)."""

from .settings import DEFAULT_DEBOUNCE_MS, DEFAULT_MAX_WAIT_MS  # noqa: F401

__all__ = ["DEFAULT_DEBOUNCE_MS", "DEFAULT_MAX_WAIT_MS"]
