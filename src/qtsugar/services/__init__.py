"""Service layer exports."""

from .logging_service import LogEntry, LoggingService  # noqa: F401

__all__ = ["LogEntry", "LoggingService"]
