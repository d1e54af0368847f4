"""In-process capture of scheduler log records.

The schedulers only log at DEBUG and configure no handlers. ``LoggingService``
is itself a ``logging.Handler`` that hooks onto the ``qtsugar`` logger while
attached, so debug panels and tests can see what the debouncers did::

    with LoggingService() as logs:
        debouncer.cancel()
    logs.messages(logger="debouncer")

Everything runs on the GUI thread, so the buffer is a plain bounded deque.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

__all__ = ["LogEntry", "LoggingService"]


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str


class LoggingService(logging.Handler):
    def __init__(self, capacity: int = 200, logger_name: str = "qtsugar") -> None:
        super().__init__(level=logging.DEBUG)
        self._logger = logging.getLogger(logger_name)
        self._entries: Deque[LogEntry] = deque(maxlen=max(1, capacity))
        self._prev_level: Optional[int] = None

    # Lifecycle --------------------------------------------------------
    @property
    def attached(self) -> bool:
        return self._prev_level is not None

    def attach(self) -> None:
        if self.attached:
            return
        self._prev_level = self._logger.level
        self._logger.addHandler(self)
        if self._logger.getEffectiveLevel() > logging.DEBUG:
            self._logger.setLevel(logging.DEBUG)

    def detach(self) -> None:
        if not self.attached:
            return
        self._logger.removeHandler(self)
        self._logger.setLevel(self._prev_level)
        self._prev_level = None

    def __enter__(self) -> "LoggingService":
        self.attach()
        return self

    def __exit__(self, *exc_info) -> None:
        self.detach()

    # logging.Handler ---------------------------------------------------
    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        self._entries.append(LogEntry(record.levelname, record.name, record.getMessage()))

    # Query ------------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def messages(self, *, level: str | None = None, logger: str | None = None) -> List[str]:
        """Messages of captured records, optionally by level and logger name substring."""
        return [
            e.message
            for e in self._entries
            if (level is None or e.level == level) and (logger is None or logger in e.name)
        ]

    def clear(self) -> None:
        self._entries.clear()
