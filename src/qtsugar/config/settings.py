"""Global defaults for debounce scheduling."""

from __future__ import annotations

import os
from typing import Final, Optional


def _env_ms(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


# Common delays: 100-200ms for UI updates, 300-500ms for search input,
# 500-1000ms for expensive operations.
DEFAULT_DEBOUNCE_MS: Final = _env_ms("QTSUGAR_DEBOUNCE_MS", 300)
DEFAULT_MAX_WAIT_MS: Final = _env_ms("QTSUGAR_MAX_WAIT_MS", None)
