"""Debounce schedulers driven by the Qt event loop.

Coalesces bursts of invocation requests into a controlled, time-bounded
execution schedule. A typical use is a search field: each keystroke submits a
new action, and only the last one runs once the user stops typing.

Two flavours
------------
``Debouncer``
    Classic sliding-window debounce. Every ``run`` call replaces the pending
    action and restarts the delay; only the most recent action executes.

``AdvancedDebouncer``
    Same coalescing plus optional leading-edge execution and a hard
    ``max_wait_ms`` deadline measured from the first call of a burst, so a
    continuous input stream cannot postpone execution indefinitely.

Threading Model
---------------
Single-threaded and cooperative. Both timers are single-shot ``QTimer``
objects owned by the scheduler; they only fire while a Qt event loop runs in
the scheduler's thread. ``run`` never blocks. An action may call ``run`` on
the same instance; the nested call simply starts a new burst.

Errors
------
Exceptions raised by an action propagate to whoever invoked it (the caller of
``run`` for leading execution, the Qt event loop for timer execution, which
hands them to ``sys.excepthook``). Burst state is reset before a timer driven
action executes, so the instance stays usable after a failure.

Usage
-----
    debouncer = Debouncer(300, parent=line_edit)
    line_edit.textChanged.connect(
        lambda text: debouncer.run(lambda: model.search(text))
    )
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject, Qt, QTimer

from ..config import settings
from ..errors import DebouncerConfigError

__all__ = ["Action", "Debouncer", "AdvancedDebouncer"]

Action = Callable[[], None]

_log = logging.getLogger(__name__)


def _validated_ms(name: str, value: int) -> int:
    if value < 0:
        _log.debug("rejecting %s=%r", name, value)
        raise DebouncerConfigError(
            f"{name} must be non-negative (got {value})", context={name: value}
        )
    return int(value)


def _single_shot(parent: QObject, slot: Callable[[], None]) -> QTimer:
    timer = QTimer(parent)
    timer.setSingleShot(True)
    # Coarse timers may drift by 5%; delay and deadline bounds must hold.
    timer.setTimerType(Qt.TimerType.PreciseTimer)
    timer.timeout.connect(slot)  # type: ignore[attr-defined]
    return timer


def _remaining(timer: QTimer) -> int:
    if not timer.isActive():
        return 0
    return max(0, timer.remainingTime())


class Debouncer(QObject):
    """Delay an action, restarting the delay on every new request.

    Only the action from the most recent ``run`` call executes; earlier
    actions are dropped silently.
    """

    def __init__(self, delay_ms: Optional[int] = None, parent: Optional[QObject] = None):
        delay = settings.DEFAULT_DEBOUNCE_MS if delay_ms is None else delay_ms
        delay = _validated_ms("delay_ms", delay)
        super().__init__(parent)
        self._delay_ms = delay
        self._action: Optional[Action] = None
        self._timer = _single_shot(self, self._on_timeout)

    # Configuration -----------------------------------------------------
    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    # Control -----------------------------------------------------------
    def run(self, action: Action) -> None:
        """Record ``action`` and (re)start the delay timer."""
        self._action = action
        self._timer.start(self._delay_ms)

    def cancel(self) -> None:
        """Drop the pending action without running it. Safe when idle."""
        if self._timer.isActive():
            _log.debug("debouncer cancelled with a pending action")
        self._timer.stop()
        self._action = None

    def dispose(self) -> None:
        """Cancel pending work; call when the owner is torn down.

        The instance is not locked afterwards: a later ``run`` still works.
        """
        self.cancel()

    # Introspection -----------------------------------------------------
    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def remaining_time(self) -> int:
        """Milliseconds until the pending action runs (0 when idle)."""
        return _remaining(self._timer)

    # Internal ----------------------------------------------------------
    def _on_timeout(self) -> None:
        action, self._action = self._action, None
        if action is not None:
            action()


class AdvancedDebouncer(QObject):
    """Debouncer with leading-edge execution and a max-wait deadline.

    Parameters
    ----------
    delay_ms:
        Quiet period before trailing execution. ``None`` uses
        ``settings.DEFAULT_DEBOUNCE_MS``.
    max_wait_ms:
        Upper bound between the first call of a burst and a forced
        execution. ``None`` uses ``settings.DEFAULT_MAX_WAIT_MS`` (unset by
        default, meaning no deadline). Should be >= ``delay_ms`` to matter
        but this is not enforced.
    leading:
        Execute immediately on the first call of a burst.
    trailing:
        Execute the latest action once the delay elapses.

    Raises ``DebouncerConfigError`` when both ``leading`` and ``trailing`` are
    false or when a duration is negative.

    Note: with ``leading`` and ``trailing`` both enabled a single call runs
    twice, once immediately and once when the delay elapses, because the
    trailing edge does not look at whether the leading edge already ran.
    """

    def __init__(
        self,
        delay_ms: Optional[int] = None,
        *,
        max_wait_ms: Optional[int] = None,
        leading: bool = False,
        trailing: bool = True,
        parent: Optional[QObject] = None,
    ):
        if not (leading or trailing):
            _log.debug("rejecting debouncer with both edges disabled")
            raise DebouncerConfigError(
                "At least one of leading or trailing must be true",
                context={"leading": leading, "trailing": trailing},
            )
        delay = settings.DEFAULT_DEBOUNCE_MS if delay_ms is None else delay_ms
        max_wait = settings.DEFAULT_MAX_WAIT_MS if max_wait_ms is None else max_wait_ms
        delay = _validated_ms("delay_ms", delay)
        if max_wait is not None:
            max_wait = _validated_ms("max_wait_ms", max_wait)
        super().__init__(parent)
        self._delay_ms = delay
        self._max_wait_ms = max_wait
        self._leading = bool(leading)
        self._trailing = bool(trailing)
        self._action: Optional[Action] = None
        self._has_invoked = False
        self._delay_timer = _single_shot(self, self._on_delay_timeout)
        self._deadline_timer = _single_shot(self, self._on_deadline_timeout)

    # Configuration -----------------------------------------------------
    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def max_wait_ms(self) -> Optional[int]:
        return self._max_wait_ms

    @property
    def leading(self) -> bool:
        return self._leading

    @property
    def trailing(self) -> bool:
        return self._trailing

    # Control -----------------------------------------------------------
    def run(self, action: Action) -> None:
        """Submit ``action``; may execute it synchronously on the leading edge."""
        self._action = action
        fire_leading = self._leading and not self._has_invoked

        self._delay_timer.start(self._delay_ms)

        # Armed once per burst; later calls must not push the deadline back.
        if self._max_wait_ms is not None and not self._deadline_timer.isActive():
            self._deadline_timer.start(self._max_wait_ms)

        if fire_leading:
            self._invoke_leading()

    def cancel(self) -> None:
        """Reset the burst without executing anything. Safe when idle."""
        if self.is_active:
            _log.debug("advanced debouncer cancelled with a pending burst")
        self._reset()

    def dispose(self) -> None:
        self.cancel()

    # Introspection -----------------------------------------------------
    @property
    def is_active(self) -> bool:
        return self._delay_timer.isActive() or self._deadline_timer.isActive()

    @property
    def remaining_time(self) -> int:
        """Milliseconds until the earliest armed timer fires (0 when idle)."""
        pending = [
            _remaining(t) for t in (self._delay_timer, self._deadline_timer) if t.isActive()
        ]
        return min(pending) if pending else 0

    # Internal ----------------------------------------------------------
    def _invoke_leading(self) -> None:
        # Flag first so a reentrant run() from the action cannot fire again.
        self._has_invoked = True
        action = self._action
        if action is None:
            return
        try:
            action()
        except BaseException:
            # A failed leading call does not spend the leading edge.
            self._has_invoked = False
            raise

    def _on_delay_timeout(self) -> None:
        action = self._action if self._trailing else None
        self._reset()
        if action is not None:
            action()

    def _on_deadline_timeout(self) -> None:
        action = self._action
        self._reset()
        if action is not None:
            _log.debug("max wait of %s ms reached; forcing execution", self._max_wait_ms)
            action()

    def _reset(self) -> None:
        self._delay_timer.stop()
        self._deadline_timer.stop()
        self._has_invoked = False
        self._action = None
