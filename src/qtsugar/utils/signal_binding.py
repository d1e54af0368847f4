"""Route Qt signal emissions through a debouncer.

Typical use is committing a text field's value into application state only
after the user pauses typing::

    unbind = bind_debounced(line_edit.textChanged, Debouncer(300), store.set_query)

Each emission submits ``slot(*args)`` to the debouncer with that emission's
arguments captured, so the value finally committed is the latest one.
"""

from __future__ import annotations

from typing import Any, Callable, Union

from .debouncer import AdvancedDebouncer, Debouncer

__all__ = ["bind_debounced"]


def bind_debounced(
    signal: Any,
    debouncer: Union[Debouncer, AdvancedDebouncer],
    slot: Callable[..., None],
) -> Callable[[], None]:
    """Connect ``signal`` so emissions reach ``slot`` via ``debouncer``.

    Returns a callable that disconnects the binding and cancels any pending
    invocation. Calling it twice is harmless.
    """

    def _on_emit(*args: Any) -> None:
        debouncer.run(lambda: slot(*args))

    signal.connect(_on_emit)
    bound = True

    def unbind() -> None:
        nonlocal bound
        if not bound:
            return
        bound = False
        signal.disconnect(_on_emit)
        debouncer.cancel()

    return unbind
