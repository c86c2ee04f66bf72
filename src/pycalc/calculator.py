"""Stateful calculator session.

:class:`Calculator` is what a presentation layer talks to: it holds the
current state record, swaps it for a new one on every key press and
tells an optional observer when the record changed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pycalc.config import CalcConfig
from pycalc.display import render
from pycalc.engine import handle_key
from pycalc.models.display import DisplayFields
from pycalc.models.keys import KeyEvent
from pycalc.models.state import INITIAL_STATE, CalculatorState

_logger = logging.getLogger(__name__)

StateChangeCallback = Callable[[CalculatorState, CalculatorState], None]


class Calculator:
    """One calculator, one state record.

    Parameters
    ----------
    config : CalcConfig or None
        Display and tracing options. Defaults to :class:`CalcConfig()`.
    on_change : callable or None
        Called as ``on_change(old, new)`` after a key press changed the
        state. Exceptions raised by the callback are logged and dropped
        so a faulty renderer cannot break key handling.
    """

    def __init__(
        self,
        config: CalcConfig | None = None,
        *,
        on_change: StateChangeCallback | None = None,
    ) -> None:
        self._config = config or CalcConfig()
        self._on_change = on_change
        self._state = INITIAL_STATE

    @property
    def config(self) -> CalcConfig:
        return self._config

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> DisplayFields:
        return render(self._state, precision=self._config.display_precision)

    def press(self, key: str | KeyEvent) -> CalculatorState:
        """Apply one key press and return the new state."""
        old = self._state
        new = handle_key(old, key)
        if new == old:
            return old

        self._state = new
        if self._config.trace_enabled:
            _logger.debug("Key %r: %s -> %s", key, old, new)
        if self._on_change is not None:
            try:
                self._on_change(old, new)
            except Exception:
                _logger.debug("on_change callback failed", exc_info=True)
        return new

    def press_many(self, keys: Iterable[str | KeyEvent]) -> CalculatorState:
        """Apply a sequence of key presses in order."""
        for key in keys:
            self.press(key)
        return self._state

    def clear(self) -> CalculatorState:
        """Reset to the initial state, same as pressing ``AC``."""
        return self.press("AC")
