"""Key-driven calculator state machine.

:func:`handle_key` is the only way state changes. It is pure: given a
:class:`~pycalc.models.CalculatorState` and a key it returns the next
record and never raises for a recognised or unrecognised key.

Two macro-states exist. In *Normal* the entry is being typed or shows a
result, optionally with one operator chain pending. In *Error* the entry
holds ``"Error"`` and the chain is cleared; only a digit, the decimal
point or clear-all leads back to Normal (equals, backspace, sign toggle
and percent reset, operators are ignored).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pycalc._constants import ZERO_TEXT
from pycalc.arithmetic import evaluate, number_to_text, parse_number
from pycalc.exceptions import CalcEvaluationError
from pycalc.models.keys import KeyEvent, KeyKind, Operator, parse_key
from pycalc.models.state import ERROR_STATE, INITIAL_STATE, CalculatorState

_logger = logging.getLogger(__name__)


def _fold(a: str, op: Operator, b: str) -> str | None:
    """Evaluate ``a op b``; ``None`` means the engine must enter Error."""
    try:
        return evaluate(a, op, b)
    except CalcEvaluationError as err:
        _logger.debug("Evaluation failed kind=%s: %s", err.kind, err)
        return None


def _digit(state: CalculatorState, digit: str) -> CalculatorState:
    if state.is_error:
        return INITIAL_STATE.replace(entry=digit, awaiting_new_entry=False)
    if state.awaiting_new_entry:
        return state.replace(entry=digit, awaiting_new_entry=False)
    if state.entry == ZERO_TEXT:
        return state.replace(entry=digit)
    return state.replace(entry=state.entry + digit)


def _decimal(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return INITIAL_STATE.replace(entry="0.", awaiting_new_entry=False)
    if state.awaiting_new_entry:
        return state.replace(entry="0.", awaiting_new_entry=False)
    if "." in state.entry:
        return state
    return state.replace(entry=state.entry + ".")


def _backspace(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return INITIAL_STATE
    if state.awaiting_new_entry or len(state.entry) <= 1:
        return state.replace(entry=ZERO_TEXT, awaiting_new_entry=True)
    shortened = state.entry[:-1]
    if shortened in ("", "-"):
        return state.replace(entry=ZERO_TEXT, awaiting_new_entry=True)
    return state.replace(entry=shortened)


def _toggle_sign(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return INITIAL_STATE
    if state.entry in (ZERO_TEXT, "0."):
        return state
    if state.entry.startswith("-"):
        return state.replace(entry=state.entry[1:])
    return state.replace(entry="-" + state.entry)


def _percent(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return INITIAL_STATE
    value = parse_number(state.entry)
    if value is None:
        return ERROR_STATE
    # Editing continues on the scaled value; the chain is left alone.
    return state.replace(entry=number_to_text(value / 100), awaiting_new_entry=False)


def _operator(state: CalculatorState, op: Operator) -> CalculatorState:
    if state.is_error:
        return state
    if state.stored_operand is None or state.pending_op is None:
        return state.replace(stored_operand=state.entry, pending_op=op, awaiting_new_entry=True)
    if state.awaiting_new_entry:
        # Operator pressed twice in a row: the last one wins.
        return state.replace(pending_op=op)

    result = _fold(state.stored_operand, state.pending_op, state.entry)
    if result is None:
        return ERROR_STATE
    return CalculatorState(entry=result, stored_operand=result, pending_op=op, awaiting_new_entry=True)


def _equals(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return INITIAL_STATE
    if state.stored_operand is None or state.pending_op is None:
        return state

    # "5 × =" repeats the stored operand on the right: 25.
    right = state.stored_operand if state.awaiting_new_entry else state.entry
    result = _fold(state.stored_operand, state.pending_op, right)
    if result is None:
        return ERROR_STATE
    return CalculatorState(entry=result, awaiting_new_entry=True)


_ACTIONS: dict[KeyKind, Callable[[CalculatorState], CalculatorState]] = {
    KeyKind.DECIMAL: _decimal,
    KeyKind.EQUALS: _equals,
    KeyKind.BACKSPACE: _backspace,
    KeyKind.TOGGLE_SIGN: _toggle_sign,
    KeyKind.PERCENT: _percent,
}


def handle_key(state: CalculatorState, key: str | KeyEvent) -> CalculatorState:
    """Return the state that follows *state* after pressing *key*.

    *key* is either a raw label (``"7"``, ``"×"``, ``"AC"``...) or an
    already parsed :class:`~pycalc.models.KeyEvent`. Unrecognised labels
    leave the state untouched.
    """
    event = parse_key(key) if isinstance(key, str) else key
    if event is None:
        _logger.debug("Ignoring unrecognised key %r", key)
        return state

    if event.kind == KeyKind.DIGIT:
        assert event.digit is not None  # noqa: S101
        return _digit(state, event.digit)
    if event.kind == KeyKind.OPERATOR:
        assert event.operator is not None  # noqa: S101
        return _operator(state, event.operator)
    if event.kind == KeyKind.CLEAR:
        return INITIAL_STATE
    return _ACTIONS[event.kind](state)
