from __future__ import annotations

import pytest
from pydantic import ValidationError

from pycalc.models import (
    ERROR_STATE,
    INITIAL_STATE,
    CalculatorState,
    KeyEvent,
    KeyKind,
    Operator,
    is_number_text,
    parse_key,
)


def test_initial_state_defaults() -> None:
    assert INITIAL_STATE.entry == "0"
    assert INITIAL_STATE.stored_operand is None
    assert INITIAL_STATE.pending_op is None
    assert INITIAL_STATE.awaiting_new_entry is True
    assert INITIAL_STATE == CalculatorState()


def test_error_state_has_no_chain() -> None:
    assert ERROR_STATE.is_error
    assert not ERROR_STATE.has_chain
    assert ERROR_STATE.awaiting_new_entry is True


def test_stored_operand_requires_pending_op() -> None:
    with pytest.raises(ValidationError):
        CalculatorState(stored_operand="5")

    with pytest.raises(ValidationError):
        CalculatorState(pending_op=Operator.ADD)


def test_error_state_cannot_carry_chain() -> None:
    with pytest.raises(ValidationError):
        CalculatorState(entry="Error", stored_operand="5", pending_op=Operator.ADD)


def test_entry_must_be_number_text() -> None:
    for bad in ("", "-", ".5", "1.2.3", "1e5", " 1"):
        with pytest.raises(ValidationError):
            CalculatorState(entry=bad)


def test_state_is_frozen() -> None:
    state = CalculatorState()
    with pytest.raises(ValidationError):
        state.entry = "7"  # type: ignore[misc]


def test_replace_validates_changes() -> None:
    assert INITIAL_STATE.replace(entry="12").entry == "12"
    with pytest.raises(ValidationError):
        INITIAL_STATE.replace(stored_operand="12")


def test_is_number_text() -> None:
    assert is_number_text("0.")
    assert is_number_text("-12.50")
    assert not is_number_text("Error")
    assert not is_number_text("１")


def test_parse_key_digits_and_actions() -> None:
    assert parse_key("7") == KeyEvent(kind=KeyKind.DIGIT, digit="7")
    assert parse_key(".") == KeyEvent(kind=KeyKind.DECIMAL)
    assert parse_key("=") == KeyEvent(kind=KeyKind.EQUALS)
    assert parse_key("AC") == KeyEvent(kind=KeyKind.CLEAR)
    assert parse_key("⌫") == KeyEvent(kind=KeyKind.BACKSPACE)
    assert parse_key("±") == KeyEvent(kind=KeyKind.TOGGLE_SIGN)
    assert parse_key("%") == KeyEvent(kind=KeyKind.PERCENT)


def test_parse_key_normalizes_operator_synonyms() -> None:
    assert parse_key("×").operator == Operator.MULTIPLY  # type: ignore[union-attr]
    assert parse_key("÷").operator == Operator.DIVIDE  # type: ignore[union-attr]
    assert parse_key("−").operator == Operator.SUBTRACT  # type: ignore[union-attr]
    assert parse_key("+").operator == Operator.ADD  # type: ignore[union-attr]
    assert parse_key("*").operator == Operator.MULTIPLY  # type: ignore[union-attr]


def test_parse_key_unknown_labels() -> None:
    for label in ("", "12", "x", "ac", "sqrt"):
        assert parse_key(label) is None


def test_key_event_payload_must_match_kind() -> None:
    with pytest.raises(ValidationError):
        KeyEvent(kind=KeyKind.DIGIT)
    with pytest.raises(ValidationError):
        KeyEvent(kind=KeyKind.EQUALS, digit="1")
    with pytest.raises(ValidationError):
        KeyEvent(kind=KeyKind.OPERATOR)
    with pytest.raises(ValidationError):
        KeyEvent(kind=KeyKind.DIGIT, digit="12")


def test_operator_from_label() -> None:
    assert Operator.from_label("÷") == Operator.DIVIDE
    assert Operator.from_label("^") is None
