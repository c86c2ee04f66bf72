from __future__ import annotations

from collections.abc import Iterable

from pycalc.engine import handle_key
from pycalc.models import ERROR_STATE, INITIAL_STATE, CalculatorState, KeyEvent, KeyKind, Operator


def _press(keys: Iterable[str], state: CalculatorState = INITIAL_STATE) -> CalculatorState:
    for key in keys:
        state = handle_key(state, key)
    return state


def test_addition_of_multi_digit_operand() -> None:
    assert _press(["1", "2", "+", "7", "="]).entry == "19"


def test_operator_before_equals_folds_pending_computation() -> None:
    state = _press(["5", "×", "6", "−"])
    assert state.entry == "30"
    assert state.stored_operand == "30"
    assert state.pending_op == Operator.SUBTRACT
    assert state.awaiting_new_entry is True

    assert _press(["4", "="], state).entry == "26"


def test_second_decimal_point_is_ignored() -> None:
    assert _press(["1", ".", "2", ".", "3"]).entry == "1.23"


def test_sign_toggle_then_percent() -> None:
    assert _press(["5", "±", "%"]).entry == "-0.05"


def test_divide_by_zero_then_clear() -> None:
    state = _press(["8", "÷", "0", "="])
    assert state.entry == "Error"
    assert state.stored_operand is None
    assert state.pending_op is None

    assert handle_key(state, "AC") == INITIAL_STATE


def test_divide_by_zero_on_chained_operator_enters_error() -> None:
    state = _press(["8", "÷", "0", "+"])
    assert state.is_error
    assert state.stored_operand is None
    assert state.pending_op is None
    assert state.awaiting_new_entry is True


def test_digits_are_kept_verbatim() -> None:
    assert _press(list("9081726354")).entry == "9081726354"


def test_leading_zero_replaced_by_first_digit() -> None:
    assert _press(["0", "0", "7"]).entry == "7"


def test_digit_after_result_starts_new_entry() -> None:
    state = _press(["2", "+", "3", "=", "4"])
    assert state.entry == "4"
    assert state.stored_operand is None


def test_decimal_starts_new_entry_when_awaiting() -> None:
    state = _press(["1", "+", "2", "=", "."])
    assert state.entry == "0."
    assert state.awaiting_new_entry is False


def test_backspace_undoes_last_append() -> None:
    before = _press(["1", "2"])
    after = _press(["3", "⌫"], before)
    assert after == before


def test_backspace_on_single_character_resets_to_zero() -> None:
    state = _press(["7", "⌫"])
    assert state.entry == "0"
    assert state.awaiting_new_entry is True


def test_backspace_while_awaiting_resets_entry_only() -> None:
    state = _press(["9", "+", "⌫"])
    assert state.entry == "0"
    assert state.awaiting_new_entry is True
    assert state.stored_operand == "9"
    assert state.pending_op == Operator.ADD


def test_backspace_leaving_lone_minus_resets_to_zero() -> None:
    state = _press(["5", "±", "⌫"])
    assert state.entry == "0"
    assert state.awaiting_new_entry is True


def test_sign_toggle_is_noop_on_zero() -> None:
    assert _press(["±"]) == INITIAL_STATE
    state = _press([".", "±"])
    assert state.entry == "0."


def test_sign_toggle_twice_restores_entry() -> None:
    assert _press(["4", "2", "±", "±"]).entry == "42"


def test_percent_keeps_chain_and_continues_editing() -> None:
    state = _press(["2", "0", "0", "+", "1", "0", "%"])
    assert state.entry == "0.1"
    assert state.stored_operand == "200"
    assert state.pending_op == Operator.ADD
    assert state.awaiting_new_entry is False

    assert _press(["="], state).entry == "200.1"


def test_percent_of_small_value_stays_positional() -> None:
    assert _press(list("0.00390625") + ["%"]).entry == "0.0000390625"


def test_consecutive_operators_last_one_wins() -> None:
    start = _press(["5"])
    overridden = _press(["+", "×"], start)
    direct = _press(["×"], start)
    assert overridden == direct
    assert _press(["3", "="], overridden).entry == "15"


def test_equals_right_after_operator_repeats_stored_operand() -> None:
    assert _press(["5", "×", "="]).entry == "25"


def test_equals_without_chain_is_noop() -> None:
    state = _press(["4", "2"])
    assert handle_key(state, "=") == state


def test_results_are_not_rounded_in_state() -> None:
    assert _press(["0", ".", "1", "+", "0", ".", "2", "="]).entry == "0.30000000000000004"


def test_digit_exits_error_state() -> None:
    state = _press(["8", "÷", "0", "=", "7"])
    assert state == CalculatorState(entry="7", awaiting_new_entry=False)


def test_decimal_exits_error_state() -> None:
    state = _press(["8", "÷", "0", "=", "."])
    assert state == CalculatorState(entry="0.", awaiting_new_entry=False)


def test_operator_is_ignored_in_error_state() -> None:
    error = _press(["8", "÷", "0", "="])
    assert handle_key(error, "+") == error


def test_other_keys_reset_from_error_state() -> None:
    error = _press(["8", "÷", "0", "="])
    for key in ("=", "⌫", "±", "%"):
        assert handle_key(error, key) == INITIAL_STATE


def test_unrecognised_label_is_ignored() -> None:
    state = _press(["4"])
    assert handle_key(state, "sin") is state
    assert handle_key(state, "") is state


def test_accepts_parsed_key_events() -> None:
    state = handle_key(INITIAL_STATE, KeyEvent(kind=KeyKind.DIGIT, digit="6"))
    state = handle_key(state, KeyEvent(kind=KeyKind.OPERATOR, operator=Operator.DIVIDE))
    state = handle_key(state, KeyEvent(kind=KeyKind.DIGIT, digit="4"))
    state = handle_key(state, KeyEvent(kind=KeyKind.EQUALS))
    assert state.entry == "1.5"


def test_ascii_operators_match_display_synonyms() -> None:
    assert _press(["9", "-", "3", "*", "2", "/", "4", "="]).entry == "3"
    assert _press(["9", "−", "3", "×", "2", "÷", "4", "="]).entry == "3"


def test_overflow_enters_error_state() -> None:
    big = CalculatorState(entry="1" + "0" * 308, awaiting_new_entry=False)
    assert _press(["×", "1", "0", "="], big).is_error


def test_percent_of_non_finite_entry_enters_error() -> None:
    huge = ["1"] + ["0"] * 400
    assert _press(huge + ["%"]) == ERROR_STATE

    chained = _press(["5", "+"] + huge)
    assert chained.stored_operand == "5"
    state = handle_key(chained, "%")
    assert state == ERROR_STATE
    assert state.stored_operand is None
    assert state.pending_op is None
