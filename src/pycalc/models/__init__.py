"""Data models for calculator state, keys and display output."""

from pycalc.models._base import CalcBaseModel
from pycalc.models.display import DisplayFields
from pycalc.models.keys import KeyEvent, KeyKind, Operator, parse_key
from pycalc.models.state import ERROR_STATE, INITIAL_STATE, CalculatorState, is_number_text

__all__ = [
    "ERROR_STATE",
    "INITIAL_STATE",
    "CalcBaseModel",
    "CalculatorState",
    "DisplayFields",
    "KeyEvent",
    "KeyKind",
    "Operator",
    "is_number_text",
    "parse_key",
]
