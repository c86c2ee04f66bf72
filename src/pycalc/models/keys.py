"""Key events submitted by the presentation layer."""

from __future__ import annotations

from enum import StrEnum

from pydantic import field_validator, model_validator

from pycalc._constants import (
    BACKSPACE_LABEL,
    CLEAR_LABEL,
    DECIMAL_LABEL,
    EQUALS_LABEL,
    OPERATOR_SYNONYMS,
    PERCENT_LABEL,
    TOGGLE_SIGN_LABEL,
)
from pycalc.models._base import CalcBaseModel


class Operator(StrEnum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_label(cls, label: str) -> Operator | None:
        """Map a canonical symbol or display synonym to an operator."""
        symbol = OPERATOR_SYNONYMS.get(label, label)
        try:
            return cls(symbol)
        except ValueError:
            return None


class KeyKind(StrEnum):
    DIGIT = "digit"
    DECIMAL = "decimal"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    BACKSPACE = "backspace"
    TOGGLE_SIGN = "toggle_sign"
    PERCENT = "percent"


_ACTION_LABELS: dict[str, KeyKind] = {
    DECIMAL_LABEL: KeyKind.DECIMAL,
    EQUALS_LABEL: KeyKind.EQUALS,
    CLEAR_LABEL: KeyKind.CLEAR,
    BACKSPACE_LABEL: KeyKind.BACKSPACE,
    TOGGLE_SIGN_LABEL: KeyKind.TOGGLE_SIGN,
    PERCENT_LABEL: KeyKind.PERCENT,
}


class KeyEvent(CalcBaseModel):
    """One classified key press.

    ``digit`` is set only for :attr:`KeyKind.DIGIT` and ``operator`` only
    for :attr:`KeyKind.OPERATOR`.
    """

    kind: KeyKind
    digit: str | None = None
    operator: Operator | None = None

    @field_validator("digit")
    @classmethod
    def _single_digit(cls, value: str | None) -> str | None:
        if value is not None and (len(value) != 1 or value not in "0123456789"):
            raise ValueError("digit must be a single character 0-9")
        return value

    @model_validator(mode="after")
    def _payload_matches_kind(self) -> KeyEvent:
        if (self.kind == KeyKind.DIGIT) != (self.digit is not None):
            raise ValueError("digit is required for, and only for, digit keys")
        if (self.kind == KeyKind.OPERATOR) != (self.operator is not None):
            raise ValueError("operator is required for, and only for, operator keys")
        return self


def parse_key(label: str) -> KeyEvent | None:
    """Classify a key label, or return ``None`` if it is not a calculator key."""
    if len(label) == 1 and label in "0123456789":
        return KeyEvent(kind=KeyKind.DIGIT, digit=label)
    kind = _ACTION_LABELS.get(label)
    if kind is not None:
        return KeyEvent(kind=kind)
    operator = Operator.from_label(label)
    if operator is not None:
        return KeyEvent(kind=KeyKind.OPERATOR, operator=operator)
    return None
