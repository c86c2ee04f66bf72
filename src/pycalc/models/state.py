"""The calculator state record."""

from __future__ import annotations

import re

from pydantic import field_validator, model_validator

from pycalc._constants import ERROR_TEXT, ZERO_TEXT
from pycalc.models._base import CalcBaseModel
from pycalc.models.keys import Operator

# Optional sign, at least one digit, at most one decimal point.
_NUMBER_TEXT = re.compile(r"-?[0-9]+(\.[0-9]*)?")


def is_number_text(value: str) -> bool:
    """Return ``True`` when *value* is well-formed entry text."""
    return _NUMBER_TEXT.fullmatch(value) is not None


class CalculatorState(CalcBaseModel):
    """Everything the engine knows between two key presses.

    Parameters
    ----------
    entry : str
        Text being typed or displayed, or ``"Error"``.
    stored_operand : str or None
        Left operand captured when an operator was chosen.
    pending_op : Operator or None
        Operator waiting for a right operand. Set and cleared together
        with ``stored_operand``.
    awaiting_new_entry : bool
        When true the next digit or decimal point starts a new entry.
    """

    entry: str = ZERO_TEXT
    stored_operand: str | None = None
    pending_op: Operator | None = None
    awaiting_new_entry: bool = True

    @field_validator("entry")
    @classmethod
    def _valid_entry(cls, value: str) -> str:
        if value != ERROR_TEXT and not is_number_text(value):
            raise ValueError(f"malformed entry {value!r}")
        return value

    @field_validator("stored_operand")
    @classmethod
    def _valid_operand(cls, value: str | None) -> str | None:
        if value is not None and not is_number_text(value):
            raise ValueError(f"malformed stored operand {value!r}")
        return value

    @model_validator(mode="after")
    def _chain_fields_together(self) -> CalculatorState:
        if (self.stored_operand is None) != (self.pending_op is None):
            raise ValueError("stored_operand and pending_op must be set and cleared together")
        if self.is_error and self.stored_operand is not None:
            raise ValueError("error state cannot carry an operator chain")
        return self

    @property
    def is_error(self) -> bool:
        return self.entry == ERROR_TEXT

    @property
    def has_chain(self) -> bool:
        return self.pending_op is not None


#: Record the engine starts from and returns to on clear-all.
INITIAL_STATE = CalculatorState()

#: Record for any failed evaluation.
ERROR_STATE = CalculatorState(entry=ERROR_TEXT)
