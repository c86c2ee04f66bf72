"""Display formatting.

Pure functions only; nothing here touches engine state.
"""

from __future__ import annotations

import re

from pycalc._constants import DEFAULT_DISPLAY_PRECISION, ERROR_TEXT, ZERO_TEXT
from pycalc.arithmetic import number_to_text, parse_number
from pycalc.models.display import DisplayFields
from pycalc.models.state import CalculatorState

_INTEGER_TEXT = re.compile(r"-?[0-9]+\.?")


def format_display(value: str, *, precision: int = DEFAULT_DISPLAY_PRECISION) -> str:
    """Format entry or operand text for the screen.

    Non-integral values are rounded to *precision* significant digits
    and re-stringified, which hides binary noise such as
    ``0.1 + 0.2 == 0.30000000000000004`` and drops trailing zeros.
    Integral text keeps every typed digit; text too large to be a finite
    float formats as ``"Error"``.
    """
    if value == ERROR_TEXT:
        return ERROR_TEXT
    if value == "":
        return ZERO_TEXT

    number = parse_number(value)
    if number is None:
        return ERROR_TEXT
    if _INTEGER_TEXT.fullmatch(value) is not None:
        # Integral text keeps its digits even past float precision.
        return str(int(value.rstrip(".")))
    if number.is_integer():
        return number_to_text(number)

    rounded = float(f"{number:.{precision - 1}e}")
    return number_to_text(rounded)


def render(state: CalculatorState, *, precision: int = DEFAULT_DISPLAY_PRECISION) -> DisplayFields:
    """Derive the three display strings from *state*."""
    if state.stored_operand is not None and state.pending_op is not None:
        return DisplayFields(
            operator=state.pending_op.value,
            previous=format_display(state.stored_operand, precision=precision),
            entry=format_display(state.entry, precision=precision),
        )
    return DisplayFields(entry=format_display(state.entry, precision=precision))
