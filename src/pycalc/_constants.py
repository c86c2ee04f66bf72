"""Shared constants."""

from __future__ import annotations

#: Marker held in ``entry`` while the calculator is in the error state.
ERROR_TEXT = "Error"

#: Entry text after clear-all or a boundary backspace.
ZERO_TEXT = "0"

#: Significant digits kept when formatting non-integral values for display.
DEFAULT_DISPLAY_PRECISION = 12

#: ``repr(float)`` never needs more than 17 significant digits to round-trip.
MAX_DISPLAY_PRECISION = 17

# Display synonyms accepted for the canonical operator symbols.
OPERATOR_SYNONYMS: dict[str, str] = {
    "−": "-",
    "×": "*",
    "÷": "/",
}

CLEAR_LABEL = "AC"
BACKSPACE_LABEL = "⌫"
TOGGLE_SIGN_LABEL = "±"
PERCENT_LABEL = "%"
DECIMAL_LABEL = "."
EQUALS_LABEL = "="

#: Labels of the standard keypad, row by row.
KEYPAD_LABELS: tuple[tuple[str, ...], ...] = (
    (CLEAR_LABEL, TOGGLE_SIGN_LABEL, PERCENT_LABEL, "÷"),
    ("7", "8", "9", "×"),
    ("4", "5", "6", "−"),
    ("1", "2", "3", "+"),
    ("0", DECIMAL_LABEL, BACKSPACE_LABEL, EQUALS_LABEL),
)
