"""pycalc - Four-function calculator engine driven by key events."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycalc")
except PackageNotFoundError:
    __version__ = "0+local"
from pycalc._constants import ERROR_TEXT, KEYPAD_LABELS
from pycalc.arithmetic import evaluate, number_to_text
from pycalc.calculator import Calculator
from pycalc.config import CalcConfig
from pycalc.display import format_display, render
from pycalc.engine import handle_key
from pycalc.exceptions import (
    CalcConfigError,
    CalcError,
    CalcEvaluationError,
    DivideByZeroError,
    ErrorKind,
    InvalidOperandError,
    NonFiniteResultError,
)
from pycalc.models import (
    INITIAL_STATE,
    CalculatorState,
    DisplayFields,
    KeyEvent,
    KeyKind,
    Operator,
    parse_key,
)

__all__ = [
    "__version__",
    "ERROR_TEXT",
    "INITIAL_STATE",
    "KEYPAD_LABELS",
    "CalcConfig",
    "CalcConfigError",
    "CalcError",
    "CalcEvaluationError",
    "Calculator",
    "CalculatorState",
    "DisplayFields",
    "DivideByZeroError",
    "ErrorKind",
    "InvalidOperandError",
    "KeyEvent",
    "KeyKind",
    "NonFiniteResultError",
    "Operator",
    "evaluate",
    "format_display",
    "handle_key",
    "number_to_text",
    "parse_key",
    "render",
]
