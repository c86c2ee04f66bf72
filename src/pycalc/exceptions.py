"""Custom exception hierarchy for pycalc."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Why a binary evaluation failed.

    The engine collapses every kind into the single ``"Error"`` display
    state; the distinction only survives for logging and tests.
    """

    INVALID_OPERAND = "invalid_operand"
    DIVIDE_BY_ZERO = "divide_by_zero"
    NON_FINITE_RESULT = "non_finite_result"


class CalcError(Exception):
    """Base exception for all pycalc errors."""


class CalcConfigError(CalcError):
    """Invalid configuration value."""


class CalcEvaluationError(CalcError):
    """A binary operation could not produce a finite result."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        operands: tuple[str, str] = ("", ""),
        operator: str = "",
    ) -> None:
        self.operands = operands
        self.operator = operator
        super().__init__(message)


class InvalidOperandError(CalcEvaluationError):
    """An operand's text does not parse to a finite number."""

    kind = ErrorKind.INVALID_OPERAND


class DivideByZeroError(CalcEvaluationError):
    """Right operand of a division is zero."""

    kind = ErrorKind.DIVIDE_BY_ZERO


class NonFiniteResultError(CalcEvaluationError):
    """The operation overflowed to infinity or produced NaN."""

    kind = ErrorKind.NON_FINITE_RESULT
