"""Binary evaluation and canonical number text.

Operands travel through the engine as text. They are parsed to binary
floats only for the duration of one operation and the result is turned
straight back into text, with no rounding; rounding is a display
concern handled by :mod:`pycalc.display`.
"""

from __future__ import annotations

import math
import operator as _op
from collections.abc import Callable
from decimal import Decimal

from pycalc.exceptions import DivideByZeroError, InvalidOperandError, NonFiniteResultError
from pycalc.models.keys import Operator

_OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: _op.add,
    Operator.SUBTRACT: _op.sub,
    Operator.MULTIPLY: _op.mul,
    Operator.DIVIDE: _op.truediv,
}


def parse_number(text: str) -> float | None:
    """Parse *text* to a finite float, or return ``None``."""
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def number_to_text(value: float) -> str:
    """Canonical text for a finite float.

    Integral values print without a fractional part. Everything else
    prints the shortest digits that round-trip, in positional notation
    (``5e-06`` becomes ``0.000005``) so the text is always valid entry
    text.
    """
    if value.is_integer():
        # int() also folds -0.0 into "0".
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def evaluate(a: str, op: Operator | str, b: str) -> str:
    """Apply *op* to the operands *a* and *b* and return the result as text.

    Raises
    ------
    InvalidOperandError
        Either operand is not a finite number.
    DivideByZeroError
        *op* is division and *b* is zero.
    NonFiniteResultError
        The result overflowed.
    """
    operator = Operator.from_label(op)
    if operator is None:
        raise InvalidOperandError(f"unknown operator {op!r}", operands=(a, b), operator=str(op))

    left = parse_number(a)
    right = parse_number(b)
    if left is None or right is None:
        raise InvalidOperandError(
            f"operand is not a finite number: {a!r} {operator} {b!r}",
            operands=(a, b),
            operator=operator,
        )
    if operator == Operator.DIVIDE and right == 0:
        raise DivideByZeroError(f"division by zero: {a!r} / {b!r}", operands=(a, b), operator=operator)

    result = _OPERATIONS[operator](left, right)
    if not math.isfinite(result):
        raise NonFiniteResultError(
            f"result is not finite: {a!r} {operator} {b!r}",
            operands=(a, b),
            operator=operator,
        )
    return number_to_text(result)
