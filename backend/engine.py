import logging
import math
import operator
from typing import Callable, Dict

import numpy as np

logger = logging.getLogger(__name__)


# Fixed display strings for the two error states
INVALID_NUMBER_TEXT = "Error"
DIVISION_BY_ZERO_TEXT = "Err: Div by 0"

# Maximum number of fractional digits shown on the display
FRACTION_DIGITS = 10

OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": math.fmod,  # sign follows the dividend
}


class CalculatorError(Exception):
    """Base class for recoverable arithmetic errors."""

    display_text = INVALID_NUMBER_TEXT
    description = "Error"


class InvalidNumber(CalculatorError):
    display_text = INVALID_NUMBER_TEXT
    description = "Invalid number"


class DivisionByZero(CalculatorError):
    display_text = DIVISION_BY_ZERO_TEXT
    description = "Division by zero"


def evaluate(left: float, right: float, op: str) -> float:
    """
    Apply a single binary operator to two numbers.

    Division and remainder by zero raise DivisionByZero. An operator that is
    not in OPERATORS yields the right operand unchanged.
    """
    if op in ("/", "%") and right == 0:
        raise DivisionByZero(f"{op} by zero")
    fn = OPERATORS.get(op)
    if fn is None:
        logger.warning("Unknown operator %r, returning right operand", op)
        return right
    return fn(left, right)


def parse_number(text: str) -> float:
    """Parse display text into a finite float or raise InvalidNumber."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise InvalidNumber(f"not a number: {text!r}")
    # float() accepts "inf" and "nan", the display never should
    if not math.isfinite(value):
        raise InvalidNumber(f"not a finite number: {text!r}")
    return value


def format_number(value: float) -> str:
    """
    Render a number for the display: positional notation, at most
    FRACTION_DIGITS fractional digits, no trailing zeros.
    """
    if not math.isfinite(value):
        raise InvalidNumber(f"result out of range: {value}")
    text = np.format_float_positional(value, precision=FRACTION_DIGITS, unique=True, trim="-")
    if text == "-0":
        return "0"
    return text
