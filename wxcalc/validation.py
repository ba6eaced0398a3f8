# wxcalc/validation.py

"""
Input parsing and the error types shared by both calculators.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

import numpy as np

from .constants import DEBUG_LOG, INVALID_NUMBERS_MESSAGE


def dprint(*args, **kwargs):
    """Debug print that can be globally toggled."""
    if DEBUG_LOG:
        print(*args, **kwargs)


class CalculationError(ValueError):
    """Base class for errors shown to the user instead of a result."""


class InvalidInputError(CalculationError):
    """A required field is not a number, or a selection is not a known option."""

    def __init__(self, message=INVALID_NUMBERS_MESSAGE):
        super().__init__(message)


class InvalidPhysicalStateError(CalculationError):
    """Inputs are numbers but describe an impossible atmosphere."""


def parse_number(raw):
    """
    Parse a form value as a float.

    Numbers pass through; strings are stripped and parsed. Anything that
    does not parse (None, "", "abc") comes back as NaN.
    """
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float, np.integer, np.floating)):
        return float(raw)
    try:
        return float(str(raw).strip())
    except ValueError:
        return math.nan


def parse_numbers(*raw_values):
    """
    Parse every value with parse_number.

    Raises:
        InvalidInputError: any value is NaN or infinite
    """
    values = [parse_number(raw) for raw in raw_values]
    if not np.all(np.isfinite(values)):
        dprint(f"[VALIDATION] Rejected raw input: {raw_values}")
        raise InvalidInputError()
    return values


def coerce_choice(enum_cls, value, field_name):
    """
    Convert a form selection to its Enum member.

    Raises:
        InvalidInputError: value is not one of the enum's values
    """
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidInputError(f"Unknown {field_name} '{value}'. Choose one of: {allowed}.") from None


def round_half_up(value, places):
    """
    Round half away from zero on the exact binary value (0.125 -> 0.13, 2.675 -> 2.67).
    """
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    # enough digits for every integer digit plus the kept decimals
    context = Context(prec=max(28, exact.adjusted() + places + 2))
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context))
