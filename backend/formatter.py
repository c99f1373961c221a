"""
Number formatting and parsing for the calculator display.

format_number is the only path used to turn a value into display text, so the
live display and the history log always agree.
"""
import math
import re
from typing import Optional

import numpy as np

from backend import config

# Plain decimal numeral as typed on the keypad: "12", "-3.5", "0.", ".25"
NUMERAL_RE = re.compile(r"^-?(\d+\.?\d*|\.\d+)$")


def format_number(value: float) -> str:
    """
    Render a value for display.

    Integer-looking values (within INTEGER_TOLERANCE) drop the fractional part.
    Everything else gets at most SIGNIFICANT_DIGITS significant digits in
    positional notation with trailing zeros trimmed.
    """
    value = float(value)
    if not math.isfinite(value):
        return config.ERROR_TEXT

    nearest = round(value)
    if abs(value - nearest) < config.INTEGER_TOLERANCE:
        return str(int(nearest))

    return np.format_float_positional(
        value,
        precision=config.SIGNIFICANT_DIGITS,
        unique=False,
        fractional=False,
        trim="-",
    )


def parse_number(text: str) -> Optional[float]:
    """
    Parse display text into a float. Returns None instead of raising.

    A numeral too large for a float comes back as inf so callers can tell it
    apart from text that is not a number at all.
    """
    if not isinstance(text, str):
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) and not is_numeral(text.strip()):
        return None
    return value


def is_numeral(text: str) -> bool:
    """True if text is a plain decimal numeral the keypad could have produced."""
    return bool(NUMERAL_RE.match(text))
