"""
Numeric normalization for model-supplied values.

Language models report market data and amounts in whatever format the
source page used ("$1,234.56", "12%", " 3.4 "). Every handler that needs a
number goes through parse_number so coercion rules live in one place.
"""

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

# Characters stripped before parsing: thousands separators, dollar sign, percent, whitespace
_STRIP_PATTERN = re.compile(r"[,$%\s]")

# Leading numeric prefix, so "12.5x" parses as 12.5 the way a lenient float parser would
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float:
    """
    Coerce a numeric-like value into a float.

    Total over its input domain: never raises.

    Handles:
    - int/float -> float (NaN -> 0.0)
    - "$1,234.56" -> 1234.56
    - "12%" -> 12.0
    - " 42 " -> 42.0
    - "N/A", "", None, lists, dicts, booleans -> 0.0

    Examples:
        >>> parse_number("$1,234.56")
        1234.56
        >>> parse_number("12%")
        12.0
        >>> parse_number("N/A")
        0.0
        >>> parse_number(None)
        0.0
    """
    if isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
        return 0.0 if math.isnan(number) else number

    if isinstance(value, str):
        cleaned = _STRIP_PATTERN.sub("", value)
        match = _NUMBER_PREFIX.match(cleaned)
        if not match:
            return 0.0
        try:
            return float(match.group(0))
        except ValueError:
            logger.debug(f"Could not parse numeric value '{value}', returning 0.0")
            return 0.0

    return 0.0
