# core/grading.py

"""
Grade computation for a three-score student record.

`compute()` is a total function: it performs no validation and has no side effects.
Callers are responsible for keeping scores within the configured bounds.

Also provides the two ways a score can be read from text:
- `parse_score()` for user input, strict, yielding NaN for anything that is not a number
- `coerce_score()` for stored data, lenient, falling back to 0 so legacy entries always load
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, NamedTuple

from core.config import AVERAGE_DECIMALS, PASSING_AVERAGE

# leading numeric prefix, e.g. "7.5" in "7.5 pts"
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class GradeStatus(str, Enum):
    PASSED = "Passed"
    FAILED = "Failed"


class GradeResult(NamedTuple):
    average: str
    status: GradeStatus


def round_average(value: float, decimals: int = AVERAGE_DECIMALS) -> str:
    """
    Rounds half-up to a fixed number of decimals and returns the display string.

    The float is converted through its shortest repr first, so 8.25 becomes "8.3"
    rather than being subject to binary representation error.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)

    # avoid "-0.0" for tiny negative inputs
    if rounded == 0:
        rounded = abs(rounded)

    return f"{rounded:.{decimals}f}"


def compute(score1: float, score2: float, score3: float) -> GradeResult:
    average = round_average((score1 + score2 + score3) / 3)
    status = (
        GradeStatus.PASSED if float(average) >= PASSING_AVERAGE else GradeStatus.FAILED
    )

    return GradeResult(average, status)


def parse_score(raw: str) -> float:
    """
    Parses user-entered score text.

    Args:
        raw (str): The text to parse. Leading and trailing whitespace is ignored.

    Returns:
        The parsed value, or `math.nan` if the text is not numeric.
        Range checking is left to the caller.
    """
    try:
        return float(raw.strip())
    except (AttributeError, ValueError):
        return math.nan


def coerce_score(value: Any) -> float:
    """
    Coerces a stored score into a float, never failing.

    Args:
        value (Any): The stored value. May be a number, numeric text, or missing.

    Returns:
        - The numeric value for ints and floats.
        - The leading numeric prefix of a string (e.g. "7.5abc" -> 7.5).
        - 0.0 for None, booleans, unparseable text, NaN, infinities, and integers too
          large for a float.
    """
    if isinstance(value, bool) or value is None:
        return 0.0

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0

    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match is None:
            return 0.0
        number = float(match.group(1))

    else:
        return 0.0

    return number if math.isfinite(number) else 0.0
