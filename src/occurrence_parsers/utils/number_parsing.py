"""Lenient numeric string parsing for occurrence fields."""
from __future__ import annotations
import math
import re

_NUMBER_RE = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def parse_double(raw_string: str | None) -> float | None:
    """Parse a decimal string to float, returning None when it is not a number.

    Handles:
    - surrounding whitespace: " 12.5 " → 12.5
    - explicit sign: "+12.5", "-12.5"
    - comma decimal separator when no dot is present: "12,5" → 12.5
    - exponents: "1.2e3" → 1200.0
    NaN and infinities are rejected.
    """
    if raw_string is None:
        return None
    cleaned = raw_string.strip()
    if not cleaned:
        return None

    if ',' in cleaned and '.' not in cleaned and cleaned.count(',') == 1:
        cleaned = cleaned.replace(',', '.')

    if not _NUMBER_RE.fullmatch(cleaned):
        return None

    result = float(cleaned)
    if math.isnan(result) or math.isinf(result):
        return None
    return result
