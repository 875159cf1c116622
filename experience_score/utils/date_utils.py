"""Date text masking and day arithmetic utilities"""

import re
from datetime import date

MAX_DATE_DIGITS = 8

_NON_DIGITS = re.compile(r"\D")


def apply_date_mask(value: str) -> str:
    """
    Reformat free text as DD/MM/YYYY while it is being typed.

    Non-digits are dropped and at most 8 digits are kept:
    "01" -> "01", "0101" -> "01/01", "01012024" -> "01/01/2024".
    """
    digits = _NON_DIGITS.sub("", value)[:MAX_DATE_DIGITS]

    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (end - start).days
