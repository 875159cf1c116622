"""Strict DD/MM/YYYY date parsing"""

from datetime import date
from typing import Optional

from experience_score.domain.exceptions import InvalidDateFormatError
from experience_score.utils.date_utils import apply_date_mask

MIN_YEAR = 1900
MAX_YEAR = 2100


def is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def parse_date(text: Optional[str]) -> Optional[date]:
    """
    Parse user-typed date text into a calendar date.

    Accepts masked ("01/07/2024") or raw digit ("01072024") input; any
    non-digit characters are ignored and the digits are read as DD/MM/YYYY.

    Returns:
        The parsed date, or None when the text is blank (date not supplied yet)

    Raises:
        InvalidDateFormatError: Text is present but is not a real date
            between 1900 and 2100
    """
    if is_blank(text):
        return None

    parts = apply_date_mask(text).split("/")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise InvalidDateFormatError(text, "expected day, month and year")

    day, month, year = (int(p) for p in parts)

    if not 1 <= day <= 31:
        raise InvalidDateFormatError(text, "day out of range")
    if not 1 <= month <= 12:
        raise InvalidDateFormatError(text, "month out of range")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDateFormatError(text, f"year must be between {MIN_YEAR} and {MAX_YEAR}")

    # Rejects 31/04, 29/02 in non-leap years, etc.
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateFormatError(text, "no such calendar day")
