"""
Date formatting for resume date ranges.

Dates arrive from the data layer as DATEONLY strings ("2022-09-15"), month
strings from month pickers ("2022-09"), full ISO timestamps, or date objects.
They are displayed as "Sept. 2022" using their literal calendar fields, with no
timezone conversion.
"""

import re
from datetime import date
from typing import Callable, Optional, Union

from resumetex.contexts.templating.logger import _log_warning

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sept", "Oct", "Nov", "Dec",
)

PRESENT = "Present"

# YYYY-MM with optional -DD, then end of text or a time part (which is ignored)
_ISO_DATE_RE = re.compile(r'^\s*(?P<year>\d{4})-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?(?=$|[T\s])')

DateLike = Union[str, date, None]


def format_date(value: DateLike) -> str:
    """
    Format a calendar date as "{Mon}. {YYYY}".

    Args:
        value: ISO date string, date/datetime, "present", or empty

    Returns:
        Display string; "" for empty or unparseable input, "Present" for "present"

    Example:
        >>> format_date("2022-09-15")
        'Sept. 2022'
        >>> format_date("2023-01-31T23:30:00-05:00")
        'Jan. 2023'
        >>> format_date("")
        ''
    """
    if value is None:
        return ""

    if isinstance(value, date):
        return f"{MONTH_ABBREVIATIONS[value.month - 1]}. {value.year}"

    text = str(value).strip()
    if not text:
        return ""
    if text.lower() == PRESENT.lower():
        return PRESENT

    match = _ISO_DATE_RE.match(text)
    month = int(match.group("month")) if match else 0
    if not 1 <= month <= 12:
        _log_warning(f"Unrecognized date '{text}', rendering as empty")
        return ""

    return f"{MONTH_ABBREVIATIONS[month - 1]}. {match.group('year')}"


def format_date_range(
    start: DateLike,
    end: Optional[DateLike] = None,
    is_current: bool = False,
    formatter: Callable[[DateLike], str] = format_date,
) -> str:
    """
    Format a start/end pair as "{start} -- {end}".

    The end reads "Present" when the entry is current or has no end date.

    Example:
        >>> format_date_range("2021-06-01", None, is_current=True)
        'Jun. 2021 -- Present'
        >>> format_date_range("2018-09-01", "2022-05-15")
        'Sept. 2018 -- May. 2022'
    """
    end_label = PRESENT if is_current or not end else formatter(end)
    return f"{formatter(start)} -- {end_label}"
