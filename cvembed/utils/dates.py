"""
Date token formatting for resume entries.

Dates are stored as the raw strings produced by month/date inputs
("2024-06" or "2024-06-15"). Renderers display them as "Jun 2024".
Formatting is locale-independent: month names come from a fixed table
and only the year and month are read.
"""

import re

SHORT_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DATE_TOKEN_PATTERN = re.compile(r"^(?P<year>[0-9]{4})-(?P<month>[0-9]{2})(?:-(?P<day>[0-9]{2}))?$")

PRESENT_LABEL = "Present"
EN_DASH = "–"


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def format_date_token(value: str) -> str:
    """
    Format a "YYYY-MM" or "YYYY-MM-DD" token as "<Mon> <Year>".

    The day component is ignored. Anything that is not a recognized token,
    including a month outside 01-12, is returned unchanged.

    Args:
        value: Raw date string

    Returns:
        Display string

    Examples:
        >>> format_date_token("2024-06")
        'Jun 2024'
        >>> format_date_token("2023-01-31")
        'Jan 2023'
        >>> format_date_token("2024-13")
        '2024-13'
        >>> format_date_token("Summer 2022")
        'Summer 2022'
    """
    match = DATE_TOKEN_PATTERN.match(value.strip()) if value else None
    if not match:
        return value

    month_index = int(match.group("month")) - 1
    if not 0 <= month_index <= 11:
        return value

    return f"{SHORT_MONTH_NAMES[month_index]} {int(match.group('year'))}"


def format_single_date(value: str) -> str:
    """Format a standalone date (certification, publication)."""
    return format_date_token(value)


def format_date_range(start_date: str, end_date: str) -> str:
    """
    Format a start/end pair as "<start> - <end>".

    Missing end renders as "Present"; a missing start shows only the end.

    Examples:
        >>> format_date_range("2022-09", "2024-06")
        'Sep 2022 - Jun 2024'
        >>> format_date_range("2022-09", "")
        'Sep 2022 - Present'
        >>> format_date_range("", "2024-06")
        'Jun 2024'
    """
    start = format_date_token(start_date)
    end = format_date_token(end_date)

    if _is_blank(start) and _is_blank(end):
        return ""
    if _is_blank(start):
        return end
    if _is_blank(end):
        return f"{start} - {PRESENT_LABEL}"
    return f"{start} - {end}"


def format_date_range_by_style(start_date: str, end_date: str, style: str) -> str:
    """
    Format a date range according to the document's dateStyle option.

    "range" delegates to format_date_range. "compact" joins the two sides with
    an en dash and no spaces ("Jun 2024–Present").

    Args:
        start_date: Raw start date
        end_date: Raw end date
        style: "range" or "compact"

    Returns:
        Display string, empty when both dates are blank
    """
    if style != "compact":
        return format_date_range(start_date, end_date)

    start = format_date_token(start_date)
    end = format_date_token(end_date)

    if _is_blank(start) and _is_blank(end):
        return ""
    if _is_blank(start):
        return end

    parts = [start, end if not _is_blank(end) else PRESENT_LABEL]
    return EN_DASH.join(part for part in parts if not _is_blank(part))
