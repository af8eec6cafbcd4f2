"""LDML formatting of resolved instants via Babel.

Patterns use CLDR/LDML syntax (``yyyy-MM-dd``, ``HH:mm``), not strftime.

Python 3.13+. Uses Babel for CLDR formatting.
"""

from __future__ import annotations

from datetime import date, datetime

from babel import UnknownLocaleError
from babel import dates as babel_dates

from chronolex.constants import RANGE_FORMAT_PATTERN, RANGE_JOINER
from chronolex.errors import FormattingError
from chronolex.locale_utils import get_babel_locale

__all__ = [
    "format_instant",
    "format_range",
]


def format_instant(value: datetime | date, pattern: str, locale_code: str = "en_US") -> str:
    """Format a datetime (or date) with an LDML pattern.

    Args:
        value: Instant to format; dates are treated as midnight
        pattern: LDML pattern, e.g. "yyyy-MM-dd HH:mm"
        locale_code: Locale for month/day names (BCP-47 or POSIX)

    Returns:
        Formatted text

    Raises:
        FormattingError: If the locale or pattern is invalid; the error
            carries the ISO 8601 rendering as ``fallback_value``

    Example:
        >>> format_instant(datetime(2024, 1, 8, 15, 0), "EEE d MMM, HH:mm", "fr_FR")
        'lun. 8 janv., 15:00'
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    try:
        locale = get_babel_locale(locale_code)
        return str(babel_dates.format_datetime(value, format=pattern, locale=locale))
    except (UnknownLocaleError, ValueError, KeyError, AttributeError) as e:
        msg = f"Formatting '{value}' with pattern '{pattern}' failed: {e}"
        raise FormattingError(msg, fallback_value=value.isoformat()) from e


def format_range(start: datetime | date, end: datetime | date) -> str:
    """Render a range as ``<start> to <end>`` with the day pattern.

    Example:
        >>> format_range(date(2024, 1, 8), date(2024, 1, 14))
        '2024-01-08 to 2024-01-14'
    """
    return RANGE_JOINER.join(
        format_instant(value, RANGE_FORMAT_PATTERN) for value in (start, end)
    )
