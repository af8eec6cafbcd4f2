"""Locale lookup and CLDR week data.

Formatting and week-start resolution both need a Babel locale; this module
turns user-supplied codes (``en-US``, ``de_DE.UTF-8``, ``sr@latin``) into
Babel locales and reads the first day of the week from CLDR, so that the
"locale-default" week start matches the user's calendar.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from chronolex.enums import WeekStart

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "detect_system_locale",
    "get_babel_locale",
    "get_locale_week_start",
    "normalize_locale",
    "resolve_week_start",
]

logger = logging.getLogger(__name__)

# Sunday; matches en_US CLDR data.
_FALLBACK_WEEK_START: int = 0

_DEFAULT_LOCALE: str = "en_US"

# LC_TIME governs calendars and weekday names.
_LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_TIME", "LANG")

_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})


def _strip_locale_suffix(value: str) -> str:
    """Drop encoding and modifier: ``de_DE.UTF-8@euro`` -> ``de_DE``."""
    return value.partition("@")[0].partition(".")[0]


def normalize_locale(locale_code: str) -> str:
    """Return the underscore form Babel parses.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("zh.hant")
        'zh_hant'
    """
    return locale_code.replace("-", "_").replace(".", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a cached Babel ``Locale``.

    Raises:
        UnknownLocaleError: No CLDR data for the code
        ValueError: Malformed code
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def detect_system_locale(*, raise_on_failure: bool = False) -> str:
    """Find the locale the host uses for dates.

    The time category reported by the OS wins, then LC_ALL, LC_TIME and
    LANG in that order. C and POSIX count as unset.

    Args:
        raise_on_failure: Raise RuntimeError instead of returning en_US
            when nothing usable is set.

    Returns:
        Locale code with underscores and without encoding.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        os_locale, _ = locale_module.getlocale(locale_module.LC_TIME)
    except ValueError:
        os_locale = None
    candidates = [os_locale, *(os.environ.get(var) for var in _LOCALE_ENV_VARS)]

    for candidate in candidates:
        if candidate is None:
            continue
        code = _strip_locale_suffix(candidate)
        if code not in _PSEUDO_LOCALES:
            return normalize_locale(code)

    if raise_on_failure:
        msg = f"No date locale configured; set one of {', '.join(_LOCALE_ENV_VARS)}"
        raise RuntimeError(msg)

    logger.debug("No system locale found; using %s", _DEFAULT_LOCALE)
    return _DEFAULT_LOCALE


def get_locale_week_start(locale_code: str) -> int:
    """Return the CLDR first day of week for a locale (0=Sunday .. 6=Saturday).

    Babel numbers weekdays from Monday (0) to Sunday (6); this function
    converts to the Sunday-based index used throughout chronolex.

    Unknown or malformed locales fall back to Sunday with a warning.

    Example:
        >>> get_locale_week_start("en_US")
        0
        >>> get_locale_week_start("fr_FR")
        1
    """
    try:
        babel_locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale '%s' for week data: %s. Using Sunday", locale_code, e)
        return _FALLBACK_WEEK_START
    return (babel_locale.first_week_day + 1) % 7


def resolve_week_start(week_start: WeekStart | str, locale_code: str | None = None) -> int:
    """Resolve a week-start preference to a concrete weekday index.

    Args:
        week_start: A weekday name or WeekStart.LOCALE_DEFAULT
        locale_code: Locale used for LOCALE_DEFAULT (None -> system locale)

    Returns:
        Weekday index, 0=Sunday .. 6=Saturday
    """
    try:
        preference = WeekStart(str(week_start).strip().lower())
    except ValueError:
        logger.warning("Unknown week start '%s'; using locale default", week_start)
        preference = WeekStart.LOCALE_DEFAULT

    index = preference.index
    if index is not None:
        return index
    return get_locale_week_start(locale_code or detect_system_locale())
