"""Resolver configuration.

A single frozen dataclass groups the formatting and week-start options a
DateResolver applies to its wrapper methods (parse, parse_date, ...).

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronolex.constants import DEFAULT_DATE_FORMAT, DEFAULT_SEPARATOR, DEFAULT_TIME_FORMAT
from chronolex.enums import WeekStart

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for DateResolver.

    All fields have sensible defaults; ``ResolverConfig()`` is usable as is.

    Attributes:
        date_format: LDML pattern for dates (default: "yyyy-MM-dd")
        time_format: LDML pattern appended when a time was stated
            (default: "HH:mm")
        separator: Text between the date and time parts (default: " ")
        week_start: Week start used by the wrapper methods
            (default: WeekStart.LOCALE_DEFAULT)
        locale: Locale for formatting and for the locale-default week start;
            None uses the system locale

    Example:
        >>> config = ResolverConfig(date_format="dd.MM.yyyy", locale="de_DE")
        >>> resolver = DateResolver(["de", "en"], config=config)
        >>> resolver.parse_date("morgen").formatted
        '02.01.2024'
    """

    date_format: str = DEFAULT_DATE_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    separator: str = DEFAULT_SEPARATOR
    week_start: WeekStart = WeekStart.LOCALE_DEFAULT
    locale: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a format or the separator is empty, or week_start
                is not a known weekday name
        """
        if not self.date_format.strip():
            msg = "date_format must not be empty"
            raise ValueError(msg)
        if not self.time_format.strip():
            msg = "time_format must not be empty"
            raise ValueError(msg)
        if not self.separator:
            msg = "separator must not be empty"
            raise ValueError(msg)
        # Coerce plain strings ("monday") to the enum; invalid names raise here
        object.__setattr__(self, "week_start", WeekStart(str(self.week_start).lower()))
        if self.locale is not None and not self.locale.strip():
            msg = "locale must be None or a non-empty locale code"
            raise ValueError(msg)

    @property
    def datetime_format(self) -> str:
        """Date and time patterns joined by the separator."""
        return f"{self.date_format}{self.separator}{self.time_format}"
