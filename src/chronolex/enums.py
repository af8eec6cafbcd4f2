"""Enumerations for chronolex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be passed anywhere a
plain language code or weekday name is accepted.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "DEFAULT_LANGUAGE",
    "WEEKDAY_KEYS",
    "Direction",
    "Language",
    "TimeUnit",
    "WeekStart",
]

# Lexicon keys for weekdays, indexed 0=Sunday .. 6=Saturday.
WEEKDAY_KEYS: tuple[str, ...] = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)


class Language(StrEnum):
    """Closed set of languages with a shipped lexicon.

    StrEnum provides automatic string conversion: str(Language.FR) == "fr"

    ``lookup()`` is total (unknown codes map to English); ``parse()`` returns
    None for unknown codes so callers can decide whether to drop them.
    """

    EN = "en"
    JA = "ja"
    FR = "fr"
    PT = "pt"
    DE = "de"
    NL = "nl"
    ES = "es"
    IT = "it"
    RU = "ru"
    UK = "uk"
    ZH_HANT = "zh.hant"
    """Traditional Chinese (historical code kept for settings compatibility)"""

    @property
    def babel_locale(self) -> str:
        """Babel/POSIX locale identifier (e.g. 'zh_Hant')."""
        return _BABEL_LOCALES.get(self, self.value)

    @property
    def parser_language(self) -> str:
        """Language identifier understood by the generic parser backend."""
        return _PARSER_LANGUAGES.get(self, self.value)

    @property
    def module_name(self) -> str:
        """Module name of the shipped lexicon table (e.g. 'zh_hant')."""
        return self.value.replace(".", "_")

    @classmethod
    def parse(cls, code: str | Language) -> Language | None:
        """Parse a language code, returning None when it is not supported.

        Accepts any case and BCP-47 or POSIX separators. Regional variants
        fall back to their base language ("fr-CA" -> FR).

        Examples:
            >>> Language.parse("FR")
            <Language.FR: 'fr'>
            >>> Language.parse("zh-Hant") is Language.ZH_HANT
            True
            >>> Language.parse("xx") is None
            True
        """
        if isinstance(code, Language):
            return code
        if not isinstance(code, str):
            return None  # type: ignore[unreachable]
        key = code.strip().lower().replace("_", "-")
        if not key:
            return None
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            pass
        base = key.split("-", 1)[0]
        try:
            return cls(base)
        except ValueError:
            return None

    @classmethod
    def lookup(cls, code: str | Language) -> Language:
        """Total lookup: unknown codes resolve to the default language."""
        return cls.parse(code) or DEFAULT_LANGUAGE


DEFAULT_LANGUAGE: Language = Language.EN

_BABEL_LOCALES: dict[Language, str] = {Language.ZH_HANT: "zh_Hant"}
_PARSER_LANGUAGES: dict[Language, str] = {Language.ZH_HANT: "zh-Hant"}
_ALIASES: dict[str, Language] = {
    "zh.hant": Language.ZH_HANT,
    "zh-hant": Language.ZH_HANT,
    "zh-tw": Language.ZH_HANT,
    "zh-hk": Language.ZH_HANT,
}


class WeekStart(StrEnum):
    """First day of the week used for week-range arithmetic.

    StrEnum provides automatic string conversion: str(WeekStart.MONDAY) == "monday"
    """

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    LOCALE_DEFAULT = "locale-default"
    """Resolve from CLDR week data of the configured locale"""

    @property
    def index(self) -> int | None:
        """Weekday index (0=Sunday .. 6=Saturday), None for LOCALE_DEFAULT."""
        if self is WeekStart.LOCALE_DEFAULT:
            return None
        return WEEKDAY_KEYS.index(self.value)


class TimeUnit(StrEnum):
    """Canonical duration units for relative expressions.

    StrEnum provides automatic string conversion: str(TimeUnit.DAYS) == "days"
    """

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @property
    def lexicon_key(self) -> str:
        """Singular lexicon key holding this unit's surface forms."""
        return self.value[:-1]

    @property
    def is_clock(self) -> bool:
        """True for units that imply a time of day (hours, minutes)."""
        return self in (TimeUnit.MINUTES, TimeUnit.HOURS)


class Direction(StrEnum):
    """Temporal direction indicated by a weekday prefix keyword.

    StrEnum provides automatic string conversion: str(Direction.NEXT) == "next"
    """

    THIS = "this"
    """Same week: this friday"""

    NEXT = "next"
    """One week forward: next friday"""

    LAST = "last"
    """One week back: last friday"""

    @property
    def week_offset(self) -> int:
        """Number of weeks to shift before snapping to the weekday."""
        return _WEEK_OFFSETS[self]


_WEEK_OFFSETS: dict[Direction, int] = {
    Direction.THIS: 0,
    Direction.NEXT: 1,
    Direction.LAST: -1,
}
