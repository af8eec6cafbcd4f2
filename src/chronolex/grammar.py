"""Grammar compiler: enabled languages -> compiled matchers and keyword sets.

For every semantic key a matcher needs (in/next/last/this/and/at/from/to,
weekday names, time units) the compiler collects the surface forms of all
enabled languages, deduplicates them, escapes regex metacharacters and
joins them into alternation groups. Five composite matchers are built from
those groups, plus a structured ``<next> <unit>`` matcher used for the
"next week/month/year" shortcuts.

Matcher precedence (first full match wins, evaluated by callers):
    1. relative_combined  "in 2 weeks and 3 days"
    2. relative           "in 2 minutes"
    3. date_range         "from monday to friday"
    4. weekday_with_time  "next monday at 3pm"
    5. weekday            "next monday", "lundi prochain"

All matchers are anchored and run against normalized text (lower-cased,
whitespace collapsed). Alternations are ordered longest-first so a variant
never loses to one of its own prefixes.

Compilation is a pure function of (languages, lexicon): the same language
tuple always yields an equal grammar.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from chronolex.enums import WEEKDAY_KEYS, Direction, Language, TimeUnit
from chronolex.errors import GrammarCompilationError
from chronolex.lexicon.provider import LexiconProvider

__all__ = [
    "CompiledGrammar",
    "WeekdayPhrase",
    "compile_grammar",
    "normalize_text",
]

logger = logging.getLogger(__name__)

IMMEDIATE_KEYS: tuple[str, ...] = ("now", "today", "tomorrow", "yesterday")

# Built-in English names and abbreviations, always recognized by the
# weekday index lookup regardless of enabled languages.
_ENGLISH_WEEKDAYS: dict[str, int] = {
    "sunday": 0, "sun": 0,
    "monday": 1, "mon": 1,
    "tuesday": 2, "tue": 2, "tues": 2,
    "wednesday": 3, "wed": 3,
    "thursday": 4, "thu": 4, "thur": 4, "thurs": 4,
    "friday": 5, "fri": 5,
    "saturday": 6, "sat": 6,
}  # fmt: skip

# Weekday names that match nothing resolve to Sunday.
UNKNOWN_WEEKDAY_INDEX: int = 0

# Matches nothing; stands in for an alternation group with no variants.
_NEVER = r"(?!x)x"

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case, trim and collapse internal whitespace.

    Example:
        >>> normalize_text("  Next   MONDAY ")
        'next monday'
    """
    return _WHITESPACE_RE.sub(" ", text).strip().lower()


def _alternation(forms: Iterable[str]) -> str:
    """Build a deduplicated, escaped, longest-first alternation body."""
    unique = list(dict.fromkeys(form.lower() for form in forms if form))
    if not unique:
        return _NEVER
    unique.sort(key=len, reverse=True)
    return "|".join(re.escape(form) for form in unique)


@dataclass(frozen=True, slots=True)
class WeekdayPhrase:
    """A matched ``<prefix> <weekday> [<at> <time>]`` expression.

    Attributes:
        direction: Week shift indicated by the prefix
        weekday: Weekday index, 0=Sunday .. 6=Saturday
        time_text: Trailing time phrase, None for the bare form
    """

    direction: Direction
    weekday: int
    time_text: str | None = None


@dataclass(frozen=True, slots=True)
class CompiledGrammar:
    """Compiled matchers and keyword sets for one set of enabled languages.

    Owned by a single resolver and never mutated; a language change builds a
    new grammar.

    Attributes:
        languages: Enabled languages in declaration order
        relative: ``<in> N <unit>``
        relative_combined: ``<in> N <unit> <and> M <unit>``
        weekday: ``<prefix> <weekday>`` or ``<weekday> <prefix>``
        weekday_with_time: weekday phrase followed by ``<at> <time phrase>``
        date_range: ``<from> <weekday> <to> <weekday>``
        next_period: ``<next> <unit>`` or ``<unit> <next>``
        immediate_keywords: surface form -> immediate key (now/today/...)
        prefix_keywords: direction -> prefix surface forms
        time_units: surface form -> canonical unit
        weekday_index: weekday name -> index (0=Sunday)
    """

    languages: tuple[Language, ...]
    relative: re.Pattern[str]
    relative_combined: re.Pattern[str]
    weekday: re.Pattern[str]
    weekday_with_time: re.Pattern[str]
    date_range: re.Pattern[str]
    next_period: re.Pattern[str]
    immediate_keywords: Mapping[str, str]
    prefix_keywords: Mapping[Direction, frozenset[str]]
    time_units: Mapping[str, TimeUnit]
    weekday_index: Mapping[str, int]

    def immediate_key(self, text: str) -> str | None:
        """Return "now"/"today"/"tomorrow"/"yesterday" for an exact keyword match."""
        return self.immediate_keywords.get(normalize_text(text))

    def keywords_for(self, key: str) -> frozenset[str]:
        """All surface forms mapped to one immediate key."""
        return frozenset(form for form, k in self.immediate_keywords.items() if k == key)

    def resolve_unit(self, token: str) -> TimeUnit:
        """Map a unit surface form to its canonical unit.

        Uses the lexicon map first, then a prefix heuristic for forms the
        lexicon does not list; anything else counts as minutes.
        """
        unit = token.strip().lower()
        if unit in self.time_units:
            return self.time_units[unit]
        if unit.startswith("h"):
            return TimeUnit.HOURS
        if unit.startswith(("d", "j")):
            return TimeUnit.DAYS
        if unit.startswith(("w", "s")):
            return TimeUnit.WEEKS
        if unit == "m" or unit.startswith("min"):
            return TimeUnit.MINUTES
        if unit.startswith(("mo", "mois")):
            return TimeUnit.MONTHS
        if unit.startswith(("y", "a")):
            return TimeUnit.YEARS
        return TimeUnit.MINUTES

    def weekday_to_index(self, name: str) -> int:
        """Map a weekday name from any enabled language to 0=Sunday .. 6=Saturday."""
        normalized = name.strip().lower()
        index = self.weekday_index.get(normalized)
        if index is None:
            logger.warning(
                "Unrecognized weekday name '%s'; defaulting to Sunday", normalized
            )
            return UNKNOWN_WEEKDAY_INDEX
        return index

    def direction_of(self, prefix: str) -> Direction:
        """Direction for a prefix keyword; this > next > last when shared."""
        normalized = prefix.strip().lower()
        for direction in (Direction.THIS, Direction.NEXT, Direction.LAST):
            if normalized in self.prefix_keywords[direction]:
                return direction
        return Direction.THIS

    def match_durations(self, text: str) -> tuple[tuple[int, TimeUnit], ...] | None:
        """Match combined then simple relative durations.

        Returns:
            One or two (amount, unit) pairs, or None when neither matches
        """
        normalized = normalize_text(text)
        match = self.relative_combined.match(normalized)
        if match:
            return (
                (int(match.group(1)), self.resolve_unit(match.group(2))),
                (int(match.group(3)), self.resolve_unit(match.group(4))),
            )
        match = self.relative.match(normalized)
        if match:
            return ((int(match.group(1)), self.resolve_unit(match.group(2))),)
        return None

    def match_range(self, text: str) -> tuple[int, int] | None:
        """Match ``from <weekday> to <weekday>``; returns (start, end) indices."""
        match = self.date_range.match(normalize_text(text))
        if match is None:
            return None
        return self.weekday_to_index(match.group(1)), self.weekday_to_index(match.group(2))

    def match_weekday(self, text: str) -> WeekdayPhrase | None:
        """Match the weekday-with-time form, then the bare weekday form."""
        normalized = normalize_text(text)
        match = self.weekday_with_time.match(normalized)
        if match:
            return self._weekday_phrase(match, time_text=match.group(5).strip())
        match = self.weekday.match(normalized)
        if match:
            return self._weekday_phrase(match)
        return None

    def _weekday_phrase(
        self, match: re.Match[str], time_text: str | None = None
    ) -> WeekdayPhrase:
        prefix = match.group(1) or match.group(4)
        weekday = match.group(2) or match.group(3)
        return WeekdayPhrase(
            direction=self.direction_of(prefix),
            weekday=self.weekday_to_index(weekday),
            time_text=time_text,
        )

    def match_next_period(self, text: str) -> TimeUnit | None:
        """Match ``next <unit>`` (or ``<unit> next``) and return the unit."""
        match = self.next_period.match(normalize_text(text))
        if match is None:
            return None
        return self.resolve_unit(match.group(1) or match.group(2))


def _collect(
    provider: LexiconProvider, languages: Sequence[Language], keys: Iterable[str]
) -> list[str]:
    forms: list[str] = []
    for language in languages:
        for key in keys:
            forms.extend(form.lower() for form in provider.variants(key, language))
    return forms


def compile_grammar(
    languages: Sequence[Language], provider: LexiconProvider
) -> CompiledGrammar:
    """Compile matchers and keyword sets for the given languages.

    Keyword maps resolve collisions in favour of the first language in
    ``languages`` (declaration order).

    Args:
        languages: Enabled languages, in declaration order
        provider: Lexicon source

    Returns:
        Compiled grammar

    Raises:
        GrammarCompilationError: If ``languages`` is empty or the lexicon
            yields no usable forms
    """
    enabled = tuple(dict.fromkeys(languages))
    if not enabled:
        msg = "Cannot compile a grammar without languages"
        raise GrammarCompilationError(msg)

    in_group = _alternation(_collect(provider, enabled, ("in",)))
    and_group = _alternation(_collect(provider, enabled, ("and",)))
    at_group = _alternation(_collect(provider, enabled, ("at",)))
    from_group = _alternation(_collect(provider, enabled, ("from",)))
    to_group = _alternation(_collect(provider, enabled, ("to",)))
    next_group = _alternation(_collect(provider, enabled, ("next",)))
    prefix_group = _alternation(_collect(provider, enabled, ("this", "next", "last")))
    weekday_group = _alternation(_collect(provider, enabled, WEEKDAY_KEYS))
    unit_group = _alternation(
        _collect(provider, enabled, tuple(unit.lexicon_key for unit in TimeUnit))
    )

    if weekday_group == _NEVER or unit_group == _NEVER:
        msg = f"Lexicon provides no weekday or unit forms for {', '.join(enabled)}"
        raise GrammarCompilationError(msg, languages=tuple(str(lang) for lang in enabled))

    immediate: dict[str, str] = {}
    prefixes: dict[Direction, set[str]] = {direction: set() for direction in Direction}
    units: dict[str, TimeUnit] = {}
    weekdays: dict[str, int] = dict(_ENGLISH_WEEKDAYS)

    for language in enabled:
        for key in IMMEDIATE_KEYS:
            for form in provider.variants(key, language):
                immediate.setdefault(normalize_text(form), key)
        for direction in Direction:
            prefixes[direction].update(
                form.lower() for form in provider.variants(direction.value, language)
            )
        for unit in TimeUnit:
            for form in provider.variants(unit.lexicon_key, language):
                units.setdefault(form.lower(), unit)
        for index, key in enumerate(WEEKDAY_KEYS):
            for form in provider.variants(key, language):
                weekdays.setdefault(form.lower(), index)

    # Prefix-first ("next monday") or weekday-first ("lundi prochain");
    # groups: 1 prefix, 2 weekday | 3 weekday, 4 prefix
    weekday_phrase = (
        rf"(?:({prefix_group})\s+({weekday_group})|({weekday_group})\s+({prefix_group}))"
    )

    # Amount may be glued to the unit: "in 2weeks"
    duration = rf"(\d+)\s*({unit_group})"

    flags = re.IGNORECASE
    grammar = CompiledGrammar(
        languages=enabled,
        relative=re.compile(rf"^(?:{in_group})\s+{duration}$", flags),
        relative_combined=re.compile(
            rf"^(?:{in_group})\s+{duration}\s+(?:{and_group})\s+{duration}$", flags
        ),
        weekday=re.compile(rf"^{weekday_phrase}$", flags),
        weekday_with_time=re.compile(rf"^{weekday_phrase}\s+(?:{at_group})\s+(.+)$", flags),
        date_range=re.compile(
            rf"^(?:{from_group})\s+({weekday_group})\s+(?:{to_group})\s+({weekday_group})$",
            flags,
        ),
        next_period=re.compile(
            rf"^(?:(?:{next_group})\s+({unit_group})|({unit_group})\s+(?:{next_group}))$", flags
        ),
        immediate_keywords=MappingProxyType(immediate),
        prefix_keywords=MappingProxyType(
            {direction: frozenset(forms) for direction, forms in prefixes.items()}
        ),
        time_units=MappingProxyType(units),
        weekday_index=MappingProxyType(weekdays),
    )
    logger.debug(
        "Compiled grammar for %s (%d unit forms, %d weekday forms)",
        ", ".join(enabled),
        len(units),
        len(weekdays),
    )
    return grammar
