"""DateResolver - main API for multilingual date resolution.

Resolves free text ("in 2 weeks and 3 days", "next Monday at 3pm",
"de lundi à vendredi") to a datetime, a day range, or a yes/no answer to
"was a clock time stated?".

Layered strategy for resolve() (first match wins):
    1. Immediate keyword     now / today / tomorrow / yesterday
    2. Combined durations    in 2 weeks and 3 days
    3. Simple duration       in 2 minutes
    4. Range (start only)    from monday to friday
    5. Weekday with time     next monday at 3pm
    6. Weekday               next monday
    7. Generic fallback      next month / next year shortcut, then the
                             parser pool (longest consumed span wins)
    8. Terminal fallback     today

Nothing on the resolution path raises: unrecognized input degrades to
today, None or False. Only construction can fail, with
GrammarCompilationError, when even the default language has no grammar.

Thread Safety:
    Compiled state (grammar, parser pool, detector) is replaced as one
    immutable snapshot by rebuild(); concurrent resolve() calls see either
    the old or the new snapshot, never a mix.

Python 3.13+. Uses python-dateutil for calendar arithmetic.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TypeAlias

from dateutil.relativedelta import relativedelta

from chronolex.config import ResolverConfig
from chronolex.constants import MAX_INPUT_LENGTH
from chronolex.enums import DEFAULT_LANGUAGE, Language, TimeUnit, WeekStart
from chronolex.errors import FormattingError, GrammarCompilationError, LexiconLoadError
from chronolex.formatting import format_instant, format_range
from chronolex.grammar import CompiledGrammar, WeekdayPhrase, compile_grammar, normalize_text
from chronolex.lexicon.provider import LexiconProvider, get_default_provider
from chronolex.locale_utils import detect_system_locale, resolve_week_start
from chronolex.parsing.generic import GenericParserPool, ParseOptions
from chronolex.results import ResolvedDate, ResolvedRange, days_between
from chronolex.time_detector import TimeDetector

__all__ = ["Clock", "DateResolver"]

logger = logging.getLogger(__name__)

Clock: TypeAlias = Callable[[], datetime]

_ONE_DAY = timedelta(days=1)
_ONE_WEEK = timedelta(weeks=1)


def start_of_day(value: datetime) -> datetime:
    """Truncate a datetime to midnight, keeping tzinfo."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def sunday_index(value: date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def set_weekday(value: datetime, index: int) -> datetime:
    """Move to weekday ``index`` within the same Sunday-to-Saturday week."""
    return value + timedelta(days=index - sunday_index(value))


@dataclass(frozen=True, slots=True)
class _Compiled:
    """Immutable snapshot of everything compiled from one language set."""

    languages: tuple[Language, ...]
    grammar: CompiledGrammar
    pool: GenericParserPool
    detector: TimeDetector
    is_fallback: bool


class DateResolver:
    """Multilingual natural-language date resolver.

    Main public API of chronolex. One resolver owns the compiled grammar
    and generic parser pool for one ordered set of languages; resolvers
    for different language sets can run side by side on separate threads.

    Examples:
        >>> resolver = DateResolver(["en", "fr"])
        >>> resolver.resolve("in 2 weeks and 3 days", reference=datetime(2024, 1, 1))
        datetime.datetime(2024, 1, 18, 0, 0)
        >>> resolver.resolve("lundi prochain à 15h30", reference=datetime(2024, 1, 1))
        datetime.datetime(2024, 1, 8, 15, 30)
        >>> resolver.resolve_range("de lundi à vendredi", reference=datetime(2024, 1, 1)).formatted
        '2024-01-01 to 2024-01-05'
        >>> resolver.has_time("in 30 minutes")
        True

    Attributes:
        config: Formatting and week-start defaults for the wrapper methods
    """

    __slots__ = ("_clock", "_compiled", "_pool_override", "_provider", "config")

    def __init__(
        self,
        languages: Iterable[Language | str],
        *,
        provider: LexiconProvider | None = None,
        parser_pool: GenericParserPool | None = None,
        clock: Clock | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        """Compile the grammar for ``languages``.

        Args:
            languages: Enabled languages in priority order (Language members
                or codes); unsupported codes are dropped with a warning
            provider: Lexicon source (default: process-wide provider)
            parser_pool: Generic parser pool (default: one dateparser
                member per enabled language)
            clock: Source of "now" (default: datetime.now)
            config: Formatting and week-start options

        Raises:
            GrammarCompilationError: If no grammar can be compiled, not even
                for the default language
        """
        self._provider = provider if provider is not None else get_default_provider()
        self._pool_override = parser_pool
        self._clock: Clock = clock if clock is not None else datetime.now
        self.config = config if config is not None else ResolverConfig()
        self._compiled = self._compile(languages)

        logger.info(
            "DateResolver initialized for languages: %s (fallback=%s)",
            ", ".join(self._compiled.languages),
            self._compiled.is_fallback,
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @property
    def languages(self) -> tuple[Language, ...]:
        """Languages the current grammar was compiled for."""
        return self._compiled.languages

    @property
    def is_fallback(self) -> bool:
        """True when no requested language was usable and English was substituted."""
        return self._compiled.is_fallback

    @property
    def grammar(self) -> CompiledGrammar:
        """The compiled grammar (read-only)."""
        return self._compiled.grammar

    @property
    def parser_pool(self) -> GenericParserPool:
        """The generic parser pool used by the fallback layers."""
        return self._compiled.pool

    def rebuild(self, languages: Iterable[Language | str]) -> None:
        """Recompile the grammar (and default pool) for a new language set.

        Raises:
            GrammarCompilationError: Same conditions as construction
        """
        self._compiled = self._compile(languages)
        logger.info("DateResolver rebuilt for languages: %s", ", ".join(self.languages))

    def _usable_languages(self, languages: Iterable[Language | str]) -> list[Language]:
        usable: list[Language] = []
        for code in languages:
            language = Language.parse(code)
            if language is None:
                logger.warning("Unsupported language '%s' dropped from grammar", code)
                continue
            if language in usable:
                continue
            try:
                table = self._provider.table(language)
            except LexiconLoadError as e:
                logger.warning("Language '%s' dropped: %s", language, e)
                continue
            if table.is_fallback:
                logger.warning("Language '%s' dropped: no lexicon available", language)
                continue
            usable.append(language)
        return usable

    def _compile(self, languages: Iterable[Language | str]) -> _Compiled:
        requested = list(languages)
        usable = self._usable_languages(requested)
        grammar: CompiledGrammar | None = None
        if usable:
            try:
                grammar = compile_grammar(usable, self._provider)
            except (GrammarCompilationError, LexiconLoadError) as e:
                logger.warning("Grammar compilation failed for %s: %s", ", ".join(usable), e)

        is_fallback = grammar is None
        if grammar is None:
            logger.warning(
                "No usable language in %s; falling back to %s", requested, DEFAULT_LANGUAGE
            )
            try:
                grammar = compile_grammar([DEFAULT_LANGUAGE], self._provider)
            except LexiconLoadError as e:
                msg = f"Default language '{DEFAULT_LANGUAGE}' lexicon unavailable: {e}"
                raise GrammarCompilationError(
                    msg, languages=tuple(str(code) for code in requested)
                ) from e

        pool = self._pool_override
        if pool is None:
            pool = GenericParserPool.from_languages(grammar.languages)
        return _Compiled(
            languages=grammar.languages,
            grammar=grammar,
            pool=pool,
            detector=TimeDetector(grammar, pool),
            is_fallback=is_fallback,
        )

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def resolve(
        self,
        text: str,
        week_start: WeekStart | str = WeekStart.LOCALE_DEFAULT,
        *,
        reference: datetime | None = None,
    ) -> datetime:
        """Resolve text to a single instant.

        Args:
            text: Free text in any enabled language
            week_start: Week start for week-relative parsing
            reference: Instant treated as "now" (default: the clock)

        Returns:
            The resolved instant. Start of day unless a time was stated or
            implied (now, hour/minute durations, weekday with time, or a
            generic parse with an explicit time). Unrecognized text yields
            today at midnight.
        """
        now = self._now(reference)
        compiled = self._compiled
        grammar = compiled.grammar
        normalized = normalize_text(text)
        today = start_of_day(now)

        if not normalized or len(normalized) > MAX_INPUT_LENGTH:
            logger.debug("Input empty or longer than %d characters", MAX_INPUT_LENGTH)
            return today

        immediate = grammar.immediate_key(normalized)
        if immediate is not None:
            logger.debug("Immediate keyword '%s' -> %s", normalized, immediate)
            return {
                "now": now,
                "today": today,
                "tomorrow": today + _ONE_DAY,
                "yesterday": today - _ONE_DAY,
            }[immediate]

        durations = grammar.match_durations(normalized)
        if durations is not None:
            logger.debug("Relative duration '%s' -> %s", normalized, durations)
            try:
                return self._apply_durations(now, durations)
            except (OverflowError, ValueError) as e:
                logger.warning("Duration '%s' out of calendar range: %s", normalized, e)
                return today

        weekdays = grammar.match_range(normalized)
        if weekdays is not None:
            logger.debug("Range '%s' resolved to its start day", normalized)
            return self._range_start(today, weekdays[0])

        phrase = grammar.match_weekday(normalized)
        if phrase is not None:
            logger.debug("Weekday '%s' -> %s", normalized, phrase)
            return self._resolve_weekday(today, phrase, compiled.pool, week_start)

        return self._resolve_generic(normalized, now, compiled, week_start)

    def resolve_range(
        self,
        text: str,
        week_start: WeekStart | str = WeekStart.LOCALE_DEFAULT,
        *,
        reference: datetime | None = None,
    ) -> ResolvedRange | None:
        """Resolve ``from <weekday> to <weekday>`` or ``next week`` to a day range.

        Args:
            text: Free text in any enabled language
            week_start: First day of the week for "next week"
            reference: Instant treated as "now" (default: the clock)

        Returns:
            The inclusive range, or None for any other input
        """
        normalized = normalize_text(text)
        if not normalized or len(normalized) > MAX_INPUT_LENGTH:
            return None

        today = start_of_day(self._now(reference))
        grammar = self._compiled.grammar

        weekdays = grammar.match_range(normalized)
        if weekdays is not None:
            start = self._range_start(today, weekdays[0])
            end = self._range_end(today, start, weekdays[1])
            return self._make_range(start, end)

        if grammar.match_next_period(normalized) is TimeUnit.WEEKS:
            first_day = resolve_week_start(week_start, self.config.locale)
            current_week = today - timedelta(days=(sunday_index(today) - first_day) % 7)
            start = current_week + _ONE_WEEK
            return self._make_range(start, start + timedelta(days=6))

        return None

    def has_time(self, text: str, *, reference: datetime | None = None) -> bool:
        """Return True when ``text`` states a clock time (never raises)."""
        compiled = self._compiled
        return compiled.detector.has_time(text, self._now(reference))

    def is_short_relative(self, text: str) -> bool:
        """True for ``in N minutes`` / ``in N hours`` expressions.

        Hosts use this to omit the date part for times that stay on today.
        """
        grammar = self._compiled.grammar
        match = grammar.relative.match(normalize_text(text))
        return match is not None and grammar.resolve_unit(match.group(2)).is_clock

    # ------------------------------------------------------------------
    # Formatted wrappers
    # ------------------------------------------------------------------

    def parse(
        self, text: str, date_format: str, *, reference: datetime | None = None
    ) -> ResolvedDate:
        """Resolve text and render it with an LDML pattern."""
        instant = self.resolve(text, self.config.week_start, reference=reference)
        return ResolvedDate(
            formatted=self._format(instant, date_format),
            instant=instant,
            moment=instant.date(),
        )

    def parse_date(self, text: str, *, reference: datetime | None = None) -> ResolvedDate:
        """Resolve with the configured date format, adding the time format
        when the text states a time."""
        pattern = self.config.date_format
        if self.has_time(text, reference=reference):
            pattern = self.config.datetime_format
        return self.parse(text, pattern, reference=reference)

    def parse_time(self, text: str, *, reference: datetime | None = None) -> ResolvedDate:
        """Resolve and render with the configured time format."""
        return self.parse(text, self.config.time_format, reference=reference)

    def parse_range(
        self, text: str, *, reference: datetime | None = None
    ) -> ResolvedRange | None:
        """resolve_range() with the configured week start."""
        return self.resolve_range(text, self.config.week_start, reference=reference)

    # ------------------------------------------------------------------
    # Layer helpers
    # ------------------------------------------------------------------

    def _now(self, reference: datetime | None) -> datetime:
        return reference if reference is not None else self._clock()

    def _week_options(self, week_start: WeekStart | str, *, forward: bool) -> ParseOptions:
        return ParseOptions(
            week_start_index=resolve_week_start(week_start, self.config.locale),
            forward_bias=forward,
        )

    @staticmethod
    def _apply_durations(
        now: datetime, durations: tuple[tuple[int, TimeUnit], ...]
    ) -> datetime:
        result = now
        for amount, unit in durations:
            result = result + relativedelta(**{unit.value: amount})
        if any(unit.is_clock for _, unit in durations):
            return result
        return start_of_day(result)

    @staticmethod
    def _range_start(today: datetime, weekday: int) -> datetime:
        """Next occurrence of ``weekday`` on or after today."""
        start = set_weekday(today, weekday)
        if start < today:
            start += _ONE_WEEK
        return start

    @staticmethod
    def _range_end(today: datetime, start: datetime, weekday: int) -> datetime:
        """``weekday`` on or after ``start``; corrected at most twice."""
        end = set_weekday(today, weekday)
        if end < start:
            end += _ONE_WEEK
        if end < start:
            end = set_weekday(start + _ONE_WEEK, weekday)
        return end

    def _resolve_weekday(
        self,
        today: datetime,
        phrase: WeekdayPhrase,
        pool: GenericParserPool,
        week_start: WeekStart | str,
    ) -> datetime:
        day = set_weekday(today + _ONE_WEEK * phrase.direction.week_offset, phrase.weekday)
        if phrase.time_text is None:
            return day

        options = self._week_options(week_start, forward=False)
        candidate = pool.best_match(phrase.time_text, day, options)
        if candidate is None:
            logger.debug("No time found in '%s'; keeping date only", phrase.time_text)
            return day
        stated = candidate.instant
        return day.replace(
            hour=stated.hour,
            minute=stated.minute,
            second=stated.second,
            microsecond=stated.microsecond,
        )

    def _resolve_generic(
        self,
        normalized: str,
        now: datetime,
        compiled: _Compiled,
        week_start: WeekStart | str,
    ) -> datetime:
        today = start_of_day(now)

        # "next month" / "next year" map to the first day of that period;
        # "next week" is a range and goes to the parser pool like any other text
        period = compiled.grammar.match_next_period(normalized)
        if period is TimeUnit.MONTHS:
            logger.debug("Next-month shortcut for '%s'", normalized)
            return today.replace(day=1) + relativedelta(months=1)
        if period is TimeUnit.YEARS:
            logger.debug("Next-year shortcut for '%s'", normalized)
            return today.replace(year=today.year + 1, month=1, day=1)

        options = self._week_options(week_start, forward=True)
        candidate = compiled.pool.best_match(normalized, now, options)
        if candidate is None:
            logger.debug("Unresolved '%s'; defaulting to today", normalized)
            return today

        logger.debug("Generic parse of '%s' matched '%s'", normalized, candidate.text)
        if candidate.has_certain_time:
            return candidate.instant
        return start_of_day(candidate.instant)

    def _make_range(self, start: datetime, end: datetime) -> ResolvedRange:
        return ResolvedRange(
            formatted=format_range(start, end),
            start=start,
            end=end,
            start_moment=start.date(),
            end_moment=end.date(),
            days=days_between(start.date(), end.date()),
        )

    def _format(self, instant: datetime, pattern: str) -> str:
        locale = self.config.locale or detect_system_locale()
        try:
            return format_instant(instant, pattern, locale)
        except FormattingError as e:
            logger.warning("%s; using ISO 8601 text", e)
            return e.fallback_value

    def __repr__(self) -> str:
        return (
            f"DateResolver(languages={[str(lang) for lang in self.languages]!r}, "
            f"fallback={self.is_fallback})"
        )
