"""Generic parser pool: best-effort fallback parsing, one member per language.

The pool is consulted only when no structured matcher of the compiled
grammar applies. Each member wraps the ``dateparser`` library configured
for a single language and is extended with the ordinal day-of-month
parser; the pool picks the member whose first candidate consumed the
longest span of the input.

Architecture:
    - GenericParser: Protocol any backend can satisfy (structural typing)
    - DateparserParser: default backend over dateparser.search
    - GenericParserPool: ordered members plus the scoring rule

Scoring:
    For every member the first candidate (lowest text position) is taken;
    the candidate with the longest ``text`` wins, and the earliest member
    wins ties.

Python 3.13+. Uses dateparser for multilingual free-text dates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol

from chronolex.enums import DEFAULT_LANGUAGE, Language

__all__ = [
    "DateparserParser",
    "GenericParser",
    "GenericParserPool",
    "ParseCandidate",
    "ParseOptions",
]

logger = logging.getLogger(__name__)

TIME_FIELDS: frozenset[str] = frozenset({"hour", "minute"})

# dateparser period -> calendar fields stated explicitly in the text
_PERIOD_FIELDS: dict[str, frozenset[str]] = {
    "time": TIME_FIELDS,
    "day": frozenset({"day", "month", "year"}),
    "week": frozenset({"day", "month", "year"}),
    "month": frozenset({"month", "year"}),
    "year": frozenset({"year"}),
}


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Per-call options handed to every pool member.

    Attributes:
        week_start_index: First day of week, 0=Sunday .. 6=Saturday
        forward_bias: Resolve ambiguous expressions into the future
    """

    week_start_index: int = 0
    forward_bias: bool = True


@dataclass(frozen=True, slots=True)
class ParseCandidate:
    """One parse of a span of the input text.

    Attributes:
        text: Consumed span, as it appears in the input
        index: Offset of the span in the input
        instant: Resolved date and time
        certain_fields: Calendar fields explicitly stated in the span
            ("year", "month", "day", "hour", "minute")
    """

    text: str
    index: int
    instant: datetime
    certain_fields: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_certain_time(self) -> bool:
        """True when the hour or minute was stated rather than inferred."""
        return not TIME_FIELDS.isdisjoint(self.certain_fields)


class GenericParser(Protocol):
    """Protocol for a best-effort parser of free text.

    Implementations return candidates ordered by their own ranking; the
    pool only looks at the first one.
    """

    def parse(
        self, text: str, reference: datetime, options: ParseOptions
    ) -> list[ParseCandidate]:
        """Parse ``text`` relative to ``reference``; never raises."""


class DateparserParser:
    """Generic parser backed by ``dateparser`` for one language.

    Candidates come from ``dateparser.search.search_dates``. The certain
    field set of each span is derived from the period reported by
    ``DateDataParser.get_date_data`` with ``RETURN_TIME_AS_PERIOD``.
    Ordinal day-of-month candidates are merged in by text position.

    ``ParseOptions.week_start_index`` is not forwarded: dateparser has no
    week-start setting, so only custom pool members can honor it.

    Backend exceptions are logged and produce no candidates.
    """

    __slots__ = ("_extensions", "language")

    def __init__(
        self, language: Language, *, extensions: Iterable[GenericParser] | None = None
    ) -> None:
        self.language = language
        if extensions is None:
            # Lazy import: ordinal module depends on this one
            from chronolex.parsing.ordinal import OrdinalDayParser  # noqa: PLC0415

            extensions = (OrdinalDayParser(),)
        self._extensions: tuple[GenericParser, ...] = tuple(extensions)

    def parse(
        self, text: str, reference: datetime, options: ParseOptions
    ) -> list[ParseCandidate]:
        """Return backend and extension candidates ordered by text position."""
        candidates = self._search(text, reference, options)
        for extension in self._extensions:
            candidates.extend(extension.parse(text, reference, options))
        # Stable: on equal position the backend candidate stays first
        candidates.sort(key=lambda candidate: candidate.index)
        return candidates

    def _settings(self, reference: datetime, options: ParseOptions) -> dict[str, Any]:
        return {
            "RELATIVE_BASE": reference,
            "PREFER_DATES_FROM": "future" if options.forward_bias else "current_period",
            "RETURN_TIME_AS_PERIOD": True,
        }

    def _search(
        self, text: str, reference: datetime, options: ParseOptions
    ) -> list[ParseCandidate]:
        # Lazy import: dateparser compiles its language data on import
        from dateparser.search import search_dates  # noqa: PLC0415

        settings = self._settings(reference, options)
        try:
            found = search_dates(
                text, languages=[self.language.parser_language], settings=settings
            )
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(
                "dateparser failed on '%s' for language '%s': %s", text, self.language, e
            )
            return []

        candidates: list[ParseCandidate] = []
        cursor = 0
        for span, instant in found or ():
            index = text.find(span, cursor)
            if index < 0:
                index = text.find(span)
            cursor = max(cursor, index + len(span))
            candidates.append(
                ParseCandidate(
                    text=span,
                    index=max(index, 0),
                    instant=instant,
                    certain_fields=self._certain_fields(span, settings),
                )
            )
        return candidates

    def _certain_fields(self, span: str, settings: dict[str, Any]) -> frozenset[str]:
        from dateparser.date import DateDataParser  # noqa: PLC0415

        try:
            data = DateDataParser(
                languages=[self.language.parser_language], settings=settings
            ).get_date_data(span)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("dateparser could not classify '%s': %s", span, e)
            return frozenset()
        if data is None or data.date_obj is None:
            return frozenset()
        return _PERIOD_FIELDS.get(data.period or "", frozenset())

    def __repr__(self) -> str:
        return f"DateparserParser(language={self.language!r})"


class GenericParserPool:
    """Ordered collection of generic parsers, one per enabled language.

    Example:
        >>> pool = GenericParserPool.from_languages([Language.FR, Language.EN])
        >>> candidate = pool.best_match("demain à 15h30", datetime(2024, 1, 1))
    """

    __slots__ = ("members",)

    def __init__(self, members: Sequence[GenericParser]) -> None:
        self.members: tuple[GenericParser, ...] = tuple(members)

    @classmethod
    def from_languages(cls, languages: Iterable[Language | str]) -> GenericParserPool:
        """Build one DateparserParser per supported language.

        Unsupported codes are skipped with a warning. An empty result is
        replaced by a single English member (logged at INFO).
        """
        members: list[GenericParser] = []
        seen: set[Language] = set()
        for code in languages:
            language = Language.parse(code)
            if language is None:
                logger.warning("Language '%s' is not supported by the generic parser", code)
                continue
            if language in seen:
                continue
            seen.add(language)
            members.append(DateparserParser(language))

        if not members:
            logger.info("No generic parser could be built; using %s", DEFAULT_LANGUAGE)
            members.append(DateparserParser(DEFAULT_LANGUAGE))
        return cls(members)

    def first_candidates(
        self, text: str, reference: datetime, options: ParseOptions | None = None
    ) -> list[ParseCandidate]:
        """First candidate of every member that produced one, in member order."""
        opts = options if options is not None else ParseOptions()
        firsts: list[ParseCandidate] = []
        for member in self.members:
            try:
                candidates = member.parse(text, reference, opts)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.warning("Generic parser %r failed on '%s': %s", member, text, e)
                continue
            if candidates:
                firsts.append(candidates[0])
        return firsts

    def best_match(
        self, text: str, reference: datetime, options: ParseOptions | None = None
    ) -> ParseCandidate | None:
        """Return the first candidate with the longest consumed span.

        Ties go to the member declared first. None when no member matched.
        """
        best: ParseCandidate | None = None
        for candidate in self.first_candidates(text, reference, options):
            if best is None or len(candidate.text) > len(best.text):
                best = candidate
        return best

    def any_certain_time(
        self, text: str, reference: datetime, options: ParseOptions | None = None
    ) -> bool:
        """True when any member's first candidate states an hour or minute."""
        return any(
            candidate.has_certain_time
            for candidate in self.first_candidates(text, reference, options)
        )

    def __len__(self) -> int:
        return len(self.members)
