"""Ordinal day-of-month extension for the generic parser pool.

Recognizes English ordinal words ("first" .. "thirty-first", hyphen or
space between the parts) and bare or suffixed numbers ("15", "15th",
"1st"), and resolves them to that day of the reference month.

Python 3.13+.
"""

from __future__ import annotations

import re
from datetime import datetime

from chronolex.parsing.generic import ParseCandidate, ParseOptions

__all__ = [
    "ORDINAL_NUMBER_PATTERN",
    "ORDINAL_WORDS",
    "OrdinalDayParser",
    "parse_ordinal",
]

_UNITS: tuple[str, ...] = (
    "first", "second", "third", "fourth", "fifth",
    "sixth", "seventh", "eighth", "ninth",
)  # fmt: skip

ORDINAL_WORDS: dict[str, int] = {
    **{word: n for n, word in enumerate(_UNITS, start=1)},
    "tenth": 10,
    "eleventh": 11,
    "twelfth": 12,
    "thirteenth": 13,
    "fourteenth": 14,
    "fifteenth": 15,
    "sixteenth": 16,
    "seventeenth": 17,
    "eighteenth": 18,
    "nineteenth": 19,
    "twentieth": 20,
    **{f"twenty{sep}{word}": 20 + n for n, word in enumerate(_UNITS, start=1) for sep in " -"},
    "thirtieth": 30,
    "thirty first": 31,
    "thirty-first": 31,
}

_WORD_ALTERNATION = "|".join(
    re.escape(word) for word in sorted(ORDINAL_WORDS, key=len, reverse=True)
)

ORDINAL_NUMBER_PATTERN: str = rf"(?:{_WORD_ALTERNATION}|[0-9]{{1,2}}(?:st|nd|rd|th)?)"

_ORDINAL_RE = re.compile(rf"\b{ORDINAL_NUMBER_PATTERN}\b", re.IGNORECASE)
_SUFFIX_RE = re.compile(r"(?:st|nd|rd|th)$", re.IGNORECASE)

_CERTAIN_FIELDS: frozenset[str] = frozenset({"day", "month"})


def parse_ordinal(token: str) -> int:
    """Convert an ordinal word or (suffixed) number to an integer.

    Examples:
        >>> parse_ordinal("twenty-first")
        21
        >>> parse_ordinal("3rd")
        3

    Raises:
        ValueError: If the token is neither an ordinal word nor a number
    """
    normalized = token.strip().lower()
    if normalized in ORDINAL_WORDS:
        return ORDINAL_WORDS[normalized]
    return int(_SUFFIX_RE.sub("", normalized))


class OrdinalDayParser:
    """Generic parser resolving ordinals to a day of the reference month.

    Days that do not exist in the reference month (0, 32, "30th" in
    February) produce no candidate.
    """

    __slots__ = ()

    def parse(
        self, text: str, reference: datetime, options: ParseOptions
    ) -> list[ParseCandidate]:
        """Return one candidate per ordinal found, in text order."""
        del options  # day-of-month resolution has no direction or week data
        candidates: list[ParseCandidate] = []
        for match in _ORDINAL_RE.finditer(text):
            day = parse_ordinal(match.group(0))
            try:
                instant = reference.replace(
                    day=day, hour=0, minute=0, second=0, microsecond=0
                )
            except ValueError:
                continue
            candidates.append(
                ParseCandidate(
                    text=match.group(0),
                    index=match.start(),
                    instant=instant,
                    certain_fields=_CERTAIN_FIELDS,
                )
            )
        return candidates
