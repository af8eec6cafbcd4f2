"""Generic (fallback) parsing: dateparser-backed pool and ordinal extension.

Python 3.13+.
"""

from chronolex.parsing.generic import (
    DateparserParser,
    GenericParser,
    GenericParserPool,
    ParseCandidate,
    ParseOptions,
)
from chronolex.parsing.ordinal import OrdinalDayParser, parse_ordinal

__all__ = [
    "DateparserParser",
    "GenericParser",
    "GenericParserPool",
    "OrdinalDayParser",
    "ParseCandidate",
    "ParseOptions",
    "parse_ordinal",
]
