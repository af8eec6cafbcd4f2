"""Time-component detection: does an expression state a clock time?

Runs an ordered decision list over the same compiled grammar and parser
pool as the resolver. Every structured match is terminal; only text no
matcher recognizes is handed to the generic parser pool.

Decision list:
    1. "now" keyword                     -> True
    2. relative duration(s)              -> True iff a unit is hours/minutes
    3. <prefix> <weekday> <at> <time>    -> True
    4. <prefix> <weekday>                -> False
    5. today / tomorrow / yesterday      -> False
    6. generic pool reports a certain hour or minute -> True
    7. otherwise                         -> False

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import datetime

from chronolex.constants import MAX_INPUT_LENGTH
from chronolex.grammar import CompiledGrammar, normalize_text
from chronolex.parsing.generic import GenericParserPool, ParseOptions

__all__ = ["TimeDetector"]

logger = logging.getLogger(__name__)


class TimeDetector:
    """Answers whether text specifies a time of day or only a calendar date.

    Holds no state of its own beyond references to the resolver's grammar
    and pool.
    """

    __slots__ = ("_grammar", "_pool")

    def __init__(self, grammar: CompiledGrammar, pool: GenericParserPool) -> None:
        self._grammar = grammar
        self._pool = pool

    def has_time(
        self, text: str, reference: datetime, options: ParseOptions | None = None
    ) -> bool:
        """Return True when ``text`` states a clock time.

        Args:
            text: Free text
            reference: Reference instant for the generic parser
            options: Generic parser options

        Returns:
            True for time-bearing expressions, False otherwise (never raises)
        """
        normalized = normalize_text(text)
        if not normalized or len(normalized) > MAX_INPUT_LENGTH:
            return False

        grammar = self._grammar
        immediate = grammar.immediate_key(normalized)
        if immediate == "now":
            return True

        durations = grammar.match_durations(normalized)
        if durations is not None:
            return any(unit.is_clock for _, unit in durations)

        if grammar.weekday_with_time.match(normalized):
            return True
        if grammar.weekday.match(normalized):
            return False
        if immediate is not None:
            return False

        found = self._pool.any_certain_time(normalized, reference, options)
        logger.debug("Generic time detection for '%s': %s", normalized, found)
        return found
