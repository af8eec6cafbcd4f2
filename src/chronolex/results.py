"""Result value objects returned by DateResolver.

Both types are immutable and produced fresh per call; nothing is cached
across calls with different reference instants.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

__all__ = [
    "ResolvedDate",
    "ResolvedRange",
    "days_between",
]


def days_between(start: date, end: date) -> tuple[date, ...]:
    """Every calendar day from start to end, both inclusive.

    Example:
        >>> days_between(date(2024, 1, 30), date(2024, 2, 1))
        (datetime.date(2024, 1, 30), datetime.date(2024, 1, 31), datetime.date(2024, 2, 1))
    """
    count = (end - start).days + 1
    return tuple(start + timedelta(days=offset) for offset in range(max(count, 0)))


@dataclass(frozen=True, slots=True)
class ResolvedDate:
    """A single resolved date.

    Attributes:
        formatted: Text rendered with the caller's pattern
        instant: Resolved date and time
        moment: Calendar day of ``instant``
    """

    formatted: str
    instant: datetime
    moment: date

    @property
    def is_range(self) -> bool:
        """Always False; mirrors ResolvedRange.is_range."""
        return False


@dataclass(frozen=True, slots=True)
class ResolvedRange:
    """An inclusive span of whole days.

    Attributes:
        formatted: ``"<start> to <end>"`` in yyyy-MM-dd
        start: First instant (start of day)
        end: Last instant (start of day)
        start_moment: Calendar day of ``start``
        end_moment: Calendar day of ``end``
        days: Every day from start to end, inclusive
    """

    formatted: str
    start: datetime
    end: datetime
    start_moment: date
    end_moment: date
    days: tuple[date, ...]

    def __post_init__(self) -> None:
        """Enforce start <= end and the inclusive day list.

        Raises:
            ValueError: If the range is inverted or ``days`` does not span it
        """
        if self.start_moment > self.end_moment:
            msg = f"Range start {self.start_moment} is after end {self.end_moment}"
            raise ValueError(msg)
        expected = (self.end_moment - self.start_moment).days + 1
        if (
            len(self.days) != expected
            or self.days[0] != self.start_moment
            or self.days[-1] != self.end_moment
        ):
            msg = (
                f"Day list of {len(self.days)} entries does not cover "
                f"{self.start_moment}..{self.end_moment}"
            )
            raise ValueError(msg)

    @property
    def is_range(self) -> bool:
        """Always True; lets callers branch on mixed results."""
        return True

    @property
    def day_count(self) -> int:
        """Number of days in the range, inclusive."""
        return len(self.days)
