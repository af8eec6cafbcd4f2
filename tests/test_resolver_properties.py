"""Property-based tests for DateResolver using Hypothesis.

Properties that must hold for every reference instant:
- Durations: N units later, truncated to midnight for calendar units
- Immediate keywords: identical across every shipped language
- Ranges: start on or after today, at most seven inclusive days
- Weekdays: requested weekday, inside the shifted Sunday-based week
- has_time agrees with the unit of a duration
- Resolution never raises
"""

from __future__ import annotations

import calendar
import functools
from datetime import datetime, timedelta

from hypothesis import event, given, settings
from hypothesis import strategies as st

from chronolex import DateResolver, Language, ResolverConfig, TimeUnit, WeekStart
from chronolex.enums import WEEKDAY_KEYS
from chronolex.lexicon import LexiconProvider
from chronolex.parsing import GenericParserPool
from tests.helpers.parsers import StubParser

_PROVIDER = LexiconProvider()

references = st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2100, 12, 31))
amounts = st.integers(min_value=0, max_value=1000)
weekday_indices = st.integers(min_value=0, max_value=6)


@functools.cache
def _resolver(*languages: str) -> DateResolver:
    return DateResolver(
        languages,
        provider=_PROVIDER,
        parser_pool=GenericParserPool([StubParser()]),
        config=ResolverConfig(locale="en_US", week_start=WeekStart.MONDAY),
    )


def _midnight(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _sunday_week(value: datetime) -> datetime:
    """Midnight of the Sunday starting the week that contains ``value``."""
    return _midnight(value) - timedelta(days=(value.weekday() + 1) % 7)


def _add_months(value: datetime, months: int) -> datetime:
    total = value.year * 12 + value.month - 1 + months
    year, month = divmod(total, 12)
    day = min(value.day, calendar.monthrange(year, month + 1)[1])
    return value.replace(year=year, month=month + 1, day=day)


def _expected_duration(now: datetime, amount: int, unit: TimeUnit) -> datetime:
    match unit:
        case TimeUnit.MINUTES:
            return now + timedelta(minutes=amount)
        case TimeUnit.HOURS:
            return now + timedelta(hours=amount)
        case TimeUnit.DAYS:
            return _midnight(now + timedelta(days=amount))
        case TimeUnit.WEEKS:
            return _midnight(now + timedelta(weeks=amount))
        case TimeUnit.MONTHS:
            return _midnight(_add_months(now, amount))
        case TimeUnit.YEARS:
            return _midnight(_add_months(now, amount * 12))


class TestDurationProperties:
    """in N <unit> for every English and French unit form."""

    @given(
        now=references,
        amount=amounts,
        unit=st.sampled_from(list(TimeUnit)),
        language=st.sampled_from([Language.EN, Language.FR]),
        data=st.data(),
    )
    @settings(deadline=None)
    def test_simple_duration(
        self,
        now: datetime,
        amount: int,
        unit: TimeUnit,
        language: Language,
        data: st.DataObject,
    ) -> None:
        """Property: resolve("in N unit") is N units after now."""
        form = data.draw(st.sampled_from(_PROVIDER.variants(unit.lexicon_key, language)))
        keyword = _PROVIDER.canonical("in", language)
        event(f"unit={unit}")
        resolver = _resolver("en", "fr")
        text = f"{keyword} {amount} {form}"
        assert resolver.resolve(text, reference=now) == _expected_duration(now, amount, unit)
        assert resolver.has_time(text, reference=now) is unit.is_clock

    @given(now=references, weeks=amounts, days=amounts)
    @settings(deadline=None)
    def test_combined_duration_adds_up(self, now: datetime, weeks: int, days: int) -> None:
        """Property: the combined form equals the sum of its parts."""
        resolved = _resolver("en").resolve(f"in {weeks} weeks and {days} days", reference=now)
        assert resolved == _midnight(now + timedelta(weeks=weeks, days=days))

    @given(
        amount=st.integers(min_value=10**6, max_value=10**30),
        unit=st.sampled_from(["years", "days"]),
    )
    @settings(deadline=None)
    def test_out_of_range_duration_is_today(self, amount: int, unit: str) -> None:
        """Property: durations past the calendar degrade to today."""
        now = datetime(2024, 1, 1, 12, 0)
        resolved = _resolver("en").resolve(f"in {amount} {unit}", reference=now)
        assert resolved == datetime(2024, 1, 1)


class TestImmediateKeywordProperties:
    """now / today / tomorrow / yesterday in every language."""

    @given(
        now=references,
        language=st.sampled_from(list(Language)),
        key=st.sampled_from(["now", "today", "tomorrow", "yesterday"]),
        data=st.data(),
    )
    @settings(deadline=None)
    def test_keyword(
        self, now: datetime, language: Language, key: str, data: st.DataObject
    ) -> None:
        """Property: every surface form of a key resolves identically."""
        form = data.draw(st.sampled_from(_PROVIDER.variants(key, language)))
        event(f"language={language}")
        expected = {
            "now": now,
            "today": _midnight(now),
            "tomorrow": _midnight(now) + timedelta(days=1),
            "yesterday": _midnight(now) - timedelta(days=1),
        }[key]
        assert _resolver(str(language)).resolve(form, reference=now) == expected


class TestRangeProperties:
    """from <weekday> to <weekday>."""

    @given(now=references, first=weekday_indices, last=weekday_indices)
    @settings(deadline=None)
    def test_range_shape(self, now: datetime, first: int, last: int) -> None:
        """Property: start is the next occurrence of the first weekday, and
        the inclusive day list covers at most one week."""
        text = f"from {WEEKDAY_KEYS[first]} to {WEEKDAY_KEYS[last]}"
        found = _resolver("en").resolve_range(text, reference=now)
        assert found is not None
        today = _midnight(now)
        assert today <= found.start < today + timedelta(days=7)
        assert (found.start.weekday() + 1) % 7 == first
        assert (found.end.weekday() + 1) % 7 == last
        assert 1 <= found.day_count <= 7
        assert found.days[0] == found.start_moment
        assert found.days[-1] == found.end_moment
        assert len(found.days) == (found.end_moment - found.start_moment).days + 1

    @given(now=references, week_start=st.sampled_from(list(WeekStart)))
    @settings(deadline=None)
    def test_next_week_shape(self, now: datetime, week_start: WeekStart) -> None:
        """Property: next week is seven days starting 1-7 days from today."""
        found = _resolver("en").resolve_range("next week", week_start, reference=now)
        assert found is not None
        assert found.day_count == 7
        assert 1 <= (found.start - _midnight(now)).days <= 7
        if week_start is not WeekStart.LOCALE_DEFAULT:
            assert week_start.index == (found.start.weekday() + 1) % 7


class TestWeekdayProperties:
    """this / next / last <weekday>."""

    @given(
        now=references,
        index=weekday_indices,
        prefix=st.sampled_from([("this", 0), ("next", 1), ("last", -1)]),
    )
    @settings(deadline=None)
    def test_weekday(self, now: datetime, index: int, prefix: tuple[str, int]) -> None:
        """Property: the requested weekday in the shifted Sunday-based week."""
        word, offset = prefix
        resolved = _resolver("en").resolve(f"{word} {WEEKDAY_KEYS[index]}", reference=now)
        assert (resolved.weekday() + 1) % 7 == index
        assert _sunday_week(resolved) == _sunday_week(now) + timedelta(weeks=offset)
        assert resolved == _midnight(resolved)
        if word == "next":
            assert resolved > now

    @given(now=references, index=weekday_indices)
    @settings(deadline=None)
    def test_weekday_never_has_time(self, now: datetime, index: int) -> None:
        """Property: a bare weekday phrase is date-only."""
        assert not _resolver("en").has_time(f"next {WEEKDAY_KEYS[index]}", reference=now)


class TestTotality:
    """Resolution never raises."""

    @given(text=st.text(max_size=300), now=references)
    @settings(deadline=None)
    def test_arbitrary_text(self, text: str, now: datetime) -> None:
        """Property: every entry point returns a value for any text."""
        resolver = _resolver("en", "fr", "de")
        assert isinstance(resolver.resolve(text, reference=now), datetime)
        found = resolver.resolve_range(text, reference=now)
        assert found is None or found.day_count >= 1
        assert resolver.has_time(text, reference=now) in (True, False)
        assert resolver.is_short_relative(text) in (True, False)
