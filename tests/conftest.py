"""Pytest configuration for the chronolex test suite.

Hypothesis profiles (max_examples is set only here):
- dev (default): 500 examples
- ci (CI=true): 50 examples, derandomized, failure blobs printed
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE selects a profile explicitly. Tests marked
``@pytest.mark.fuzz`` only run with ``pytest -m fuzz`` or when their module
is named on the command line.

Shared fixtures pin "now" to 2024-01-01 00:00 (a Monday) and replace the
dateparser-backed pool with deterministic doubles from tests.helpers.parsers.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from datetime import datetime

import pytest
from hypothesis import Phase, Verbosity, settings

from chronolex import DateResolver, ResolverConfig, WeekStart
from chronolex.lexicon import LexiconProvider
from chronolex.parsing import GenericParserPool
from tests.helpers.parsers import StubParser

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)
_PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _select_profile() -> str:
    """HYPOTHESIS_PROFILE, else "ci" under CI=true, else "dev"."""
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# =============================================================================
# MARKERS
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the fuzz and integration markers."""
    config.addinivalue_line(
        "markers", "fuzz: long-running fuzz runs, skipped unless selected with -m fuzz"
    )
    config.addinivalue_line(
        "markers", "integration: tests that exercise the real dateparser backend"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless selected by marker or by file name."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any("fuzzing" in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz run; select with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

# 2024-01-01 00:00 is a Monday.
REFERENCE = datetime(2024, 1, 1, 0, 0)


@pytest.fixture
def reference() -> datetime:
    """Fixed reference instant used as "now"."""
    return REFERENCE


@pytest.fixture
def provider() -> LexiconProvider:
    """Fresh provider over the shipped tables (no state shared between tests)."""
    return LexiconProvider()


@pytest.fixture
def stub_parser() -> StubParser:
    """Empty generic-parser double; tests register responses on it."""
    return StubParser()


@pytest.fixture
def make_resolver(
    provider: LexiconProvider, stub_parser: StubParser
) -> Callable[..., DateResolver]:
    """Factory for resolvers wired to the stub parser and a fixed clock."""

    def factory(
        languages: Iterable[str] = ("en",),
        *,
        config: ResolverConfig | None = None,
        pool: GenericParserPool | None = None,
    ) -> DateResolver:
        return DateResolver(
            languages,
            provider=provider,
            parser_pool=pool if pool is not None else GenericParserPool([stub_parser]),
            clock=lambda: REFERENCE,
            config=config or ResolverConfig(locale="en_US", week_start=WeekStart.MONDAY),
        )

    return factory


@pytest.fixture
def resolver(make_resolver: Callable[..., DateResolver]) -> DateResolver:
    """English and French resolver over the stub parser."""
    return make_resolver(("en", "fr"))
