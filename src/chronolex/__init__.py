"""chronolex - multilingual natural-language date resolution.

Turns free-form time expressions in any combination of eleven languages
("in 2 weeks and 3 days", "next Monday at 3pm", "de lundi à vendredi")
into dates, day ranges, and a flag telling whether a clock time was given.

Public API:
    DateResolver - Layered resolver over one ordered set of languages
    ResolverConfig - Formatting and week-start options
    ResolvedDate / ResolvedRange - Result value objects
    Language, WeekStart, TimeUnit, Direction - Type-safe constants

Exceptions:
    ChronolexError - Base exception class
    GrammarCompilationError - No grammar could be compiled at construction
    LexiconLoadError - A lexicon table could not be loaded
    FormattingError - An LDML pattern could not be applied

Submodules:
    chronolex.lexicon - Lexicon provider, loaders and shipped tables
    chronolex.grammar - Grammar compiler
    chronolex.parsing - Generic parser pool (dateparser) and ordinal extension
    chronolex.time_detector - Clock-time detection
"""

from chronolex.config import ResolverConfig
from chronolex.enums import Direction, Language, TimeUnit, WeekStart
from chronolex.errors import (
    ChronolexError,
    FormattingError,
    GrammarCompilationError,
    LexiconLoadError,
)
from chronolex.lexicon import LexiconProvider, get_default_provider
from chronolex.resolver import DateResolver
from chronolex.results import ResolvedDate, ResolvedRange

# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("chronolex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChronolexError",
    "DateResolver",
    "Direction",
    "FormattingError",
    "GrammarCompilationError",
    "Language",
    "LexiconLoadError",
    "LexiconProvider",
    "ResolvedDate",
    "ResolvedRange",
    "ResolverConfig",
    "TimeUnit",
    "WeekStart",
    "__version__",
    "get_default_provider",
]
