"""chronolex exception hierarchy.

Resolution never raises: unrecognized input degrades to today (resolve),
None (resolve_range) or False (has_time). The only error allowed to reach
callers is GrammarCompilationError, raised when not even the default
language can be compiled at construction time.

Python 3.13+.
"""

__all__ = [
    "ChronolexError",
    "FormattingError",
    "GrammarCompilationError",
    "LexiconLoadError",
]


class ChronolexError(Exception):
    """Base exception for all chronolex errors."""


class GrammarCompilationError(ChronolexError):
    """No usable grammar could be compiled, not even for the default language.

    Attributes:
        languages: Language codes that were requested
    """

    def __init__(self, message: str, *, languages: tuple[str, ...] = ()) -> None:
        """Initialize GrammarCompilationError.

        Args:
            message: Error message
            languages: Language codes that were requested
        """
        super().__init__(message)
        self.languages = languages


class LexiconLoadError(ChronolexError):
    """A lexicon loader could not produce a table for a language.

    Caught by LexiconProvider, which falls back to the default language.

    Attributes:
        language: Language code that failed to load
    """

    def __init__(self, message: str, *, language: str = "") -> None:
        """Initialize LexiconLoadError.

        Args:
            message: Error message
            language: Language code that failed to load
        """
        super().__init__(message)
        self.language = language


class FormattingError(ChronolexError):
    """An LDML pattern could not be applied to a resolved instant.

    Caught by DateResolver, which substitutes ``fallback_value``.

    Attributes:
        fallback_value: ISO 8601 rendering of the instant
    """

    def __init__(self, message: str, *, fallback_value: str = "") -> None:
        """Initialize FormattingError.

        Args:
            message: Error message
            fallback_value: Text to use in place of the formatted value
        """
        super().__init__(message)
        self.fallback_value = fallback_value
