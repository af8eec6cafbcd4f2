"""Shared constants for chronolex.

This module provides centralized configuration constants used across the
lexicon, grammar, parsing and resolver packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Lexicon: sentinel values and delimiters used by translation tables
- Cache limits: Memory bounds for caching subsystems
- Input limits: Guard against pathological input before regex matching
- Formatting: Default LDML patterns for formatted results

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lexicon
    "NOT_FOUND",
    "VARIANT_DELIMITER",
    "PLACEHOLDER_PATTERN",
    # Cache limits
    "MAX_LEXICON_CACHE_SIZE",
    # Input limits
    "MAX_INPUT_LENGTH",
    # Formatting
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TIME_FORMAT",
    "DEFAULT_SEPARATOR",
    "RANGE_FORMAT_PATTERN",
    "RANGE_JOINER",
]

# ============================================================================
# LEXICON
# ============================================================================

# Returned by LexiconProvider.translate() when a key is missing in both the
# requested and the default language. Kept as a plain string so callers can
# compare it directly against translated text.
NOT_FOUND: str = "NOTFOUND"

# Surface-form variants in a lexicon entry are pipe-delimited:
#   next = "next|following"
# The first variant is the canonical display form.
VARIANT_DELIMITER: str = "|"

# Interpolation placeholders inside lexicon entries: "in %{timeDelta} days"
PLACEHOLDER_PATTERN: str = r"%\{(\w+)\}"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached lexicon tables per provider.
# Eleven languages ship with the package; the bound leaves room for custom
# loaders that register regional variants.
MAX_LEXICON_CACHE_SIZE: int = 64

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Inputs longer than this skip every structured layer and the generic parser.
# Natural-language date phrases are short; anything longer is either pasted
# prose or adversarial, and the compiled alternations grow with each enabled
# language.
MAX_INPUT_LENGTH: int = 256

# ============================================================================
# FORMATTING
# ============================================================================

# LDML patterns (Babel/CLDR syntax, not strftime).
DEFAULT_DATE_FORMAT: str = "yyyy-MM-dd"
DEFAULT_TIME_FORMAT: str = "HH:mm"
DEFAULT_SEPARATOR: str = " "

# Ranges are always rendered with the ISO-like day pattern.
RANGE_FORMAT_PATTERN: str = "yyyy-MM-dd"
RANGE_JOINER: str = " to "
