"""Lexicon package: per-language surface forms for temporal concepts.

Submodules:
    loading  - LexiconLoader protocol, ModuleLexiconLoader, MappingLexiconLoader,
               LexiconTable
    provider - LexiconProvider (cached translate/variants lookups)
    data     - Shipped tables, one module per Language

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from chronolex.lexicon.loading import (
    LexiconLoader,
    LexiconTable,
    MappingLexiconLoader,
    ModuleLexiconLoader,
)
from chronolex.lexicon.provider import LexiconProvider, get_default_provider, split_variants

__all__ = [
    # Provider
    "LexiconProvider",
    "get_default_provider",
    "split_variants",
    # Loader protocol and implementations
    "LexiconLoader",
    "ModuleLexiconLoader",
    "MappingLexiconLoader",
    "LexiconTable",
]
