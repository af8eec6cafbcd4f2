"""Lexicon loading infrastructure for LexiconProvider.

Provides the protocol for lexicon loaders, the default loader that reads
the tables shipped in ``chronolex.lexicon.data``, an in-memory loader for
tests and embedding applications, and the immutable table type handed to
the provider cache.

Components:
    LexiconLoader - Protocol for loading lexicon tables (structural typing)
    ModuleLexiconLoader - Imports ``<package>.<language module>`` tables
    MappingLexiconLoader - Serves tables from an in-memory mapping
    LexiconTable - Immutable loaded table with fallback marker

Python 3.13+.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from chronolex.enums import Language
from chronolex.errors import LexiconLoadError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "LexiconLoader",
    # Concrete loaders
    "ModuleLexiconLoader",
    "MappingLexiconLoader",
    # Loaded table
    "LexiconTable",
]

_DATA_PACKAGE = "chronolex.lexicon.data"


class LexiconLoader(Protocol):
    """Protocol for loading the lexicon table of one language.

    Implementations return a mapping from semantic key ("next", "monday")
    to pipe-delimited surface forms. This is a Protocol (structural typing)
    rather than ABC so applications can plug in their own storage.

    Example:
        >>> class JsonLoader:
        ...     def load(self, language: Language) -> Mapping[str, str]:
        ...         return json.loads(Path(f"lex/{language}.json").read_text("utf-8"))
        ...
        >>> provider = LexiconProvider(loader=JsonLoader())
    """

    def load(self, language: Language) -> Mapping[str, str]:
        """Load the lexicon table for a language.

        Args:
            language: Language whose table is requested

        Returns:
            Mapping of semantic key to pipe-delimited surface forms

        Raises:
            LexiconLoadError: If no table exists or it cannot be read
        """


@dataclass(frozen=True, slots=True)
class ModuleLexiconLoader:
    """Loads tables from Python modules exposing an ``ENTRIES`` mapping.

    Attributes:
        package: Dotted package holding one module per language
            (module name from ``Language.module_name``)
    """

    package: str = _DATA_PACKAGE

    def load(self, language: Language) -> Mapping[str, str]:
        """Import ``<package>.<module_name>`` and return its ENTRIES.

        Raises:
            LexiconLoadError: If the module is missing or has no ENTRIES mapping
        """
        module_path = f"{self.package}.{language.module_name}"
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            msg = f"No lexicon module '{module_path}' for language '{language}'"
            raise LexiconLoadError(msg, language=str(language)) from e

        entries = getattr(module, "ENTRIES", None)
        if not isinstance(entries, Mapping):
            msg = f"Lexicon module '{module_path}' does not define an ENTRIES mapping"
            raise LexiconLoadError(msg, language=str(language))
        return entries


@dataclass(frozen=True, slots=True)
class MappingLexiconLoader:
    """Serves lexicon tables from memory.

    Example:
        >>> loader = MappingLexiconLoader({Language.EN: {"today": "today"}})
        >>> loader.load(Language.EN)["today"]
        'today'
    """

    tables: Mapping[Language, Mapping[str, str]] = field(default_factory=dict)

    def load(self, language: Language) -> Mapping[str, str]:
        """Return the table registered for ``language``.

        Raises:
            LexiconLoadError: If no table is registered
        """
        try:
            return self.tables[language]
        except KeyError:
            msg = f"No in-memory lexicon table for language '{language}'"
            raise LexiconLoadError(msg, language=str(language)) from None


@dataclass(frozen=True, slots=True)
class LexiconTable:
    """Immutable lexicon table for one language.

    Attributes:
        language: Language the table was requested for
        entries: Read-only key -> surface forms mapping
        is_fallback: True when the requested language could not be loaded
            and the default language's entries were substituted
    """

    language: Language
    entries: Mapping[str, str]
    is_fallback: bool = False

    @classmethod
    def freeze(
        cls, language: Language, entries: Mapping[str, str], *, is_fallback: bool = False
    ) -> LexiconTable:
        """Build a table with keys lower-cased and a read-only entries view."""
        frozen = MappingProxyType({str(k).lower(): str(v) for k, v in entries.items()})
        return cls(language=language, entries=frozen, is_fallback=is_fallback)

    def get(self, key: str) -> str | None:
        """Return the raw entry for ``key`` or None."""
        return self.entries.get(key.lower())
