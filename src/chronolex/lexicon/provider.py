"""Lexicon provider with a thread-safe, load-once table cache.

Given a language and a semantic key ("next", "monday", "and"), returns the
surface forms for that concept, falling back to the default language when
either the language or the key is missing.

Architecture:
    - LexiconProvider owns an LRU cache of LexiconTable instances
    - Tables are loaded through an injectable LexiconLoader
    - get_default_provider() returns a lazily created process-wide instance;
      every resolver accepts an explicit provider instead

Thread Safety:
    Cache reads and inserts are guarded by an RLock. Loading happens outside
    the lock; a racing load of the same language is idempotent and the first
    inserted table wins.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from collections.abc import Mapping
from threading import Lock, RLock

from chronolex.constants import (
    MAX_LEXICON_CACHE_SIZE,
    NOT_FOUND,
    PLACEHOLDER_PATTERN,
    VARIANT_DELIMITER,
)
from chronolex.enums import DEFAULT_LANGUAGE, Language
from chronolex.errors import LexiconLoadError
from chronolex.lexicon.loading import LexiconLoader, LexiconTable, ModuleLexiconLoader

__all__ = [
    "LexiconProvider",
    "get_default_provider",
    "split_variants",
]

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(PLACEHOLDER_PATTERN)


def split_variants(entry: str) -> tuple[str, ...]:
    """Split a pipe-delimited entry into stripped, non-empty variants.

    Example:
        >>> split_variants("next| following |")
        ('next', 'following')
    """
    return tuple(part.strip() for part in entry.split(VARIANT_DELIMITER) if part.strip())


class LexiconProvider:
    """Translation lookup over per-language lexicon tables.

    Examples:
        >>> provider = LexiconProvider()
        >>> provider.translate("tomorrow", "fr")
        'demain'
        >>> provider.variants("next", Language.DE)[:2]
        ('nächster', 'nächste')
        >>> provider.translate("no-such-key", "fr")
        'NOTFOUND'

    Attributes:
        default_language: Language consulted when a lookup misses
    """

    __slots__ = ("_cache", "_cache_lock", "_loader", "_max_size", "default_language")

    def __init__(
        self,
        loader: LexiconLoader | None = None,
        *,
        default_language: Language = DEFAULT_LANGUAGE,
        max_size: int = MAX_LEXICON_CACHE_SIZE,
    ) -> None:
        """Initialize provider.

        Args:
            loader: Table loader (default: tables shipped with chronolex)
            default_language: Fallback language for missing languages and keys
            max_size: Maximum number of cached tables

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)
        self._loader: LexiconLoader = loader if loader is not None else ModuleLexiconLoader()
        self._cache: OrderedDict[Language, LexiconTable] = OrderedDict()
        self._cache_lock = RLock()
        self._max_size = max_size
        self.default_language = default_language

    def table(self, language: Language | str) -> LexiconTable:
        """Return the (cached) lexicon table for a language.

        Unknown codes and loader failures yield the default language's table
        marked ``is_fallback=True``.
        """
        requested = Language.parse(language)
        if requested is None:
            logger.debug(
                "Unsupported lexicon language '%s'; using %s", language, self.default_language
            )
            return self._fallback_table(self.default_language)

        with self._cache_lock:
            if requested in self._cache:
                self._cache.move_to_end(requested)
                return self._cache[requested]

        try:
            table = LexiconTable.freeze(requested, self._loader.load(requested))
        except LexiconLoadError as e:
            if requested is self.default_language:
                raise
            logger.warning(
                "Lexicon for '%s' unavailable: %s. Falling back to %s",
                requested,
                e,
                self.default_language,
            )
            table = self._fallback_table(requested)

        return self._store(requested, table)

    def translate(
        self,
        key: str,
        language: Language | str,
        variables: Mapping[str, object] | None = None,
    ) -> str:
        """Translate a semantic key, falling back to the default language.

        Args:
            key: Semantic key (case-insensitive)
            language: Requested language
            variables: Values for ``%{name}`` placeholders

        Returns:
            The raw (pipe-delimited) entry with placeholders substituted,
            or NOT_FOUND when neither language defines the key.
        """
        entry = self.table(language).get(key)
        if entry is None:
            entry = self.table(self.default_language).get(key)
        if entry is None:
            return NOT_FOUND
        if variables:
            entry = _interpolate(entry, variables)
        return entry

    def variants(self, key: str, language: Language | str) -> tuple[str, ...]:
        """Return the surface forms of a key, empty when NOT_FOUND."""
        entry = self.translate(key, language)
        if entry == NOT_FOUND:
            return ()
        return split_variants(entry)

    def canonical(self, key: str, language: Language | str) -> str:
        """Return the canonical (first) surface form, or NOT_FOUND."""
        forms = self.variants(key, language)
        return forms[0] if forms else NOT_FOUND

    def clear_cache(self) -> None:
        """Drop every cached table. Thread-safe."""
        with self._cache_lock:
            self._cache.clear()

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics (size, max_size, languages in LRU order)."""
        with self._cache_lock:
            return {
                "size": len(self._cache),
                "max_size": self._max_size,
                "languages": tuple(str(lang) for lang in self._cache),
            }

    def _fallback_table(self, requested: Language) -> LexiconTable:
        default = self.table(self.default_language)
        return LexiconTable(language=requested, entries=default.entries, is_fallback=True)

    def _store(self, language: Language, table: LexiconTable) -> LexiconTable:
        with self._cache_lock:
            if language in self._cache:
                return self._cache[language]
            if len(self._cache) >= self._max_size:
                self._cache.popitem(last=False)
            self._cache[language] = table
            return table


def _interpolate(entry: str, variables: Mapping[str, object]) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(variables[name]) if name in variables else match.group(0)

    return _PLACEHOLDER_RE.sub(replace, entry)


_default_provider: LexiconProvider | None = None
_default_provider_lock = Lock()


def get_default_provider() -> LexiconProvider:
    """Return the process-wide provider, creating it on first use."""
    global _default_provider  # noqa: PLW0603
    with _default_provider_lock:
        if _default_provider is None:
            _default_provider = LexiconProvider()
        return _default_provider
