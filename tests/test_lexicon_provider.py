"""Tests for LexiconProvider, its loaders and the shipped lexicon tables."""

from __future__ import annotations

import logging
from types import MappingProxyType

import pytest

from chronolex.constants import NOT_FOUND
from chronolex.enums import WEEKDAY_KEYS, Language, TimeUnit
from chronolex.errors import LexiconLoadError
from chronolex.lexicon import (
    LexiconProvider,
    LexiconTable,
    MappingLexiconLoader,
    ModuleLexiconLoader,
    get_default_provider,
    split_variants,
)

STRUCTURAL_KEYS = ("now", "today", "tomorrow", "yesterday", "next", "last", "this",
                   "in", "and", "at", "from", "to")  # fmt: skip


class TestSplitVariants:
    """Pipe-delimited entries."""

    def test_strips_and_drops_empty(self) -> None:
        """Whitespace is trimmed and empty variants removed."""
        assert split_variants(" next | following ||") == ("next", "following")

    def test_single_variant(self) -> None:
        """Entries without a delimiter yield one variant."""
        assert split_variants("today") == ("today",)


class TestShippedTables:
    """Every language ships a complete table."""

    @pytest.mark.parametrize("language", list(Language))
    def test_required_keys_present(self, language: Language) -> None:
        """Matcher keys exist in every shipped table."""
        entries = ModuleLexiconLoader().load(language)
        required = (
            *STRUCTURAL_KEYS,
            *WEEKDAY_KEYS,
            *(unit.lexicon_key for unit in TimeUnit),
        )
        missing = [key for key in required if not split_variants(entries.get(key, ""))]
        assert missing == []

    def test_unknown_package_raises(self) -> None:
        """A missing module is reported as LexiconLoadError."""
        loader = ModuleLexiconLoader(package="chronolex.no_such_package")
        with pytest.raises(LexiconLoadError) as exc_info:
            loader.load(Language.FR)
        assert exc_info.value.language == "fr"


class TestMappingLexiconLoader:
    """In-memory loader."""

    def test_missing_language_raises(self) -> None:
        """Unregistered languages raise LexiconLoadError."""
        loader = MappingLexiconLoader({Language.EN: {"today": "today"}})
        with pytest.raises(LexiconLoadError, match="No in-memory lexicon"):
            loader.load(Language.DE)


class TestLexiconTable:
    """Frozen tables."""

    def test_freeze_lowercases_keys(self) -> None:
        """Keys are case-insensitive and the view is read-only."""
        table = LexiconTable.freeze(Language.EN, {"Today": "today"})
        assert table.get("TODAY") == "today"
        assert isinstance(table.entries, MappingProxyType)
        assert table.is_fallback is False


class TestTranslate:
    """translate(), variants() and canonical()."""

    def test_translate_returns_raw_entry(self, provider: LexiconProvider) -> None:
        """The raw pipe-delimited entry is returned."""
        assert provider.translate("tomorrow", Language.FR) == "demain"
        assert provider.translate("next", "en").startswith("next|")

    def test_variants_and_canonical(self, provider: LexiconProvider) -> None:
        """variants() splits the entry; canonical() is the first variant."""
        assert provider.variants("monday", Language.PT)[:2] == ("segunda-feira", "segunda")
        assert provider.canonical("monday", Language.PT) == "segunda-feira"

    def test_missing_key_falls_back_to_default_language(self) -> None:
        """Keys missing in the requested table come from English."""
        loader = MappingLexiconLoader(
            {
                Language.EN: {"today": "today", "hour": "hour|hours"},
                Language.FR: {"today": "aujourd'hui"},
            }
        )
        provider = LexiconProvider(loader)
        assert provider.translate("hour", Language.FR) == "hour|hours"

    def test_missing_everywhere_is_not_found(self, provider: LexiconProvider) -> None:
        """Keys absent from both tables return the sentinel."""
        assert provider.translate("no-such-key", Language.FR) == NOT_FOUND
        assert provider.variants("no-such-key", Language.FR) == ()
        assert provider.canonical("no-such-key", Language.FR) == NOT_FOUND

    def test_placeholders_are_interpolated(self, provider: LexiconProvider) -> None:
        """%{name} placeholders are substituted from variables."""
        assert provider.translate("indays", "en", {"timeDelta": 3}) == "in 3 days"
        assert provider.translate("indays", "fr", {"timeDelta": 2}) == "dans 2 jours"

    @pytest.mark.parametrize("language", list(Language))
    def test_every_table_has_an_interpolated_entry(
        self, provider: LexiconProvider, language: Language
    ) -> None:
        """Each shipped table substitutes the amount into its own phrase."""
        rendered = provider.translate("indays", language, {"timeDelta": 7})
        assert "7" in rendered
        assert "%{" not in rendered
        assert not provider.table(language).is_fallback

    def test_unknown_placeholder_kept(self) -> None:
        """Placeholders without a value are left untouched."""
        provider = LexiconProvider(MappingLexiconLoader({Language.EN: {"x": "%{a} %{b}"}}))
        assert provider.translate("x", "en", {"a": 1}) == "1 %{b}"

    def test_key_lookup_is_case_insensitive(self, provider: LexiconProvider) -> None:
        """Semantic keys ignore case."""
        assert provider.translate("TOMORROW", "de") == provider.translate("tomorrow", "de")


class TestFallbackTables:
    """Unknown languages and loader failures."""

    def test_unknown_language_uses_default_table(self, provider: LexiconProvider) -> None:
        """Unsupported codes resolve against English."""
        assert provider.translate("tomorrow", "xx") == "tomorrow|tmrw|tmr"

    def test_loader_failure_marks_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failing non-default language is substituted and flagged."""
        provider = LexiconProvider(MappingLexiconLoader({Language.EN: {"today": "today"}}))
        with caplog.at_level(logging.WARNING, logger="chronolex.lexicon.provider"):
            table = provider.table(Language.DE)
        assert table.is_fallback is True
        assert table.language is Language.DE
        assert table.get("today") == "today"
        assert "unavailable" in caplog.text

    def test_default_language_failure_propagates(self) -> None:
        """Without a default table there is nothing to fall back to."""
        provider = LexiconProvider(MappingLexiconLoader({}))
        with pytest.raises(LexiconLoadError):
            provider.table(Language.EN)


class TestCache:
    """Load-once LRU cache."""

    def test_tables_loaded_once(self) -> None:
        """Repeated lookups reuse the cached table."""
        calls: list[Language] = []

        class CountingLoader:
            def load(self, language: Language) -> dict[str, str]:
                calls.append(language)
                return {"today": "today"}

        provider = LexiconProvider(CountingLoader())
        provider.translate("today", "en")
        provider.translate("today", "en")
        provider.variants("today", Language.EN)
        assert calls == [Language.EN]

    def test_cache_info_and_clear(self, provider: LexiconProvider) -> None:
        """cache_info() reports languages in LRU order; clear_cache() empties it."""
        provider.table(Language.FR)
        provider.table(Language.DE)
        provider.table(Language.FR)
        info = provider.cache_info()
        assert info["size"] == 2
        assert info["languages"] == ("de", "fr")

        provider.clear_cache()
        assert provider.cache_info()["size"] == 0

    def test_eviction_respects_max_size(self) -> None:
        """The least recently used table is evicted first."""
        provider = LexiconProvider(max_size=2)
        provider.table(Language.FR)
        provider.table(Language.DE)
        provider.table(Language.ES)
        assert provider.cache_info()["languages"] == ("de", "es")

    def test_max_size_must_be_positive(self) -> None:
        """Zero-sized caches are rejected."""
        with pytest.raises(ValueError, match="max_size must be positive"):
            LexiconProvider(max_size=0)


class TestDefaultProvider:
    """Process-wide provider."""

    def test_singleton(self) -> None:
        """get_default_provider() returns one shared instance."""
        assert get_default_provider() is get_default_provider()
