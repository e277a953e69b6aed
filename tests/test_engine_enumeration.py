"""Tests for ResolutionEngine.get_all_strings() hierarchy enumeration."""

from __future__ import annotations

import types

from culturelex.config import ResolverConfig
from culturelex.dictionary import CultureDictionary
from culturelex.engine import ResolutionEngine
from culturelex.providers import InMemoryDictionaryProvider


def _engine(config: ResolverConfig | None = None) -> ResolutionEngine:
    provider = InMemoryDictionaryProvider([
        CultureDictionary.from_entries(
            "fr-CA", [("hello", None, ["Allô"]), ("Open", "menu", ["Ouvrir…"])]
        ),
        CultureDictionary.from_entries(
            "fr",
            [
                ("hello", None, ["Bonjour"]),
                ("bye", None, ["Au revoir", "Au revoirs"]),
                ("Open", "menu", ["Ouvrir"]),
                ("Open", None, ["Ouvrir"]),
            ],
        ),
        CultureDictionary.from_entries("", [("ok", None, ["OK"]), ("bye", None, ["Bye"])]),
    ])
    return ResolutionEngine(provider, config=config)


class TestOwnCultureOnly:
    """include_ancestors=False."""

    def test_one_entry_per_key(self) -> None:
        strings = list(_engine().get_all_strings("fr-CA"))
        assert [(s.name, s.context, s.value) for s in strings] == [
            ("hello", None, "Allô"),
            ("Open", "menu", "Ouvrir…"),
        ]

    def test_first_form_is_representative(self) -> None:
        strings = {s.name: s.value for s in _engine().get_all_strings("fr")}
        assert strings["bye"] == "Au revoir"

    def test_missing_culture_yields_nothing(self) -> None:
        assert list(_engine().get_all_strings("de")) == []

    def test_untranslated_entries_not_enumerated(self) -> None:
        provider = InMemoryDictionaryProvider([
            CultureDictionary(
                "en", {"empty": (), "partial": ("", "{0} things"), "ok": ("OK",)}
            )
        ])
        strings = list(ResolutionEngine(provider).get_all_strings("en"))
        assert [(s.name, s.value) for s in strings] == [("ok", "OK")]


class TestWithAncestors:
    """include_ancestors=True."""

    def test_child_value_wins(self) -> None:
        strings = {
            s.name: s.value
            for s in _engine().get_all_strings("fr-CA", include_ancestors=True)
            if s.context is None
        }
        assert strings == {"hello": "Allô", "bye": "Au revoir", "Open": "Ouvrir", "ok": "OK"}

    def test_exactly_one_entry_per_key(self) -> None:
        strings = list(_engine().get_all_strings("fr-CA", include_ancestors=True))
        keys = [(s.name, s.context) for s in strings]
        assert len(keys) == len(set(keys))

    def test_context_entries_deduplicated_separately(self) -> None:
        strings = list(_engine().get_all_strings("fr-CA", include_ancestors=True))
        opens = {(s.context, s.value) for s in strings if s.name == "Open"}
        assert opens == {("menu", "Ouvrir…"), (None, "Ouvrir")}

    def test_origin_culture_reported(self) -> None:
        strings = {
            s.name: s.culture
            for s in _engine().get_all_strings("fr-CA", include_ancestors=True)
            if s.context is None
        }
        assert strings == {"hello": "fr_CA", "bye": "fr", "Open": "fr", "ok": ""}

    def test_missing_leaf_still_walks_ancestors(self) -> None:
        names = {s.name for s in _engine().get_all_strings("fr-BE", include_ancestors=True)}
        assert names == {"hello", "bye", "Open", "ok"}

    def test_walk_ignores_parent_fallback_flag(self) -> None:
        engine = _engine(ResolverConfig(fallback_to_parent=False))
        names = {s.name for s in engine.get_all_strings("fr-CA", include_ancestors=True)}
        assert "bye" in names

    def test_cyclic_parent_relation_terminates(self) -> None:
        config = ResolverConfig(parent_of=lambda c: "fr" if c == "fr_CA" else "fr_CA")
        strings = list(_engine(config).get_all_strings("fr-CA", include_ancestors=True))
        assert {s.name for s in strings} == {"hello", "bye", "Open"}


class TestLaziness:
    """The sequence is a fresh generator on every call."""

    def test_returns_generator(self) -> None:
        assert isinstance(_engine().get_all_strings("fr"), types.GeneratorType)

    def test_recomputed_each_call(self) -> None:
        engine = _engine()
        first = list(engine.get_all_strings("fr-CA", include_ancestors=True))
        second = list(engine.get_all_strings("fr-CA", include_ancestors=True))
        assert first == second

    def test_reflects_provider_updates(self) -> None:
        provider = InMemoryDictionaryProvider()
        engine = ResolutionEngine(provider)
        assert list(engine.get_all_strings("de")) == []
        provider.add(CultureDictionary.from_entries("de", [("a", None, ["b"])]))
        assert [s.value for s in engine.get_all_strings("de")] == ["b"]
