"""Tests for the StringLocalizer facade."""

from __future__ import annotations

import pytest

from culturelex.dictionary import CultureDictionary
from culturelex.engine import ResolutionEngine
from culturelex.errors import InvalidArgumentError
from culturelex.localizer import StringLocalizer
from culturelex.plural_rules import plural_rule_for
from culturelex.providers import InMemoryDictionaryProvider


@pytest.fixture
def engine() -> ResolutionEngine:
    fr = CultureDictionary.from_entries(
        "fr",
        [
            ("Hello {0}", None, ["Bonjour {0}"]),
            ("Open", "menu", ["Ouvrir…"]),
            ("Open", None, ["Ouvrir"]),
            ("{0} file", None, ["{0} fichier", "{0} fichiers"]),
            ("{0} file in {1}", None, ["{0} fichier dans {1}", "{0} fichiers dans {1}"]),
        ],
        plural_rule=plural_rule_for("fr"),
    )
    return ResolutionEngine(InMemoryDictionaryProvider([fr]))


class TestLookup:
    """Indexing and formatted lookup."""

    def test_getitem(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "fr-CA")
        assert T["Open"].value == "Ouvrir"

    def test_getitem_with_context(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "fr", context="menu")
        assert T["Open"].value == "Ouvrir…"

    def test_getitem_none_raises(self, engine: ResolutionEngine) -> None:
        with pytest.raises(InvalidArgumentError):
            StringLocalizer(engine, "fr")[None]  # type: ignore[index]

    def test_get_formats(self, engine: ResolutionEngine) -> None:
        assert StringLocalizer(engine, "fr").get("Hello {0}", "Anna").value == "Bonjour Anna"

    def test_get_missing_formats_name(self, engine: ResolutionEngine) -> None:
        result = StringLocalizer(engine, "de").get("Hello {0}", "Anna")
        assert result.value == "Hello Anna"
        assert result.resource_not_found is True

    def test_get_default(self, engine: ResolutionEngine) -> None:
        result = StringLocalizer(engine, "de").get("greeting.key", default="Hi")
        assert result.value == "Hi"


class TestPlural:
    """Pluralized lookups."""

    def test_plural_from_dictionary(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "fr")
        assert str(T.plural(0, "{0} file", "{0} files")) == "0 fichier"
        assert str(T.plural(4, "{0} file", "{0} files")) == "4 fichiers"

    def test_plural_extra_arguments(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "fr")
        assert str(T.plural(2, "{0} file in {1}", "{0} files in {1}", "docs")) == "2 fichiers dans docs"

    def test_plural_default_forms(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "en")
        assert str(T.plural(1, "{0} book", "{0} books")) == "1 book"
        assert str(T.plural(3, "{0} book", "{0} books")) == "3 books"

    def test_plural_forms_many(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "ru")
        forms = ("{0} книга", "{0} книги", "{0} книг")
        assert str(T.plural_forms(2, forms)) == "2 книги"
        assert str(T.plural_forms(5, forms)) == "5 книг"

    def test_plural_forms_empty(self, engine: ResolutionEngine) -> None:
        with pytest.raises(InvalidArgumentError):
            StringLocalizer(engine, "ru").plural_forms(2, ())


class TestBinding:
    """Culture/context binding."""

    def test_system_culture_default(
        self, engine: ResolutionEngine, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("culturelex.localizer.get_system_culture", lambda: "fr_FR")
        assert StringLocalizer(engine).culture == "fr_FR"

    def test_with_culture_keeps_context(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "de", context="menu").with_culture("fr")
        assert T.culture == "fr"
        assert T.context == "menu"
        assert T["Open"].value == "Ouvrir…"

    def test_with_context(self, engine: ResolutionEngine) -> None:
        T = StringLocalizer(engine, "fr", context="menu").with_context(None)
        assert T.context is None
        assert T["Open"].value == "Ouvrir"

    def test_empty_context_is_none(self, engine: ResolutionEngine) -> None:
        assert StringLocalizer(engine, "fr", context="").context is None

    def test_repr(self, engine: ResolutionEngine) -> None:
        assert repr(StringLocalizer(engine, "fr-CA")) == "StringLocalizer(culture='fr_CA', context=None)"

    def test_get_all_strings(self, engine: ResolutionEngine) -> None:
        names = {s.name for s in StringLocalizer(engine, "fr-CA").get_all_strings(True)}
        assert "Hello {0}" in names
        assert list(StringLocalizer(engine, "fr-CA").get_all_strings()) == []
