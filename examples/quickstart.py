"""Quickstart example for culturelex.

This example demonstrates message resolution with context, parent-culture
and plural fallback, first from in-memory dictionaries and then from
gettext PO catalogs on disk.

Note: Examples print resolved values only. In production, check
resource_not_found and log missing translations.
"""

import logging
import tempfile
from pathlib import Path

from culturelex import (
    CatalogDictionaryProvider,
    CultureDictionary,
    InMemoryDictionaryProvider,
    PluralRequest,
    ResolutionEngine,
    StringLocalizer,
    plural_rule_for,
)

logging.basicConfig(level=logging.WARNING)

# Example 1: Context and parent-culture fallback
print("=" * 50)
print("Example 1: Context and Culture Fallback")
print("=" * 50)

provider = InMemoryDictionaryProvider([
    CultureDictionary.from_entries(
        "fr",
        [
            ("Open", None, ["Ouvrir"]),
            ("Open", "menu", ["Ouvrir…"]),
            ("cart.items", None, ["Vous avez {0} article", "Vous avez {0} articles"]),
        ],
        plural_rule=plural_rule_for("fr"),
    ),
    CultureDictionary.from_entries("fr-CA", [("Hello", None, ["Allô"])]),
])
engine = ResolutionEngine(provider)

print(engine.resolve("Hello", culture="fr-CA"))
# Output: Allô
print(engine.resolve("Open", "menu", culture="fr-CA"))
# Output: Ouvrir…  (parent culture, exact context)
print(engine.resolve("Open", "toolbar", culture="fr-CA"))
# Output: Ouvrir  (context dropped)
print(engine.resolve("Missing", culture="fr-CA").resource_not_found)
# Output: True

# Example 2: Plurals
print("\n" + "=" * 50)
print("Example 2: Plurals")
print("=" * 50)

for count in (0, 1, 5):
    print(engine.format(PluralRequest("cart.items", count), "fr-CA"))
# Output: Vous avez 0 article / Vous avez 1 article / Vous avez 5 articles

T = StringLocalizer(engine, "ru")
for count in (1, 3, 7):
    print(T.plural_forms(count, ("{0} файл", "{0} файла", "{0} файлов")))
# Output: 1 файл / 3 файла / 7 файлов  (inline default forms, Babel rule)

# Example 3: Enumeration across the hierarchy
print("\n" + "=" * 50)
print("Example 3: All Strings")
print("=" * 50)

for entry in engine.get_all_strings("fr-CA", include_ancestors=True):
    print(f"{entry.name!r} [{entry.context}] = {entry.value!r} ({entry.culture})")

# Example 4: PO catalogs
print("\n" + "=" * 50)
print("Example 4: PO Catalogs")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    de_dir = Path(tmp) / "de"
    de_dir.mkdir()
    (de_dir / "messages.po").write_text(
        'msgid ""\n'
        'msgstr ""\n'
        '"Content-Type: text/plain; charset=UTF-8\\n"\n'
        '"Plural-Forms: nplurals=2; plural=(n != 1);\\n"\n'
        "\n"
        'msgid "{0} book"\n'
        'msgid_plural "{0} books"\n'
        'msgstr[0] "{0} Buch"\n'
        'msgstr[1] "{0} Bücher"\n',
        encoding="utf-8",
    )
    catalogs = CatalogDictionaryProvider(str(Path(tmp) / "{culture}"))
    T = StringLocalizer(ResolutionEngine(catalogs), "de-AT")
    print(T.plural(1, "{0} book", "{0} books"))
    # Output: 1 Buch
    print(T.plural(4, "{0} book", "{0} books"))
    # Output: 4 Bücher
