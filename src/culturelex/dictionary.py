"""Immutable per-culture translation table.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from culturelex.culture import normalize_culture
from culturelex.keys import translation_key
from culturelex.plural_rules import select_form

if TYPE_CHECKING:
    from culturelex.types import CultureCode, MessageName, PluralRule, TranslationKey

__all__ = ["CultureDictionary"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CultureDictionary:
    """Translations for exactly one culture.

    Maps composite translation keys to ordered plural forms. Form 0 is the
    singular/default form; form i is the i-th grammatical plural form of the
    culture's plural rule.

    Instances are owned by a DictionaryProvider and never mutated after
    construction. The translations mapping is exposed read-only.

    Attributes:
        culture: Normalized culture code
        translations: Read-only mapping of key -> plural forms. Keys must
            already be encoded with translation_key(); a raw name containing
            a backslash is otherwise unreachable. Entries with no non-empty
            form are dropped.
        plural_rule: Rule for the culture, or None if no rule is known
            (counted lookups then raise PluralRuleMissingError)

    Example:
        >>> d = CultureDictionary.from_entries(
        ...     "en",
        ...     [("cart.items", None, ("You have {0} item", "You have {0} items"))],
        ...     plural_rule=lambda n: 0 if n == 1 else 1,
        ... )
        >>> d.lookup("cart.items", 5)
        'You have {0} items'
    """

    culture: CultureCode
    translations: Mapping[TranslationKey, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    plural_rule: PluralRule | None = None

    def __post_init__(self) -> None:
        """Normalize the culture and freeze the translations mapping."""
        object.__setattr__(self, "culture", normalize_culture(self.culture))
        frozen: dict[TranslationKey, tuple[str, ...]] = {}
        for key, forms in self.translations.items():
            form_tuple = tuple(forms)
            if not any(form_tuple):
                logger.debug("Dropping key with no translated form: %r", key)
                continue
            frozen[key] = form_tuple
        object.__setattr__(self, "translations", MappingProxyType(frozen))

    @classmethod
    def from_entries(
        cls,
        culture: CultureCode,
        entries: Iterable[tuple[MessageName, str | None, Iterable[str]]],
        plural_rule: PluralRule | None = None,
    ) -> CultureDictionary:
        """Build a dictionary from (name, context, forms) triples.

        Later entries for the same (name, context) replace earlier ones.
        Entries whose forms are all empty are skipped.

        Args:
            culture: Culture code
            entries: Iterable of (name, context, forms)
            plural_rule: Rule for the culture (optional)

        Returns:
            New CultureDictionary
        """
        translations: dict[TranslationKey, tuple[str, ...]] = {}
        for name, context, forms in entries:
            form_tuple = tuple(forms)
            if not any(form_tuple):
                logger.debug("Skipping untranslated entry: %r (context=%r)", name, context)
                continue
            translations[translation_key(name, context)] = form_tuple
        return cls(culture, translations, plural_rule)

    def lookup(
        self,
        key: TranslationKey,
        count: int | None = None,
        *,
        log: logging.Logger | None = None,
    ) -> str | None:
        """Look up the form for a key and optional count.

        Args:
            key: Composite key from translation_key()
            count: Quantity for plural selection, or None for form 0
            log: Logger for plural overflow diagnostics

        Returns:
            Selected form, or None if the key is absent or the selected
            form is untranslated (empty)

        Raises:
            PluralRuleMissingError: If count is given and no rule is known
        """
        forms = self.translations.get(key)
        if forms is None:
            return None
        text = select_form(forms, self.plural_rule, count, culture=self.culture, log=log)
        return text or None

    def forms(self, key: TranslationKey) -> tuple[str, ...] | None:
        """Return all plural forms for a key, or None if absent."""
        return self.translations.get(key)

    def keys(self) -> Iterator[TranslationKey]:
        """Iterate over translation keys in insertion order."""
        return iter(self.translations)

    def items(self) -> Iterator[tuple[TranslationKey, tuple[str, ...]]]:
        """Iterate over (key, forms) pairs in insertion order."""
        return iter(self.translations.items())

    def __contains__(self, key: object) -> bool:
        """Check whether a key has a translation."""
        return key in self.translations

    def __len__(self) -> int:
        """Number of translated keys."""
        return len(self.translations)
