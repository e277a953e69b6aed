"""culturelex - translation resolution with context, culture and plural fallback.

Resolves a message name (optionally disambiguated by a context and
pluralized by a count) against per-culture dictionaries, falling back
from a context to no context and from a culture to its parent, and
selecting the plural form the culture's grammar requires.

Public API:
    ResolutionEngine - Fallback search, plural selection, enumeration
    ResolverConfig - Immutable engine configuration
    StringLocalizer - Culture/context bound facade
    CultureDictionary - Immutable per-culture translation table
    DictionaryProvider - Protocol for dictionary lookup
    InMemoryDictionaryProvider, CatalogDictionaryProvider - Providers
    SimpleRequest, PluralRequest - Lookup requests
    LocalizedString - Lookup result
    translation_key, split_key - Composite key helpers

Exceptions:
    CultureLexError - Base exception class
    InvalidArgumentError - Missing name or forms
    PluralRuleMissingError - No plural rule for a culture
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import ResolverConfig
from .culture import culture_ancestry, normalize_culture, parent_culture
from .dictionary import CultureDictionary
from .engine import ResolutionEngine
from .enums import LoadStatus, ResolutionSource
from .errors import CultureLexError, InvalidArgumentError, PluralRuleMissingError
from .keys import split_key, translation_key
from .localizer import StringLocalizer
from .plural_rules import plural_rule_for, select_form
from .providers import (
    CatalogDictionaryProvider,
    DictionaryProvider,
    InMemoryDictionaryProvider,
    provider_from_mapping,
)
from .types import FallbackTier, LocalizedString, PluralRequest, SimpleRequest

try:
    __version__ = _get_version("culturelex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Library logging stays silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CatalogDictionaryProvider",
    "CultureDictionary",
    "CultureLexError",
    "DictionaryProvider",
    "FallbackTier",
    "InMemoryDictionaryProvider",
    "InvalidArgumentError",
    "LoadStatus",
    "LocalizedString",
    "PluralRequest",
    "PluralRuleMissingError",
    "ResolutionEngine",
    "ResolutionSource",
    "ResolverConfig",
    "SimpleRequest",
    "StringLocalizer",
    "__version__",
    "culture_ancestry",
    "normalize_culture",
    "parent_culture",
    "plural_rule_for",
    "provider_from_mapping",
    "select_form",
    "split_key",
    "translation_key",
]
