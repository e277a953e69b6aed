"""Value types for the resolution domain.

Provides semantic type aliases plus the immutable request and result
records exchanged with ResolutionEngine.

Requests are an explicit tagged variant: callers construct either a
SimpleRequest or a PluralRequest. The engine never inspects argument
contents to guess which kind of lookup is wanted.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from culturelex.enums import ResolutionSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CultureCode",
    "MessageName",
    "PluralRule",
    "TranslationKey",
    # Requests
    "PluralRequest",
    "SimpleRequest",
    "TranslationRequest",
    # Results
    "FallbackTier",
    "LocalizedString",
]

type CultureCode = str
"""Culture identifier (e.g., 'fr-CA', 'fr_CA', 'zh_Hant_TW', '' for root)."""

type MessageName = str
"""Untranslated message name, usually the source-language text."""

type TranslationKey = str
"""Composite dictionary key built from (name, context) by translation_key()."""

type PluralRule = Callable[[int], int]
"""Maps an integer quantity to a zero-based plural form index."""


@dataclass(frozen=True, slots=True)
class SimpleRequest:
    """Plain (optionally parameterized) lookup.

    Attributes:
        name: Message name to translate
        context: Optional disambiguation context
        arguments: Positional formatting arguments, passed through unchanged
        default: Text used when every fallback tier misses (optional)
    """

    name: MessageName
    context: str | None = None
    arguments: tuple[object, ...] = ()
    default: str | None = None


@dataclass(frozen=True, slots=True)
class PluralRequest:
    """Pluralized lookup.

    The count is always injected as the first positional argument, so a
    template refers to it as ``{0}`` and to extra arguments as ``{1}``...

    Attributes:
        name: Message name to translate
        count: Quantity driving plural form selection
        forms: Literal plural forms used when no dictionary has the name
        context: Optional disambiguation context
        extra_arguments: Formatting arguments following the count
    """

    name: MessageName
    count: int
    forms: tuple[str, ...] = ()
    context: str | None = None
    extra_arguments: tuple[object, ...] = ()


type TranslationRequest = SimpleRequest | PluralRequest
"""Either kind of lookup accepted by ResolutionEngine.get_translation()."""


@dataclass(frozen=True, slots=True)
class FallbackTier:
    """One attempt in the ordered fallback search.

    Attributes:
        context: Context tried on this tier (None for context-less lookup)
        culture: Normalized culture whose dictionary is consulted
    """

    context: str | None
    culture: CultureCode


@dataclass(frozen=True, slots=True)
class LocalizedString:
    """Result of resolving a message.

    ``value`` is never empty because of a missing translation: when nothing
    is found it echoes ``name``.

    Attributes:
        name: Requested message name
        value: Resolved (or echoed) text
        resource_not_found: True when no translation or default was found
        context: Context of the entry that supplied the value
        culture: Culture whose dictionary supplied the value (None otherwise)
        source: Where the value came from
    """

    name: MessageName
    value: str
    resource_not_found: bool = False
    context: str | None = None
    culture: CultureCode | None = None
    source: ResolutionSource = ResolutionSource.DICTIONARY

    def __str__(self) -> str:
        """Return the resolved text."""
        return self.value
