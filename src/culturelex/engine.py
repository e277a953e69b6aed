"""Translation resolution with context and culture fallback.

ResolutionEngine turns a message name, an optional context, an optional
count and a culture into text. The search is an explicit, finite list of
fallback tiers:

    1. (context, culture)
    2. (context, parent culture)      - if fallback_to_parent
    3. (None,    culture)             - if a context was given
    4. (None,    parent culture)      - if a context was given and 2 applies

An exact-context miss degrades to the context-less lookup, never the
reverse. The first tier whose dictionary has the key wins.

Missing translations are a normal outcome: the result echoes the name and
sets resource_not_found. Only a None name raises (InvalidArgumentError).
A culture without a plural rule turns its tier into a miss.

The engine holds no mutable state and takes no locks; all data comes from
the DictionaryProvider, which is consulted on every tier.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from culturelex.config import ResolverConfig
from culturelex.culture import normalize_culture
from culturelex.enums import ResolutionSource
from culturelex.errors import InvalidArgumentError, PluralRuleMissingError
from culturelex.formatting import format_positional, splice_count
from culturelex.keys import split_key, translation_key
from culturelex.plural_rules import default_plural_rule, plural_rule_for, select_form
from culturelex.types import (
    FallbackTier,
    LocalizedString,
    PluralRequest,
    SimpleRequest,
)

if TYPE_CHECKING:
    from culturelex.providers import DictionaryProvider
    from culturelex.types import (
        CultureCode,
        MessageName,
        PluralRule,
        TranslationRequest,
    )

__all__ = ["ResolutionEngine"]


class ResolutionEngine:
    """Resolves messages against culture dictionaries.

    Safe for unlimited concurrent use: every call works on local state and
    the immutable dictionaries handed out by the provider.

    Example:
        >>> provider = provider_from_mapping({
        ...     "en": {"cart.items": ["You have {0} item", "You have {0} items"]},
        ... })
        >>> engine = ResolutionEngine(provider)
        >>> str(engine.format(PluralRequest("cart.items", 5), "en"))
        'You have 5 items'
    """

    __slots__ = ("_config", "_logger", "_provider")

    def __init__(
        self,
        provider: DictionaryProvider,
        *,
        config: ResolverConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            provider: Source of culture dictionaries
            config: Resolution configuration (default: ResolverConfig())
            logger: Logger for diagnostics (default: this module's logger,
                silent unless the application configures logging)
        """
        self._provider = provider
        self._config = config if config is not None else ResolverConfig()
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def provider(self) -> DictionaryProvider:
        """Dictionary provider consulted on every tier."""
        return self._provider

    @property
    def config(self) -> ResolverConfig:
        """Immutable resolution configuration."""
        return self._config

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"ResolutionEngine(provider={self._provider!r}, "
            f"fallback_to_parent={self._config.fallback_to_parent})"
        )

    # ------------------------------------------------------------------
    # Fallback tiers
    # ------------------------------------------------------------------

    def _tier_cultures(self, culture: CultureCode) -> tuple[CultureCode, ...]:
        normalized = normalize_culture(culture)
        if not self._config.fallback_to_parent:
            return (normalized,)
        parent = normalize_culture(self._config.parent_of(normalized))
        if parent == normalized:
            return (normalized,)
        return (normalized, parent)

    def fallback_tiers(
        self, context: str | None, culture: CultureCode
    ) -> tuple[FallbackTier, ...]:
        """Return the ordered (context, culture) combinations to try.

        Every context-specific tier comes before every context-less tier.

        Example:
            >>> engine.fallback_tiers("menu", "fr-CA")
            (FallbackTier(context='menu', culture='fr_CA'),
             FallbackTier(context='menu', culture='fr'),
             FallbackTier(context=None, culture='fr_CA'),
             FallbackTier(context=None, culture='fr'))
        """
        cultures = self._tier_cultures(culture)
        contexts: tuple[str | None, ...] = (context, None) if context else (None,)
        return tuple(
            FallbackTier(tier_context, tier_culture)
            for tier_context in contexts
            for tier_culture in cultures
        )

    def _search(
        self,
        name: MessageName,
        context: str | None,
        culture: CultureCode,
        count: int | None,
    ) -> tuple[str, FallbackTier] | None:
        keys: dict[str | None, str] = {}
        for tier in self.fallback_tiers(context, culture):
            dictionary = self._provider.get_dictionary(tier.culture)
            if dictionary is None:
                continue

            key = keys.get(tier.context)
            if key is None:
                key = keys[tier.context] = translation_key(name, tier.context)

            try:
                text = dictionary.lookup(key, count, log=self._logger)
            except PluralRuleMissingError as e:
                self._logger.warning("%s; skipping tier %s", e, tier)
                continue

            if text is not None:
                self._logger.debug("Resolved %r on tier %s", name, tier)
                return text, tier
        return None

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def resolve(
        self,
        name: MessageName,
        context: str | None = None,
        *,
        culture: CultureCode,
        count: int | None = None,
    ) -> LocalizedString:
        """Resolve a message through the fallback tiers.

        Args:
            name: Message name
            context: Optional disambiguation context
            culture: Target culture
            count: Quantity for plural selection, or None for form 0

        Returns:
            LocalizedString. When nothing is found, value is the name and
            resource_not_found is True.

        Raises:
            InvalidArgumentError: If name is None
        """
        if name is None:
            msg = "name is required"
            raise InvalidArgumentError(msg)

        found = self._search(name, context, culture, count)
        if found is None:
            return LocalizedString(
                name,
                name,
                resource_not_found=True,
                context=context or None,
                source=ResolutionSource.NAME,
            )

        text, tier = found
        return LocalizedString(
            name,
            text,
            context=tier.context,
            culture=tier.culture,
            source=ResolutionSource.DICTIONARY,
        )

    def get_translation(
        self, request: TranslationRequest, culture: CultureCode
    ) -> tuple[LocalizedString, tuple[object, ...]]:
        """Resolve a request and return its template with final arguments.

        SimpleRequest: arguments pass through unchanged; ``default`` is used
        when every tier misses.

        PluralRequest: the count is spliced in front of the extra arguments.
        When every tier misses, the request's literal forms are used with
        the plural rule of the nearest dictionary (or Babel's rule for the
        culture, or a one/other rule).

        Args:
            request: SimpleRequest or PluralRequest
            culture: Target culture

        Returns:
            (LocalizedString with the unformatted template, final arguments)

        Raises:
            InvalidArgumentError: If the request name is None
            TypeError: If request is neither SimpleRequest nor PluralRequest
        """
        match request:
            case SimpleRequest(name=name, context=context, arguments=arguments, default=default):
                result = self.resolve(name, context, culture=culture)
                if result.resource_not_found and default is not None:
                    result = LocalizedString(
                        name,
                        default,
                        context=context or None,
                        source=ResolutionSource.DEFAULT,
                    )
                return result, tuple(arguments)

            case PluralRequest(
                name=name,
                count=count,
                forms=forms,
                context=context,
                extra_arguments=extra_arguments,
            ):
                final_arguments = splice_count(count, extra_arguments)
                result = self.resolve(name, context, culture=culture, count=count)
                if result.resource_not_found and forms:
                    text = select_form(
                        forms,
                        self._literal_forms_rule(culture),
                        count,
                        culture=normalize_culture(culture),
                        log=self._logger,
                    )
                    result = LocalizedString(
                        name,
                        text,
                        context=context or None,
                        source=ResolutionSource.DEFAULT,
                    )
                return result, final_arguments

            case _:
                msg = f"Unsupported request type: {type(request).__name__}"
                raise TypeError(msg)

    def _literal_forms_rule(self, culture: CultureCode) -> PluralRule:
        for tier_culture in self._tier_cultures(culture):
            dictionary = self._provider.get_dictionary(tier_culture)
            if dictionary is not None and dictionary.plural_rule is not None:
                return dictionary.plural_rule
        try:
            return plural_rule_for(normalize_culture(culture))
        except PluralRuleMissingError as e:
            self._logger.warning("%s; using one/other rule for default forms", e)
            return default_plural_rule

    def format(self, request: TranslationRequest, culture: CultureCode) -> LocalizedString:
        """Resolve a request and substitute its arguments into the template.

        Args:
            request: SimpleRequest or PluralRequest
            culture: Target culture

        Returns:
            LocalizedString whose value is the formatted text

        Example:
            >>> str(engine.format(PluralRequest("cart.items", 1), "en"))
            'You have 1 item'
        """
        result, arguments = self.get_translation(request, culture)
        formatted = format_positional(result.value, arguments, log=self._logger)
        return dataclasses.replace(result, value=formatted)

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def _ancestry(self, culture: CultureCode) -> Iterator[CultureCode]:
        current = normalize_culture(culture)
        visited: set[CultureCode] = set()
        while current not in visited:
            visited.add(current)
            yield current
            current = normalize_culture(self._config.parent_of(current))

    def get_all_strings(
        self, culture: CultureCode, include_ancestors: bool = False
    ) -> Iterator[LocalizedString]:
        """Enumerate all translations visible from a culture.

        Each entry uses plural form 0 as its representative text. With
        include_ancestors, the walk continues through every parent up to
        and including the root; a key already produced by a more specific
        culture is never produced again.

        The sequence is lazy and recomputed on every call.

        Args:
            culture: Culture to enumerate
            include_ancestors: Also enumerate parent cultures

        Yields:
            LocalizedString per distinct (name, context)

        Example:
            >>> {s.name: s.value for s in engine.get_all_strings("fr-CA", True)}
            {'hello': 'Allô', 'bye': 'Au revoir'}
        """
        cultures = (
            self._ancestry(culture) if include_ancestors else iter((normalize_culture(culture),))
        )
        seen: set[str] = set()
        for current in cultures:
            dictionary = self._provider.get_dictionary(current)
            if dictionary is None:
                continue
            for key, forms in dictionary.items():
                if key in seen or not forms[0]:
                    continue
                seen.add(key)
                name, context = split_key(key)
                yield LocalizedString(
                    name,
                    forms[0],
                    context=context,
                    culture=dictionary.culture,
                    source=ResolutionSource.DICTIONARY,
                )
