"""Culture- and context-bound localizer facade.

StringLocalizer binds a ResolutionEngine to one culture and an optional
context, the shape application code usually wants:

    T = StringLocalizer(engine, "fr-CA", context="checkout")
    T["Pay now"]                                   # simple lookup
    T.get("Hello {0}", user.name)                  # formatted lookup
    T.plural(n, "{0} item", "{0} items")           # pluralized lookup

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from culturelex.culture import get_system_culture, normalize_culture
from culturelex.errors import InvalidArgumentError
from culturelex.types import PluralRequest, SimpleRequest

if TYPE_CHECKING:
    from culturelex.engine import ResolutionEngine
    from culturelex.types import CultureCode, LocalizedString, MessageName

__all__ = ["StringLocalizer"]


class StringLocalizer:
    """Localizer bound to a culture and an optional context.

    Immutable: with_culture() and with_context() return new instances.

    Attributes:
        culture: Normalized culture used for every lookup
        context: Context used for every lookup (None for no context)
    """

    __slots__ = ("_context", "_culture", "_engine")

    def __init__(
        self,
        engine: ResolutionEngine,
        culture: CultureCode | None = None,
        *,
        context: str | None = None,
    ) -> None:
        """Initialize the localizer.

        Args:
            engine: Engine performing the lookups
            culture: Target culture (default: detected system culture)
            context: Optional disambiguation context
        """
        self._engine = engine
        self._culture = normalize_culture(culture if culture is not None else get_system_culture())
        self._context = context or None

    @property
    def culture(self) -> CultureCode:
        """Culture used for every lookup."""
        return self._culture

    @property
    def context(self) -> str | None:
        """Context used for every lookup."""
        return self._context

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"StringLocalizer(culture={self._culture!r}, context={self._context!r})"

    def with_culture(self, culture: CultureCode) -> StringLocalizer:
        """Return a localizer for another culture, keeping the context."""
        return StringLocalizer(self._engine, culture, context=self._context)

    def with_context(self, context: str | None) -> StringLocalizer:
        """Return a localizer for another context, keeping the culture."""
        return StringLocalizer(self._engine, self._culture, context=context)

    def __getitem__(self, name: MessageName) -> LocalizedString:
        """Look up a message without arguments or formatting.

        Raises:
            InvalidArgumentError: If name is None
        """
        return self._engine.resolve(name, self._context, culture=self._culture)

    def get(
        self, name: MessageName, *arguments: object, default: str | None = None
    ) -> LocalizedString:
        """Look up a message and format it with positional arguments.

        Args:
            name: Message name
            *arguments: Values for ``{0}``, ``{1}``...
            default: Text used when no translation exists

        Returns:
            LocalizedString with formatted value
        """
        request = SimpleRequest(name, self._context, tuple(arguments), default)
        return self._engine.format(request, self._culture)

    def plural(
        self, count: int, singular: str, plural: str, *arguments: object
    ) -> LocalizedString:
        """Look up a pluralized message named by its singular form.

        ``singular`` and ``plural`` double as the default forms when no
        dictionary has a translation. ``{0}`` is the count, extra arguments
        follow as ``{1}``, ``{2}``...

        Example:
            >>> str(T.plural(3, "{0} file", "{0} files"))
            '3 files'
        """
        return self.plural_forms(count, (singular, plural), *arguments)

    def plural_forms(
        self, count: int, forms: Sequence[str], *arguments: object
    ) -> LocalizedString:
        """Look up a pluralized message named by its first form.

        Use this for languages with more than two default forms.

        Raises:
            InvalidArgumentError: If forms is empty
        """
        if not forms:
            msg = "At least one plural form is required"
            raise InvalidArgumentError(msg)
        request = PluralRequest(
            forms[0],
            count,
            tuple(forms),
            context=self._context,
            extra_arguments=tuple(arguments),
        )
        return self._engine.format(request, self._culture)

    def get_all_strings(self, include_ancestors: bool = False) -> Iterator[LocalizedString]:
        """Enumerate translations visible from the bound culture."""
        return self._engine.get_all_strings(self._culture, include_ancestors)
