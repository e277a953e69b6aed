"""Dictionary providers: the data-fetch boundary of the resolution engine.

Components:
    DictionaryProvider - Protocol for culture dictionary lookup (structural typing)
    InMemoryDictionaryProvider - Provider over prebuilt CultureDictionary objects
    CatalogDictionaryProvider - Loads gettext PO catalogs from disk via Babel
    ResourceLoadResult - Immutable result of a single catalog load attempt

Providers own all mutable state (loaded dictionaries). The engine calls
get_dictionary() on every fallback tier, so providers memoize.

Python 3.13+. Depends on Babel for PO catalog parsing.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from babel.core import UnknownLocaleError
from babel.messages.pofile import read_po

from culturelex.culture import get_babel_locale, normalize_culture
from culturelex.dictionary import CultureDictionary
from culturelex.enums import LoadStatus
from culturelex.errors import PluralRuleMissingError
from culturelex.plural_rules import plural_rule_for, rule_from_expression

if TYPE_CHECKING:
    from babel import Locale
    from babel.messages.catalog import Catalog

    from culturelex.types import CultureCode, MessageName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "DictionaryProvider",
    # Concrete providers
    "InMemoryDictionaryProvider",
    "CatalogDictionaryProvider",
    "provider_from_mapping",
    # Load result types
    "ResourceLoadResult",
]

logger = logging.getLogger(__name__)


class DictionaryProvider(Protocol):
    """Protocol for fetching the dictionary of a culture.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom providers.

    Example:
        >>> class StaticProvider:
        ...     def get_dictionary(self, culture: str) -> CultureDictionary | None:
        ...         return DICTIONARIES.get(culture)
    """

    def get_dictionary(self, culture: CultureCode) -> CultureDictionary | None:
        """Return the dictionary for a culture.

        Must be cheap to call repeatedly. Exceptions propagate to the caller
        of the engine unchanged.

        Args:
            culture: Normalized culture code

        Returns:
            Dictionary for the culture, or None if no data exists
        """


class InMemoryDictionaryProvider:
    """Provider backed by prebuilt CultureDictionary objects.

    Thread-safe: additions are serialized with a lock, reads see a
    consistent snapshot of the mapping.

    Example:
        >>> provider = InMemoryDictionaryProvider([
        ...     CultureDictionary.from_entries("fr", [("hello", None, ["bonjour"])]),
        ... ])
        >>> provider.get_dictionary("fr").lookup("hello")
        'bonjour'
    """

    __slots__ = ("_dictionaries", "_lock")

    def __init__(self, dictionaries: Iterable[CultureDictionary] = ()) -> None:
        """Initialize the provider.

        Args:
            dictionaries: Dictionaries to register; later ones replace
                earlier ones for the same culture
        """
        self._lock = threading.Lock()
        self._dictionaries: dict[CultureCode, CultureDictionary] = {}
        for dictionary in dictionaries:
            self._dictionaries[dictionary.culture] = dictionary

    def add(self, dictionary: CultureDictionary) -> None:
        """Register (or replace) the dictionary of a culture."""
        with self._lock:
            updated = dict(self._dictionaries)
            updated[dictionary.culture] = dictionary
            self._dictionaries = updated

    @property
    def cultures(self) -> tuple[CultureCode, ...]:
        """Cultures with a registered dictionary."""
        return tuple(self._dictionaries)

    def get_dictionary(self, culture: CultureCode) -> CultureDictionary | None:
        """Return the registered dictionary for a culture, or None."""
        return self._dictionaries.get(normalize_culture(culture))


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single catalog resource.

    Attributes:
        culture: Culture code for this resource
        resource_id: Resource identifier (e.g., 'messages.po')
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to resource (if available)
    """

    culture: CultureCode
    resource_id: str
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if resource loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if resource was not found (expected for optional cultures)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if resource load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(slots=True, eq=False)
class CatalogDictionaryProvider:
    """Loads culture dictionaries from gettext PO catalogs on disk.

    Uses a {culture} placeholder in the path template. Each culture's
    resources are read in order and merged; a later resource overrides
    earlier ones for the same (msgid, msgctxt). Obsolete and untranslated
    entries are skipped. The plural rule comes from the catalog's
    ``Plural-Forms`` header, or from Babel's default for the culture.

    Loaded dictionaries (and misses) are memoized for the lifetime of the
    provider. There is no invalidation.

    Security:
        Culture codes containing path separators or ".." are rejected.
        Resource IDs containing ".." or absolute paths are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> provider = CatalogDictionaryProvider("locales/{culture}")
        >>> fr = provider.get_dictionary("fr-CA")
        # Loads from: locales/fr_CA/messages.po

    Attributes:
        base_path: Path template with {culture} placeholder
        resource_ids: Catalog file names loaded for every culture
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    resource_ids: tuple[str, ...] = ("messages.po",)
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)
    _cache: dict[CultureCode, CultureDictionary | None] = field(
        init=False, repr=False, default_factory=dict
    )
    _load_results: list[ResourceLoadResult] = field(
        init=False, repr=False, default_factory=list
    )
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        """Validate the template and cache the resolved root directory.

        Raises:
            ValueError: If base_path lacks the {culture} placeholder or no
                resource ids are given
        """
        if "{culture}" not in self.base_path:
            msg = (
                f"base_path must contain '{{culture}}' placeholder for culture substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)
        self.resource_ids = tuple(self.resource_ids)
        if not self.resource_ids:
            msg = "At least one resource id is required"
            raise ValueError(msg)
        for resource_id in self.resource_ids:
            self._validate_resource_id(resource_id)

        if self.root_dir is not None:
            self._resolved_root = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{culture}")[0].rstrip("/\\")
            self._resolved_root = (
                Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
            )

    @staticmethod
    def _validate_culture(culture: CultureCode) -> None:
        if ".." in culture:
            msg = f"Path traversal sequences not allowed in culture: '{culture}'"
            raise ValueError(msg)
        if "/" in culture or "\\" in culture:
            msg = f"Path separators not allowed in culture: '{culture}'"
            raise ValueError(msg)

    @staticmethod
    def _validate_resource_id(resource_id: str) -> None:
        if not resource_id or resource_id.strip() != resource_id:
            msg = f"Resource ID is empty or has surrounding whitespace: {resource_id!r}"
            raise ValueError(msg)
        if Path(resource_id).is_absolute() or resource_id.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)
        if ".." in resource_id:
            msg = f"Path traversal sequences not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)

    def describe_path(self, culture: CultureCode, resource_id: str) -> str:
        """Return the human-readable path of a culture's resource."""
        return f"{self.base_path.replace('{culture}', culture)}/{resource_id}"

    @property
    def load_results(self) -> tuple[ResourceLoadResult, ...]:
        """All load attempts made so far, in order."""
        with self._lock:
            return tuple(self._load_results)

    def get_dictionary(self, culture: CultureCode) -> CultureDictionary | None:
        """Return the dictionary of a culture, loading it on first access.

        The root culture has no catalog directory and always yields None.

        Raises:
            ValueError: If the culture code contains unsafe path components
        """
        normalized = normalize_culture(culture)
        if not normalized:
            return None
        self._validate_culture(normalized)

        with self._lock:
            if normalized in self._cache:
                return self._cache[normalized]
            dictionary = self._load_culture(normalized)
            self._cache[normalized] = dictionary
            return dictionary

    def _load_culture(self, culture: CultureCode) -> CultureDictionary | None:
        locale_obj = _babel_locale_or_none(culture)
        entries: list[tuple[MessageName, str | None, tuple[str, ...]]] = []
        plural_expr: str | None = None

        for resource_id in self.resource_ids:
            source_path = self.describe_path(culture, resource_id)
            full_path = (Path(self.base_path.replace("{culture}", culture)) / resource_id).resolve()
            try:
                full_path.relative_to(self._resolved_root)
            except ValueError:
                msg = (
                    f"Path traversal detected: resolved path escapes root directory. "
                    f"culture='{culture}', resource_id='{resource_id}'"
                )
                raise ValueError(msg) from None

            try:
                with full_path.open("rb") as fileobj:
                    catalog = read_po(fileobj, locale=locale_obj, ignore_obsolete=True)
            except FileNotFoundError:
                logger.debug("Catalog not found: %s", source_path)
                self._load_results.append(
                    ResourceLoadResult(
                        culture,
                        resource_id,
                        LoadStatus.NOT_FOUND,
                        source_path=source_path,
                    )
                )
                continue
            except (OSError, ValueError) as e:
                logger.error("Failed to read catalog %s: %s", source_path, e)
                self._load_results.append(
                    ResourceLoadResult(
                        culture,
                        resource_id,
                        LoadStatus.ERROR,
                        error=e,
                        source_path=source_path,
                    )
                )
                continue

            entries.extend(_catalog_entries(catalog))
            plural_expr = catalog.plural_expr
            self._load_results.append(
                ResourceLoadResult(
                    culture,
                    resource_id,
                    LoadStatus.SUCCESS,
                    source_path=source_path,
                )
            )
            logger.debug("Loaded catalog %s (%d entries)", source_path, len(catalog))

        if plural_expr is None:
            return None
        return CultureDictionary.from_entries(
            culture, entries, plural_rule=rule_from_expression(plural_expr)
        )


def _babel_locale_or_none(culture: CultureCode) -> Locale | None:
    try:
        return get_babel_locale(culture)
    except (UnknownLocaleError, ValueError):
        logger.debug("No Babel locale for culture '%s'; using catalog headers only", culture)
        return None


def _catalog_entries(
    catalog: Catalog,
) -> Iterable[tuple[MessageName, str | None, tuple[str, ...]]]:
    for message in catalog:
        if not message.id:
            continue  # header
        if isinstance(message.id, tuple | list):
            name = message.id[0]
            forms = tuple(message.string or ())
        else:
            name = message.id
            forms = (message.string or "",)
        yield name, message.context, forms


def provider_from_mapping(
    translations: Mapping[CultureCode, Mapping[str, Iterable[str] | str]],
) -> InMemoryDictionaryProvider:
    """Build an InMemoryDictionaryProvider from plain nested mappings.

    Keys are message names (no context); values are a single string or a
    sequence of plural forms. Plural rules come from plural_rule_for(),
    or stay unset for cultures Babel does not know.

    Example:
        >>> provider = provider_from_mapping({"fr": {"hello": "bonjour"}})
    """
    dictionaries = []
    for culture, entries in translations.items():
        try:
            rule = plural_rule_for(culture)
        except PluralRuleMissingError:
            rule = None
        dictionaries.append(
            CultureDictionary.from_entries(
                culture,
                (
                    (name, None, (forms,) if isinstance(forms, str) else tuple(forms))
                    for name, forms in entries.items()
                ),
                plural_rule=rule,
            )
        )
    return InMemoryDictionaryProvider(dictionaries)
