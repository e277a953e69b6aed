"""Culture identifiers and the culture hierarchy.

Centralizes culture code normalization and the parent relation used for
hierarchy walks. Cultures are normalized to POSIX form (underscores) at
every public boundary so dictionary lookups and cache keys agree.

The hierarchy is derived from subtags: each step drops the last subtag
until the root culture ("") is reached. The root is its own parent, which
is the termination condition for every walk.

    zh-Hant-TW -> zh_Hant -> zh -> ""

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from culturelex.constants import DEFAULT_SYSTEM_CULTURE, ROOT_CULTURE

if TYPE_CHECKING:
    from babel import Locale

    from culturelex.types import CultureCode

__all__ = [
    "culture_ancestry",
    "get_babel_locale",
    "get_system_culture",
    "is_root",
    "normalize_culture",
    "parent_culture",
]


def normalize_culture(culture: CultureCode | None) -> CultureCode:
    """Convert a BCP-47 culture code to POSIX format.

    BCP-47 uses hyphens (fr-CA), while Babel/POSIX uses underscores (fr_CA).
    Surrounding whitespace is stripped. None maps to the root culture.

    Args:
        culture: Culture code (e.g., "fr-CA", "pt_BR", "")

    Returns:
        POSIX-formatted culture code

    Example:
        >>> normalize_culture("fr-CA")
        'fr_CA'
        >>> normalize_culture("en")
        'en'
    """
    if culture is None:
        return ROOT_CULTURE
    return culture.strip().replace("-", "_")


def is_root(culture: CultureCode) -> bool:
    """Check whether a culture is the root of the hierarchy."""
    return normalize_culture(culture) == ROOT_CULTURE


def parent_culture(culture: CultureCode) -> CultureCode:
    """Return the parent culture by dropping the last subtag.

    Args:
        culture: Culture code in BCP-47 or POSIX form

    Returns:
        Normalized parent culture. The root culture is its own parent.

    Example:
        >>> parent_culture("fr-CA")
        'fr'
        >>> parent_culture("fr")
        ''
        >>> parent_culture("")
        ''
    """
    normalized = normalize_culture(culture)
    head, _, _ = normalized.rpartition("_")
    return head


def culture_ancestry(culture: CultureCode) -> tuple[CultureCode, ...]:
    """Return the culture followed by all of its ancestors.

    The walk stops at the root culture, which is included exactly once.

    Example:
        >>> culture_ancestry("fr-CA")
        ('fr_CA', 'fr', '')
    """
    current = normalize_culture(culture)
    chain = [current]
    while (parent := parent_culture(current)) != current:
        chain.append(parent)
        current = parent
    return tuple(chain)


@functools.lru_cache(maxsize=128)
def get_babel_locale(culture: CultureCode) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        culture: Culture code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If the culture is not recognized
        ValueError: If the culture code is malformed or the root culture
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_culture(culture)
    if not normalized:
        msg = "The root culture has no Babel locale"
        raise ValueError(msg)
    return Locale.parse(normalized)


def get_system_culture(*, raise_on_failure: bool = False) -> CultureCode:
    """Detect the system culture from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Args:
        raise_on_failure: If True, raise RuntimeError when the culture cannot
            be determined. If False (default), return "en_US".

    Returns:
        Detected culture code in POSIX format

    Raises:
        RuntimeError: If raise_on_failure is True and nothing is detected
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_culture(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            return normalize_culture(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system culture. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_SYSTEM_CULTURE
