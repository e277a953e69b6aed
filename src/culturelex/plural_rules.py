"""Plural rules and plural form selection.

A plural rule maps an integer count to a zero-based form index, in the
gettext ordering used by PO catalogs ("msgstr[0]", "msgstr[1]", ...).

Rules come from two places:
- A catalog's ``Plural-Forms`` header, compiled by rule_from_expression()
- Babel's gettext plural table for a culture, via plural_rule_for()

Form selection is lenient: a rule that claims more forms than a message
provides degrades to the last available form with a warning instead of
failing.

Python 3.13+. Depends on Babel for the gettext plural table.
"""

from __future__ import annotations

import functools
import gettext
import logging
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError
from babel.messages.plurals import get_plural

from culturelex.constants import DEFAULT_FORM_INDEX
from culturelex.culture import get_babel_locale, normalize_culture
from culturelex.errors import InvalidArgumentError, PluralRuleMissingError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from culturelex.types import CultureCode, PluralRule

__all__ = [
    "default_plural_rule",
    "plural_rule_for",
    "rule_from_expression",
    "select_form",
]

logger = logging.getLogger(__name__)


def default_plural_rule(count: int) -> int:
    """One/other rule used when nothing better is known.

    Returns 0 for a count of exactly one (either sign), 1 otherwise.
    """
    return DEFAULT_FORM_INDEX if abs(count) == 1 else 1


def rule_from_expression(expression: str) -> PluralRule:
    """Compile a gettext C plural expression into a rule.

    Args:
        expression: Expression over ``n`` (e.g., "(n != 1)")

    Returns:
        Callable mapping a count to a form index

    Raises:
        ValueError: If the expression is not a valid plural expression

    Example:
        >>> rule = rule_from_expression("(n != 1)")
        >>> rule(1), rule(5)
        (0, 1)
    """
    return gettext.c2py(expression)


@functools.lru_cache(maxsize=128)
def plural_rule_for(culture: CultureCode) -> PluralRule:
    """Look up the gettext plural rule for a culture using Babel.

    Babel falls back from a region-specific culture to its language
    (``pt_BR`` -> ``pt``) and to a two-form rule for languages missing
    from its table.

    Args:
        culture: Culture code (BCP-47 or POSIX)

    Returns:
        Plural rule for the culture

    Raises:
        PluralRuleMissingError: If Babel does not know the culture

    Example:
        >>> rule = plural_rule_for("ru")
        >>> [rule(n) for n in (1, 3, 5, 21)]
        [0, 1, 2, 0]
    """
    try:
        locale_obj = get_babel_locale(culture)
    except (UnknownLocaleError, ValueError) as e:
        raise PluralRuleMissingError(normalize_culture(culture)) from e
    return rule_from_expression(get_plural(locale_obj).plural_expr)


def select_form(
    forms: Sequence[str],
    plural_rule: PluralRule | None,
    count: int | None,
    *,
    culture: CultureCode = "",
    log: logging.Logger | None = None,
) -> str:
    """Select the plural form for a count.

    Args:
        forms: Available forms, index 0 being the singular/default form
        plural_rule: Rule for the culture, or None if none is known
        count: Quantity, or None for a non-plural lookup (form 0)
        culture: Culture reported in PluralRuleMissingError
        log: Logger for overflow diagnostics (default: module logger)

    Returns:
        Selected form. An index past the end yields the last form, a
        negative index yields the first form; both are logged.

    Raises:
        InvalidArgumentError: If forms is empty
        PluralRuleMissingError: If count is given but plural_rule is None
    """
    if not forms:
        msg = "At least one plural form is required"
        raise InvalidArgumentError(msg)

    if count is None:
        return forms[DEFAULT_FORM_INDEX]

    if plural_rule is None:
        raise PluralRuleMissingError(culture)

    index = plural_rule(count)
    if index >= len(forms):
        (log or logger).warning(
            "Plural form '%d' doesn't exist in the provided values. Provided values: %s",
            index,
            ", ".join(forms),
        )
        return forms[-1]
    if index < 0:
        (log or logger).warning(
            "Plural rule returned negative form index %d for count %d. Provided values: %s",
            index,
            count,
            ", ".join(forms),
        )
        return forms[DEFAULT_FORM_INDEX]
    return forms[index]
