"""Composite translation keys.

A dictionary entry is addressed by (name, context). Both parts are folded
into a single string key:

    translation_key("Open", None)    -> "Open"
    translation_key("Open", "")      -> "Open"
    translation_key("Open", "menu")  -> "menu\\x04Open"

The raw separator (EOT, as used by gettext for msgctxt) never occurs inside
an escaped component. Backslashes are doubled and a literal EOT becomes
``\\4``, so the mapping is injective and split_key() recovers both parts.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from culturelex.constants import CONTEXT_SEPARATOR, ESCAPE_CHAR, ESCAPED_SEPARATOR
from culturelex.errors import InvalidArgumentError
from culturelex.types import MessageName, TranslationKey

__all__ = ["split_key", "translation_key"]


def _escape(component: str) -> str:
    if ESCAPE_CHAR not in component and CONTEXT_SEPARATOR not in component:
        return component
    return component.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2).replace(
        CONTEXT_SEPARATOR, ESCAPED_SEPARATOR
    )


def _unescape(component: str) -> str:
    if ESCAPE_CHAR not in component:
        return component

    chars: list[str] = []
    i = 0
    length = len(component)
    while i < length:
        char = component[i]
        if char == ESCAPE_CHAR and i + 1 < length:
            following = component[i + 1]
            if following == ESCAPE_CHAR:
                chars.append(ESCAPE_CHAR)
                i += 2
                continue
            if following == ESCAPED_SEPARATOR[1]:
                chars.append(CONTEXT_SEPARATOR)
                i += 2
                continue
        chars.append(char)
        i += 1
    return "".join(chars)


def translation_key(name: MessageName, context: str | None = None) -> TranslationKey:
    """Build the dictionary key for a (name, context) pair.

    Args:
        name: Message name
        context: Disambiguation context; None and "" are equivalent

    Returns:
        Composite key. Equals ``name`` for context-less names without
        backslashes or EOT characters.

    Raises:
        InvalidArgumentError: If name is None

    Example:
        >>> translation_key("hello") == translation_key("hello", "")
        True
        >>> translation_key("hello", "greeting") == translation_key("hello")
        False
    """
    if name is None:
        msg = "name is required to build a translation key"
        raise InvalidArgumentError(msg)
    if not context:
        return _escape(name)
    return f"{_escape(context)}{CONTEXT_SEPARATOR}{_escape(name)}"


def split_key(key: TranslationKey) -> tuple[MessageName, str | None]:
    """Decompose a key built by translation_key().

    Args:
        key: Composite key

    Returns:
        (name, context) tuple; context is None for context-less keys

    Example:
        >>> split_key(translation_key("Open", "menu"))
        ('Open', 'menu')
    """
    context, separator, name = key.partition(CONTEXT_SEPARATOR)
    if not separator:
        return _unescape(key), None
    return _unescape(name), _unescape(context)
