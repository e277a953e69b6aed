"""Positional argument handling for resolved templates.

Templates use composite-format positional placeholders: ``{0}``, ``{1}``...
with ``{{`` and ``}}`` as literal braces. Python's str.format() accepts the
same syntax for these cases.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

__all__ = ["format_positional", "splice_count"]

logger = logging.getLogger(__name__)


def splice_count(count: int, extra_arguments: Sequence[object] = ()) -> tuple[object, ...]:
    """Build the final argument list of a plural lookup.

    The count always comes first, so templates reference it as ``{0}``.

    Example:
        >>> splice_count(3, ["x"])
        (3, 'x')
    """
    return (count, *extra_arguments)


def format_positional(
    template: str,
    arguments: Sequence[object],
    *,
    log: logging.Logger | None = None,
) -> str:
    """Substitute positional arguments into a template.

    A template that does not fit the arguments (unknown index, named or
    malformed placeholder) is logged and returned unformatted, so a bad
    translation never hides the message entirely.

    Args:
        template: Template with ``{0}``-style placeholders
        arguments: Positional arguments
        log: Logger for formatting failures (default: module logger)

    Returns:
        Formatted text, or the template itself if formatting fails

    Example:
        >>> format_positional("You have {0} items", [5])
        'You have 5 items'
    """
    try:
        return template.format(*arguments)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
        (log or logger).warning(
            "Cannot format template %r with %d argument(s): %s", template, len(arguments), e
        )
        return template
