"""Resolution configuration for ResolutionEngine.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from culturelex.culture import parent_culture

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for ResolutionEngine.

    Constructing ``ResolverConfig()`` with no arguments produces the
    standard behavior: one step of parent-culture fallback using the
    subtag-based culture hierarchy.

    Attributes:
        fallback_to_parent: Try the parent culture's dictionary when the
            requested culture misses (default: True).
        parent_of: Parent relation of the culture hierarchy. Must return a
            normalized culture and map the root culture to itself
            (default: parent_culture).

    Example:
        >>> config = ResolverConfig(fallback_to_parent=False)
        >>> engine = ResolutionEngine(provider, config=config)
    """

    fallback_to_parent: bool = True
    parent_of: Callable[[str], str] = parent_culture

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If parent_of is not callable
        """
        if not callable(self.parent_of):
            msg = "parent_of must be callable"
            raise TypeError(msg)
