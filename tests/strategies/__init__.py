"""Hypothesis strategies for culturelex property-based testing.

Usage:
    from tests.strategies import message_names, cultures
"""

from .localization import contexts, counts, cultures, message_names, plural_form_lists

__all__ = [
    "contexts",
    "counts",
    "cultures",
    "message_names",
    "plural_form_lists",
]
