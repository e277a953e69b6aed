"""Enumerations for culturelex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading a single catalog resource.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Resource read and parsed"""

    NOT_FOUND = "not_found"
    """Resource file does not exist for this culture"""

    ERROR = "error"
    """Resource exists but could not be read or parsed"""


class ResolutionSource(StrEnum):
    """Where the text of a LocalizedString came from.

    StrEnum provides automatic string conversion: str(ResolutionSource.NAME) == "name"
    """

    DICTIONARY = "dictionary"
    """Found in a culture dictionary on one of the fallback tiers"""

    DEFAULT = "default"
    """Caller-supplied literal forms or default text"""

    NAME = "name"
    """Nothing found; the name itself is echoed back"""


__all__ = [
    "LoadStatus",
    "ResolutionSource",
]
