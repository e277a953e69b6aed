"""Exception hierarchy for culturelex.

Only InvalidArgumentError crosses the ResolutionEngine boundary. Missing
translations are a normal outcome reported through LocalizedString, and a
missing plural rule is absorbed by the fallback chain.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CultureLexError",
    "InvalidArgumentError",
    "PluralRuleMissingError",
]


class CultureLexError(Exception):
    """Base exception for all culturelex errors."""


class InvalidArgumentError(CultureLexError, ValueError):
    """A required argument is missing or unusable.

    Raised for a None message name or an empty plural form list.
    Fatal to the call; never retried.
    """


class PluralRuleMissingError(CultureLexError):
    """No pluralization rule is known for a culture.

    The engine logs this and treats the affected fallback tier as a miss.

    Attributes:
        culture: Culture code the rule was requested for
    """

    def __init__(self, culture: str, message: str | None = None) -> None:
        """Initialize PluralRuleMissingError.

        Args:
            culture: Culture code without a known plural rule
            message: Optional override for the default message
        """
        self.culture = culture
        super().__init__(message or f"No plural rule known for culture '{culture}'")
