"""Shared constants for culturelex.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CONTEXT_SEPARATOR",
    "DEFAULT_FORM_INDEX",
    "DEFAULT_SYSTEM_CULTURE",
    "ESCAPE_CHAR",
    "ESCAPED_SEPARATOR",
    "ROOT_CULTURE",
]

# gettext joins msgctxt and msgid with EOT; reused here for composite keys.
CONTEXT_SEPARATOR = "\x04"

# Backslash escapes itself and the separator inside key components.
ESCAPE_CHAR = "\\"
ESCAPED_SEPARATOR = "\\4"

# Form used when no count is supplied (singular / default form).
DEFAULT_FORM_INDEX = 0

# Invariant culture at the top of every hierarchy. Its parent is itself.
ROOT_CULTURE = ""

# Returned by get_system_culture() when nothing can be detected.
DEFAULT_SYSTEM_CULTURE = "en_US"
