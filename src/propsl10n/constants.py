"""Shared constants for propsl10n.

Centralized configuration constants used across the syntax, runtime and
localization packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Settings defaults: values used when a Settings field is not supplied
- File naming: properties file name assembly
- Input limits: DoS prevention via size constraints
- Fallback strings: output used when a key cannot be resolved

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Settings defaults
    "DEFAULT_NAME",
    "DEFAULT_LANGUAGE",
    "DEFAULT_FALLBACK",
    "DEFAULT_PATH",
    "DEFAULT_CACHE",
    "DEFAULT_ENCODING",
    # Locale code lengths
    "SHORT_CODE_LENGTH",
    "LONG_CODE_LENGTH",
    # File naming
    "PROPERTIES_SUFFIX",
    "LOCALE_SEPARATOR",
    # Syntax characters
    "COMMENT_CHAR",
    "SEPARATOR_CHAR",
    "ESCAPE_CHAR",
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Fallback strings
    "FALLBACK_MISSING_KEY",
    "FALLBACK_UNRESOLVED_PLACEHOLDER",
]

# ============================================================================
# SETTINGS DEFAULTS
# ============================================================================

DEFAULT_NAME: str = "Messages"
DEFAULT_LANGUAGE: str = "en"
DEFAULT_FALLBACK: str = "en"
DEFAULT_PATH: str = ""
DEFAULT_CACHE: bool = True
DEFAULT_ENCODING: str = "UTF-8"

# Language-only code ("pt") and language_COUNTRY code ("pt_PT")
SHORT_CODE_LENGTH: int = 2
LONG_CODE_LENGTH: int = 5

# ============================================================================
# FILE NAMING
# ============================================================================

# <path><name>_<locale>.properties
PROPERTIES_SUFFIX: str = ".properties"
LOCALE_SEPARATOR: str = "_"

# ============================================================================
# SYNTAX CHARACTERS
# ============================================================================

COMMENT_CHAR: str = "#"
SEPARATOR_CHAR: str = "="
ESCAPE_CHAR: str = "\\"
PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum properties source size in characters (10 MiB of ASCII).
# Translation bundles are small; anything larger is almost certainly a
# misconfigured path pointing at the wrong file.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by lookups for keys absent from both maps: "[key]"
FALLBACK_MISSING_KEY: str = "[{key}]"

# Echoed by the assembler when no substitution exists: "{3}"
FALLBACK_UNRESOLVED_PLACEHOLDER: str = "{{{index}}}"
