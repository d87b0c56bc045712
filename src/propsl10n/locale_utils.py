"""Locale utilities for properties bundle naming.

Centralizes locale code handling used throughout the codebase: BCP-47 to
POSIX normalization, derivation of the short (language) and long
(language_COUNTRY) codes that select properties files, and CLDR lookups
through Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from propsl10n.constants import LONG_CODE_LENGTH, SHORT_CODE_LENGTH

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "derive_locale_codes",
    "get_babel_locale",
    "get_system_locale",
    "is_known_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to the POSIX form used in file names.

    BCP-47 uses hyphens (en-GB), while properties bundles are named with
    underscores (Messages_en_GB.properties). Case is preserved because the
    country part of a bundle file name is conventionally upper case.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-GB", "pt_PT")

    Returns:
        POSIX-formatted locale code (e.g., "en_GB", "pt_PT")

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
        >>> normalize_locale("pt_PT")
        'pt_PT'
    """
    return locale_code.strip().replace("-", "_")


def derive_locale_codes(language: str) -> tuple[str, ...]:
    """Derive the locale codes whose files make up the primary map.

    The short code is the first two characters of the language string, the
    long code the first five. A language of fewer than two characters yields
    no codes; one of two to four characters yields only the short code.

    Load order is significant: the long code is loaded after the short code
    so its entries win on key collision.

    Args:
        language: Normalized language string (e.g., "en", "en_GB")

    Returns:
        Tuple of codes in load order

    Example:
        >>> derive_locale_codes("pt_PT")
        ('pt', 'pt_PT')
        >>> derive_locale_codes("en")
        ('en',)
        >>> derive_locale_codes("e")
        ()
    """
    codes: list[str] = []
    if len(language) >= SHORT_CODE_LENGTH:
        codes.append(language[:SHORT_CODE_LENGTH])
    if len(language) >= LONG_CODE_LENGTH:
        codes.append(language[:LONG_CODE_LENGTH])
    return tuple(codes)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """Check whether CLDR has data for a locale code.

    Unknown codes are not an error for properties bundles (a project may
    ship files for any identifier), so callers use this to decide whether
    to warn rather than to reject.

    Args:
        locale_code: Locale code to check

    Returns:
        True if Babel can parse the code into a known locale
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en"
