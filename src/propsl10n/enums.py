"""Enumerations for propsl10n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of a single properties file load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Source retrieved and parsed into the target map."""

    NOT_FOUND = "not_found"
    """Loader reported the file does not exist (FileNotFoundError)."""

    ERROR = "error"
    """Loader failed for another reason (I/O, decoding, path validation)."""


class MapKind(StrEnum):
    """Which translation map a load or lookup targets.

    StrEnum provides automatic string conversion: str(MapKind.PRIMARY) == "primary"
    """

    PRIMARY = "primary"
    """Translations for the configured target language (short and long code)."""

    FALLBACK = "fallback"
    """Translations for the fallback language, loaded on first missing key."""


__all__ = [
    "LoadStatus",
    "MapKind",
]
