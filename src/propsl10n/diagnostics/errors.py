"""Exception hierarchy for propsl10n.

Expected conditions (missing keys, malformed lines, bad placeholders) are
normal control flow and never raise. Exceptions are reserved for failures
the caller asked to see: strict-mode load failures and invalid input to the
lookup API.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from propsl10n.enums import LoadStatus

__all__ = [
    "PropertiesError",
    "ResourceLoadError",
]


class PropertiesError(Exception):
    """Base exception for all propsl10n errors."""


class ResourceLoadError(PropertiesError):
    """A properties file could not be loaded in strict mode.

    The loader's original exception is chained as ``__cause__``.

    Attributes:
        locale: Locale code whose file failed to load
        source_path: Human-readable path of the file
        status: Load status recorded for the attempt
    """

    def __init__(
        self,
        message: str,
        *,
        locale: str,
        source_path: str,
        status: LoadStatus,
    ) -> None:
        """Initialize ResourceLoadError.

        Args:
            message: Error message string
            locale: Locale code whose file failed to load
            source_path: Human-readable path of the file
            status: Load status recorded for the attempt
        """
        super().__init__(message)
        self.locale = locale
        self.source_path = source_path
        self.status = status
