"""Resource loading infrastructure for PropertiesLocalization.

Provides the protocol for properties file loaders, a filesystem
implementation with path-traversal checks, an in-memory implementation,
and result/summary data structures for tracking load attempts and the
payloads passed to notification callbacks.

Components:
    ResourceLoader - Protocol for loading properties sources (structural typing)
    PathResourceLoader - Disk-based loader honoring Settings.cache and encoding
    MappingResourceLoader - In-memory loader for embedded or generated sources
    FallbackInfo - Immutable record of a fallback-locale lookup
    MissingKeyInfo - Immutable record of a key absent from every map
    ResourceLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from propsl10n.constants import LOCALE_SEPARATOR, PROPERTIES_SUFFIX
from propsl10n.enums import LoadStatus, MapKind
from propsl10n.localization.types import LocaleCode, MessageKey, PropertiesSource

if TYPE_CHECKING:
    from collections.abc import Mapping

    from propsl10n.localization.settings import Settings
    from propsl10n.syntax.ast import Junk

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceLoader",
    # Concrete loaders
    "PathResourceLoader",
    "MappingResourceLoader",
    # Notification payloads
    "FallbackInfo",
    "MissingKeyInfo",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
    # Helpers
    "build_file_name",
]

logger = logging.getLogger(__name__)


def build_file_name(locale: LocaleCode, settings: Settings) -> str:
    """Build ``<path><name>_<locale>.properties`` for a locale.

    Example:
        >>> from propsl10n.localization.settings import Settings
        >>> build_file_name("pt_PT", Settings(path="bundles/"))
        'bundles/Messages_pt_PT.properties'
    """
    return f"{settings.path}{settings.name}{LOCALE_SEPARATOR}{locale}{PROPERTIES_SUFFIX}"


class ResourceLoader(Protocol):
    """Protocol for retrieving properties sources for specific locales.

    Implementations must provide a load() method that returns the raw text
    of the bundle file for a locale, given the active settings (base name,
    path prefix, cache flag, encoding). Loading is a blocking call.

    describe_path() is optional: when a loader lacks it, load results and
    errors report build_file_name() instead.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class HttpLoader:
        ...     def load(self, locale: str, settings: Settings) -> str:
        ...         return fetch_text(build_file_name(locale, settings))
        ...     def describe_path(self, locale: str, settings: Settings) -> str:
        ...         return build_file_name(locale, settings)
    """

    def load(self, locale: LocaleCode, settings: Settings) -> PropertiesSource:
        """Load the properties source for a locale.

        Args:
            locale: Locale code (e.g., 'en', 'pt_PT')
            settings: Active settings

        Returns:
            Properties source as string

        Raises:
            FileNotFoundError: If no file exists for this locale
            OSError: If the file cannot be read
        """

    def describe_path(self, locale: LocaleCode, settings: Settings) -> str:
        """Return human-readable path for diagnostics.

        Args:
            locale: Locale code
            settings: Active settings

        Returns:
            Human-readable path string for error messages and load results
        """
        return build_file_name(locale, settings)


@dataclass(slots=True)
class PathResourceLoader:
    """File system loader for ``<path><name>_<locale>.properties`` files.

    Relative file names are resolved against ``root_dir`` (or the working
    directory when ``root_dir`` is None). Sources are read with
    ``settings.encoding``. When ``settings.cache`` is true, a source read
    once is served from memory on later loads of the same file; when false,
    the file is read from disk on every load.

    Security:
        Locale codes and base names containing path separators or ".." are
        rejected, so a locale taken from user input cannot select a file
        outside the configured path prefix.

    Example:
        >>> loader = PathResourceLoader()
        >>> source = loader.load("en", Settings(path="bundles/"))
        # Reads: bundles/Messages_en.properties

    Attributes:
        root_dir: Directory relative file names are resolved against
    """

    root_dir: str | None = None
    _sources: dict[tuple[Path, str], PropertiesSource] = field(
        init=False, repr=False, default_factory=dict
    )

    @staticmethod
    def _validate_component(value: str, what: str) -> None:
        """Validate a file name component for path traversal.

        Raises:
            ValueError: If the component is empty or contains unsafe characters
        """
        if not value:
            msg = f"{what} cannot be empty"
            raise ValueError(msg)
        if ".." in value:
            msg = f"Path traversal sequences not allowed in {what}: '{value}'"
            raise ValueError(msg)
        if "/" in value or "\\" in value:
            msg = f"Path separators not allowed in {what}: '{value}'"
            raise ValueError(msg)

    def _resolve(self, locale: LocaleCode, settings: Settings) -> Path:
        self._validate_component(locale, "locale")
        self._validate_component(settings.name, "name")
        file_path = Path(build_file_name(locale, settings))
        if self.root_dir is not None and not file_path.is_absolute():
            file_path = Path(self.root_dir) / file_path
        return file_path

    def describe_path(self, locale: LocaleCode, settings: Settings) -> str:
        """Return the file path the loader reads for a locale."""
        if self.root_dir is None:
            return build_file_name(locale, settings)
        return str(Path(self.root_dir) / build_file_name(locale, settings))

    def load(self, locale: LocaleCode, settings: Settings) -> PropertiesSource:
        """Read a properties file from disk.

        Args:
            locale: Locale code to substitute into the file name
            settings: Active settings

        Returns:
            Properties source

        Raises:
            ValueError: If locale or name contains path traversal sequences
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid in settings.encoding
        """
        file_path = self._resolve(locale, settings)
        cache_key = (file_path, settings.encoding)

        if settings.cache and cache_key in self._sources:
            logger.debug("Serving cached source: %s", file_path)
            return self._sources[cache_key]

        source = file_path.read_text(encoding=settings.encoding)
        if settings.cache:
            self._sources[cache_key] = source
        return source

    def clear_cache(self) -> None:
        """Forget all cached sources."""
        self._sources.clear()


@dataclass(frozen=True, slots=True)
class MappingResourceLoader:
    """In-memory loader serving sources from a ``{locale: text}`` mapping.

    Useful for bundles embedded in code, generated at runtime, or in tests.
    The settings only affect describe_path(); name and path do not select
    different sources.

    Example:
        >>> loader = MappingResourceLoader({"en": "hello=Hello", "fr": "hello=Bonjour"})
        >>> loader.load("fr", Settings())
        'hello=Bonjour'
    """

    sources: Mapping[LocaleCode, PropertiesSource]

    def load(self, locale: LocaleCode, settings: Settings) -> PropertiesSource:  # noqa: ARG002
        """Return the source registered for a locale.

        Raises:
            FileNotFoundError: If no source is registered for the locale
        """
        try:
            return self.sources[locale]
        except KeyError:
            msg = f"No properties source registered for locale '{locale}'"
            raise FileNotFoundError(msg) from None

    def describe_path(self, locale: LocaleCode, settings: Settings) -> str:
        """Return the file name this source stands in for."""
        return build_file_name(locale, settings)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a key resolved from the fallback map.

    Provided to the on_fallback callback.

    Attributes:
        message_key: The key that was resolved
        requested_locale: The configured target language
        fallback_locale: The fallback language that supplied the value
    """

    message_key: MessageKey
    requested_locale: LocaleCode
    fallback_locale: LocaleCode


@dataclass(frozen=True, slots=True)
class MissingKeyInfo:
    """Information about a key absent from both maps.

    Provided to the on_missing callback.

    Attributes:
        message_key: The key that could not be resolved
        requested_locale: The configured target language
    """

    message_key: MessageKey
    requested_locale: LocaleCode


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single properties file.

    Attributes:
        locale: Locale code of the file
        kind: Map the file was loaded into
        status: Load status (success, not_found, error)
        error: Exception if status is not SUCCESS, None otherwise
        source_path: Human-readable path to the file
        junk_entries: Malformed lines skipped by the parser
        entry_count: Number of entries merged into the map
    """

    locale: LocaleCode
    kind: MapKind
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    junk_entries: tuple[Junk, ...] = ()
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR

    @property
    def has_junk(self) -> bool:
        """Check if the file had malformed lines."""
        return len(self.junk_entries) > 0


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of load results.

    All statistics are computed properties derived from ``results``.

    Example:
        >>> summary = l10n.get_load_summary()
        >>> for result in summary.get_not_found():
        ...     print(f"Missing bundle: {result.source_path}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors}, "
            f"junk={self.junk_count})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of files not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def junk_count(self) -> int:
        """Total number of malformed lines across all files."""
        return sum(len(r.junk_entries) for r in self.results)

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where the file was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    def get_by_kind(self, kind: MapKind) -> tuple[ResourceLoadResult, ...]:
        """Get all results that targeted a specific map."""
        return tuple(r for r in self.results if r.kind == kind)

    @property
    def has_errors(self) -> bool:
        """Check if any file failed to load with an error."""
        return self.errors > 0

    @property
    def has_junk(self) -> bool:
        """Check if any file had malformed lines."""
        return self.junk_count > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted file loaded.

        Files with malformed lines still count as successful; use
        all_clean for the stricter check.
        """
        return self.errors == 0 and self.not_found == 0

    @property
    def all_clean(self) -> bool:
        """Check if every attempted file loaded without malformed lines."""
        return self.all_successful and self.junk_count == 0
