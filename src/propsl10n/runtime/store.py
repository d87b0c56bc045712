"""TranslationStore - primary and fallback translation maps.

Owns the two translation maps, the record of which locales have been
loaded, the active settings and the loader used to retrieve sources.

Map entries start as raw strings and are replaced in place by their token
sequence on first lookup, so every value is tokenized at most once.
Tokenization is a pure function of the raw value, which keeps the
replacement idempotent if two threads race on the same key.

Loads are blocking calls made while holding the store lock: two loads of
the same file into the same map never overlap.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from propsl10n.diagnostics.errors import ResourceLoadError
from propsl10n.enums import LoadStatus, MapKind
from propsl10n.localization.loading import ResourceLoadResult, build_file_name
from propsl10n.syntax.parser import parse_resource
from propsl10n.syntax.tokenizer import tokenize

if TYPE_CHECKING:
    from propsl10n.localization.loading import ResourceLoader
    from propsl10n.localization.settings import Settings
    from propsl10n.localization.types import LocaleCode, MessageKey
    from propsl10n.syntax.ast import MapEntry, Resource, TokenSequence

__all__ = ["TranslationStore"]

logger = logging.getLogger(__name__)


class TranslationStore:
    """Primary and fallback translation maps with lazy tokenization.

    Thread Safety:
        Loads, resets and in-place tokenization run under an RLock.
        Lookups read the maps without locking.

    Attributes:
        settings: Active settings (replaced by each configure())
        loader: Source loader
        strict: Raise ResourceLoadError when a load fails
    """

    __slots__ = (
        "_fallback_loaded",
        "_fallback_map",
        "_load_results",
        "_loaded_locales",
        "_lock",
        "_primary_map",
        "loader",
        "settings",
        "strict",
    )

    def __init__(self, settings: Settings, loader: ResourceLoader, *, strict: bool = False) -> None:
        """Initialize an empty store.

        Args:
            settings: Active settings
            loader: Source loader
            strict: Raise ResourceLoadError when a load fails (default: False)
        """
        self.settings = settings
        self.loader = loader
        self.strict = strict
        self._primary_map: dict[MessageKey, MapEntry] = {}
        self._fallback_map: dict[MessageKey, MapEntry] = {}
        self._loaded_locales: list[LocaleCode] = []
        self._fallback_loaded: set[LocaleCode] = set()
        self._load_results: list[ResourceLoadResult] = []
        self._lock = threading.RLock()

    def _map_for(self, kind: MapKind) -> dict[MessageKey, MapEntry]:
        return self._primary_map if kind is MapKind.PRIMARY else self._fallback_map

    def _describe_path(self, locale: LocaleCode, settings: Settings) -> str:
        # describe_path is optional for structural loaders
        describe = getattr(self.loader, "describe_path", None)
        if describe is None:
            return build_file_name(locale, settings)
        return describe(locale, settings)

    def apply_settings(self, settings: Settings) -> None:
        """Replace the active settings.

        When the fallback language changes, the fallback map and its load
        record are cleared so keys of the previous fallback stop resolving.
        The primary map is kept.
        """
        with self._lock:
            previous = self.settings.fallback
            self.settings = settings
            if settings.fallback != previous:
                logger.debug(
                    "Fallback changed from %s to %s; clearing fallback map",
                    previous,
                    settings.fallback,
                )
                self._fallback_map.clear()
                self._fallback_loaded.clear()

    @property
    def loaded_locales(self) -> tuple[LocaleCode, ...]:
        """Locales loaded into the primary map, in load order."""
        return tuple(self._loaded_locales)

    @property
    def fallback_loaded(self) -> frozenset[LocaleCode]:
        """Locales loaded into the fallback map."""
        return frozenset(self._fallback_loaded)

    @property
    def load_results(self) -> tuple[ResourceLoadResult, ...]:
        """Every load attempt since construction or the last reset()."""
        return tuple(self._load_results)

    def keys(self, kind: MapKind = MapKind.PRIMARY) -> frozenset[MessageKey]:
        """Keys currently present in a map."""
        return frozenset(self._map_for(kind))

    def merge_resource(self, resource: Resource, kind: MapKind) -> None:
        """Merge parsed entries into a map as raw values, last write winning."""
        with self._lock:
            target = self._map_for(kind)
            for entry in resource.entries:
                target[entry.key] = entry.value

    def load_locale(self, locale: LocaleCode, kind: MapKind) -> ResourceLoadResult:
        """Load and parse the file for a locale into a map.

        Entries are merged into the target map, overwriting colliding keys.
        On success the locale is recorded as loaded for that map. On failure
        nothing is added and nothing is recorded, so a later call retries.

        Args:
            locale: Locale code of the file
            kind: Target map

        Returns:
            ResourceLoadResult describing the attempt

        Raises:
            ResourceLoadError: If the load failed and the store is strict
        """
        settings = self.settings
        source_path = self._describe_path(locale, settings)

        with self._lock:
            logger.debug("Loading %s into %s map", source_path, kind)
            try:
                source = self.loader.load(locale, settings)
                resource = parse_resource(source)
            except FileNotFoundError as e:
                result = ResourceLoadResult(
                    locale=locale,
                    kind=kind,
                    status=LoadStatus.NOT_FOUND,
                    error=e,
                    source_path=source_path,
                )
            except (OSError, ValueError) as e:
                # Permission errors, decoding errors, path validation, oversized sources
                result = ResourceLoadResult(
                    locale=locale,
                    kind=kind,
                    status=LoadStatus.ERROR,
                    error=e,
                    source_path=source_path,
                )
            else:
                self.merge_resource(resource, kind)
                if kind is MapKind.PRIMARY:
                    if locale not in self._loaded_locales:
                        self._loaded_locales.append(locale)
                else:
                    self._fallback_loaded.add(locale)
                result = ResourceLoadResult(
                    locale=locale,
                    kind=kind,
                    status=LoadStatus.SUCCESS,
                    source_path=source_path,
                    junk_entries=resource.junk,
                    entry_count=len(resource.entries),
                )
                if resource.junk:
                    logger.warning(
                        "Skipped %d malformed line(s) in %s", len(resource.junk), source_path
                    )
            self._load_results.append(result)

        if not result.is_success:
            logger.warning(
                "Failed to load %s (%s): %s", source_path, result.status, result.error
            )
            if self.strict:
                msg = f"Failed to load properties for locale '{locale}' from {source_path}"
                raise ResourceLoadError(
                    msg, locale=locale, source_path=source_path, status=result.status
                ) from result.error

        return result

    def ensure_fallback_loaded(self) -> None:
        """Load the fallback locale into the fallback map if needed.

        Skipped when the fallback locale was already loaded into the primary
        map (its keys are then already visible there) or into the fallback
        map. A failed load is retried on the next call.
        """
        fallback = self.settings.fallback
        if fallback in self._loaded_locales or fallback in self._fallback_loaded:
            return
        with self._lock:
            # Another thread may have finished the load while we waited
            if fallback not in self._fallback_loaded:
                self.load_locale(fallback, MapKind.FALLBACK)

    def get_entry(self, key: MessageKey) -> MapEntry | None:
        """Get the primary map entry for a key, if present."""
        return self._primary_map.get(key)

    def get_fallback_entry(self, key: MessageKey) -> MapEntry | None:
        """Get the fallback map entry for a key, if present."""
        return self._fallback_map.get(key)

    def resolve_tokens(self, kind: MapKind, key: MessageKey) -> TokenSequence | None:
        """Get the token sequence for a key, tokenizing on first access.

        The tokenized form replaces the raw string in the map.

        Args:
            kind: Map to look in
            key: Message key

        Returns:
            Token sequence, or None if the key is absent from the map
        """
        target = self._map_for(kind)
        entry = target.get(key)
        match entry:
            case None:
                return None
            case str():
                tokens = tokenize(entry)
                with self._lock:
                    # A reload may have replaced the raw value meanwhile
                    if target.get(key) is entry:
                        target[key] = tokens
                logger.debug("Tokenized '%s' (%s map): %d segment(s)", key, kind, len(tokens))
                return tokens
            case _:
                return entry

    def reset(self) -> None:
        """Clear both maps, the load records and the load results."""
        with self._lock:
            self._primary_map.clear()
            self._fallback_map.clear()
            self._loaded_locales.clear()
            self._fallback_loaded.clear()
            self._load_results.clear()
