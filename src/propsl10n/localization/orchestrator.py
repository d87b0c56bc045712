"""Translation lookup with a lazily loaded fallback locale.

Implements PropertiesLocalization, the public lookup API. It wraps a
TranslationStore and adds the resolution policy:

1. Look the key up in the primary map (target language).
2. Otherwise load the fallback language on demand and look there,
   notifying the on_fallback observer.
3. Otherwise return ``None`` (allow_null) or ``"[key]"`` and notify the
   on_missing observer.

Key architectural decisions:
- Explicit instance, no process-wide singleton: construct one per bundle
- Protocol-based ResourceLoader (dependency inversion)
- Notifications are side-channel callbacks, never exceptions
- Primary files loaded eagerly by configure(); fallback file loaded lazily

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from propsl10n.constants import FALLBACK_MISSING_KEY
from propsl10n.enums import MapKind
from propsl10n.localization.loading import (
    FallbackInfo,
    LoadSummary,
    MissingKeyInfo,
    PathResourceLoader,
    ResourceLoader,
)
from propsl10n.localization.settings import Settings
from propsl10n.localization.types import LocaleCode, MessageKey, PropertiesSource
from propsl10n.runtime.assembler import assemble
from propsl10n.runtime.store import TranslationStore
from propsl10n.syntax.ast import Junk, Placeholder
from propsl10n.syntax.parser import parse_resource

__all__ = ["PropertiesLocalization"]

logger = logging.getLogger(__name__)


class PropertiesLocalization:
    """Properties-file translations with fallback and positional placeholders.

    Example - Disk-based bundles:
        >>> l10n = PropertiesLocalization(Settings(language="pt_PT", path="bundles/"))
        # Loads bundles/Messages_pt.properties, then bundles/Messages_pt_PT.properties
        >>> l10n.prop("menu_add")
        'Adicionar'
        >>> l10n.prop("greeting", ["Ana"])
        'Olá, Ana!'

    Example - Observing fallbacks and missing keys:
        >>> missing: list[MissingKeyInfo] = []
        >>> l10n = PropertiesLocalization(settings, loader, on_missing=missing.append)
        >>> l10n.prop("nope")
        '[nope]'
        >>> missing[0].message_key
        'nope'
    """

    __slots__ = ("_on_fallback", "_on_missing", "_store")

    def __init__(
        self,
        settings: Settings | None = None,
        loader: ResourceLoader | None = None,
        *,
        on_missing: Callable[[MissingKeyInfo], None] | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        strict: bool = False,
    ) -> None:
        """Initialize and configure.

        Args:
            settings: Bundle settings (defaults: Messages, en, fallback en)
            loader: Source loader (default: PathResourceLoader())
            on_missing: Called when a key is absent from both maps
                (not called for allow_null lookups)
            on_fallback: Called when a key is resolved from the fallback map
            strict: Raise ResourceLoadError instead of recording failed
                loads (default: False)

        Raises:
            ResourceLoadError: In strict mode, if a primary file fails to load
        """
        self._store = TranslationStore(
            settings if settings is not None else Settings(),
            loader if loader is not None else PathResourceLoader(),
            strict=strict,
        )
        self._on_missing = on_missing
        self._on_fallback = on_fallback
        self.configure(self._store.settings)

    def configure(self, settings: Settings) -> None:
        """Apply settings and load the target language into the primary map.

        Loads the short code file (``xx``) and then, for ``xx_YY``
        languages, the long code file, so long code entries win on key
        collision. Entries merge into whatever the primary map already
        holds; call reset() first for a clean slate. A changed fallback
        language discards the previous fallback map, and the new fallback
        is loaded on the next missing key.

        Args:
            settings: New settings

        Raises:
            ResourceLoadError: In strict mode, if a file fails to load
        """
        self._store.apply_settings(settings)
        logger.info(
            "Configuring %s bundle for language %s (fallback=%s, path=%r, cache=%s)",
            settings.name,
            settings.language,
            settings.fallback,
            settings.path,
            settings.cache,
        )
        for locale in settings.locale_codes:
            self._store.load_locale(locale, MapKind.PRIMARY)

    @property
    def settings(self) -> Settings:
        """Active settings (read-only)."""
        return self._store.settings

    @property
    def loaded_locales(self) -> tuple[LocaleCode, ...]:
        """Locales loaded into the primary map, in load order."""
        return self._store.loaded_locales

    @property
    def strict(self) -> bool:
        """Whether failed loads raise ResourceLoadError (read-only)."""
        return self._store.strict

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(l10n)
            "PropertiesLocalization(language='en_GB', fallback='fr', loaded=('en', 'en_GB'))"
        """
        settings = self._store.settings
        return (
            f"PropertiesLocalization(language={settings.language!r}, "
            f"fallback={settings.fallback!r}, loaded={self._store.loaded_locales!r})"
        )

    def prop(
        self,
        key: MessageKey,
        substitutions: Sequence[object] | None = (),
        *,
        allow_null: bool = False,
    ) -> str | None:
        """Look up a translation and substitute positional placeholders.

        Args:
            key: Message key
            substitutions: Values for ``{0}``, ``{1}``, ...; converted with
                str(). Placeholders without a value are echoed as ``{n}``.
                None is the same as no values.
            allow_null: Return None for missing keys instead of ``"[key]"``,
                without notifying on_missing

        Returns:
            Assembled translation, ``"[key]"`` or None

        Raises:
            TypeError: If substitutions is a string (it would be indexed
                character by character)

        Example:
            >>> l10n.prop("placeholder_text", ["a", "b"])
            'this is a value with b.'
            >>> l10n.prop("no_such_key")
            '[no_such_key]'
            >>> l10n.prop("no_such_key", allow_null=True) is None
            True
        """
        if substitutions is None:
            substitutions = ()
        elif isinstance(substitutions, str):
            msg = "substitutions must be a sequence of values, not a str"
            raise TypeError(msg)

        store = self._store
        settings = store.settings

        tokens = store.resolve_tokens(MapKind.PRIMARY, key)
        if tokens is not None:
            return assemble(tokens, substitutions)

        store.ensure_fallback_loaded()
        tokens = store.resolve_tokens(MapKind.FALLBACK, key)
        if tokens is not None:
            logger.debug("Key '%s' resolved from fallback %s", key, settings.fallback)
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(
                        message_key=key,
                        requested_locale=settings.language,
                        fallback_locale=settings.fallback,
                    )
                )
            return assemble(tokens, substitutions)

        if allow_null:
            return None

        logger.warning("Key '%s' not found for language %s", key, settings.language)
        if self._on_missing is not None:
            self._on_missing(MissingKeyInfo(message_key=key, requested_locale=settings.language))
        return FALLBACK_MISSING_KEY.format(key=key)

    def has_key(self, key: MessageKey) -> bool:
        """Check if a key is in the primary map or the loaded fallback map.

        Does not trigger a fallback load.
        """
        store = self._store
        return store.get_entry(key) is not None or store.get_fallback_entry(key) is not None

    def get_keys(self) -> frozenset[MessageKey]:
        """Get all keys currently available without further loading."""
        return self._store.keys(MapKind.PRIMARY) | self._store.keys(MapKind.FALLBACK)

    def get_placeholder_indices(self, key: MessageKey) -> frozenset[int] | None:
        """Get the placeholder indices a translation uses.

        Looks in the primary map, then the already loaded fallback map.
        Tokenizes the value if it was not looked up before.

        Args:
            key: Message key

        Returns:
            Set of indices, or None if the key is not available

        Example:
            >>> l10n.get_placeholder_indices("placeholder_text")
            frozenset({0, 1})
        """
        for kind in (MapKind.PRIMARY, MapKind.FALLBACK):
            tokens = self._store.resolve_tokens(kind, key)
            if tokens is not None:
                return frozenset(
                    segment.index for segment in tokens if Placeholder.guard(segment)
                )
        return None

    def add_resource(
        self, source: PropertiesSource, *, kind: MapKind = MapKind.PRIMARY
    ) -> tuple[Junk, ...]:
        """Merge a properties source directly into a map.

        Bypasses the loader; the source is not recorded as a loaded locale
        or in the load summary.

        Args:
            source: Properties text
            kind: Target map (default: primary)

        Returns:
            Malformed lines skipped while parsing

        Raises:
            ValueError: If source exceeds the maximum source size
        """
        resource = parse_resource(source)
        self._store.merge_resource(resource, kind)
        logger.debug("Added %d entries to %s map", len(resource.entries), kind)
        return resource.junk

    def get_load_summary(self) -> LoadSummary:
        """Get a summary of every file load attempt.

        Includes primary loads from configure() and fallback loads triggered
        by lookups, in the order they happened.

        Example:
            >>> summary = l10n.get_load_summary()
            >>> for result in summary.get_not_found():
            ...     print(f"Missing: {result.source_path}")
        """
        return LoadSummary(results=self._store.load_results)

    def reset(self) -> None:
        """Forget all translations and load records.

        Settings and loader are kept; call configure() to load again.
        """
        logger.debug("Resetting translation store")
        self._store.reset()
