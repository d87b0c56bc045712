"""Localization package: settings, loaders and the lookup API.

Submodules:
    types        - PEP 695 type aliases (MessageKey, LocaleCode, PropertiesSource)
    settings     - Settings (immutable bundle configuration)
    loading      - ResourceLoader protocol, PathResourceLoader,
                   MappingResourceLoader, FallbackInfo, MissingKeyInfo,
                   ResourceLoadResult, LoadSummary
    orchestrator - PropertiesLocalization (lookup with fallback)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
# Import order matters: loading must be importable before the runtime
# store, which the orchestrator pulls in.
from propsl10n.enums import LoadStatus, MapKind
from propsl10n.localization.loading import (
    FallbackInfo,
    LoadSummary,
    MappingResourceLoader,
    MissingKeyInfo,
    PathResourceLoader,
    ResourceLoader,
    ResourceLoadResult,
    build_file_name,
)
from propsl10n.localization.settings import Settings
from propsl10n.localization.types import LocaleCode, MessageKey, PropertiesSource
from propsl10n.localization.orchestrator import PropertiesLocalization

__all__ = [
    # Lookup API
    "PropertiesLocalization",
    "Settings",
    # Loader protocol and implementations
    "ResourceLoader",
    "PathResourceLoader",
    "MappingResourceLoader",
    "build_file_name",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    "MapKind",
    # Notification payloads
    "FallbackInfo",
    "MissingKeyInfo",
    # Type aliases
    "LocaleCode",
    "MessageKey",
    "PropertiesSource",
]
