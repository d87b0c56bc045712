"""propsl10n - properties-file translations with fallback and placeholders.

Loads ``<path><name>_<locale>.properties`` bundles, resolves message keys
with a lazily loaded fallback language, and interpolates positional
``{n}`` placeholders. Values are tokenized once, on first lookup.

Public API:
    PropertiesLocalization - Lookup with fallback (prop, configure, reset)
    Settings - Immutable bundle configuration
    PathResourceLoader - Disk loader; MappingResourceLoader - in-memory loader
    parse_properties - Parse properties source to a dict
    tokenize / assemble - Placeholder tokenization and interpolation
    validate_resource - Static checks of a properties source

Exceptions:
    PropertiesError - Base exception class
    ResourceLoadError - Strict-mode load failure
"""

# Localization first: the runtime store imports localization.loading
from .localization import (
    FallbackInfo,
    MappingResourceLoader,
    MissingKeyInfo,
    PathResourceLoader,
    PropertiesLocalization,
    Settings,
)
from .diagnostics import PropertiesError, ResourceLoadError
from .runtime import assemble
from .syntax import parse_properties, tokenize
from .validation import validate_resource

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("propsl10n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__recommended_encoding__ = "UTF-8"

__all__ = [
    "FallbackInfo",
    "MappingResourceLoader",
    "MissingKeyInfo",
    "PathResourceLoader",
    "PropertiesError",
    "PropertiesLocalization",
    "ResourceLoadError",
    "Settings",
    "__recommended_encoding__",
    "__version__",
    "assemble",
    "parse_properties",
    "tokenize",
    "validate_resource",
]
