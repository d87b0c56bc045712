"""Settings record for PropertiesLocalization.

A single frozen dataclass holding every option that affects which
properties files are loaded and how they are read. Created once per
configure() call and read-only afterwards.

Python 3.13+. External dependency: Babel (CLDR locale data, for warnings only).
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from typing import Any

from propsl10n.constants import (
    DEFAULT_CACHE,
    DEFAULT_ENCODING,
    DEFAULT_FALLBACK,
    DEFAULT_LANGUAGE,
    DEFAULT_NAME,
    DEFAULT_PATH,
)
from propsl10n.locale_utils import (
    derive_locale_codes,
    get_system_locale,
    is_known_locale,
    normalize_locale,
)
from propsl10n.localization.types import LocaleCode

__all__ = ["Settings"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable configuration for properties bundle loading.

    Files are resolved as ``<path><name>_<locale>.properties``; ``path`` is
    concatenated verbatim, so a directory prefix needs its trailing slash.

    Attributes:
        name: Base name of the bundle files (default: "Messages")
        language: Target language, ``xx`` or ``xx_YY`` (default: "en").
            BCP-47 hyphens are normalized to underscores.
        fallback: Language used when a key is missing (default: "en")
        path: Prefix prepended to the file name (default: "")
        cache: Allow loaders to reuse previously read sources (default: True)
        encoding: Text encoding of the files (default: "UTF-8")

    Example:
        >>> settings = Settings(name="Messages", language="pt-PT", path="bundles/")
        >>> settings.language
        'pt_PT'
        >>> settings.locale_codes
        ('pt', 'pt_PT')
    """

    name: str = DEFAULT_NAME
    language: LocaleCode = DEFAULT_LANGUAGE
    fallback: LocaleCode = DEFAULT_FALLBACK
    path: str = DEFAULT_PATH
    cache: bool = DEFAULT_CACHE
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        """Normalize locale codes and validate field values.

        Raises:
            TypeError: If a field has the wrong type
            ValueError: If name is empty or encoding is unknown
        """
        for field_name in ("name", "language", "fallback", "path", "encoding"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                msg = f"{field_name} must be str, got {type(value).__name__}"
                raise TypeError(msg)
        if not isinstance(self.cache, bool):
            msg = f"cache must be bool, got {type(self.cache).__name__}"
            raise TypeError(msg)

        if not self.name.strip():
            msg = "name cannot be empty"
            raise ValueError(msg)

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            msg = f"Unknown encoding: '{self.encoding}'"
            raise ValueError(msg) from e

        object.__setattr__(self, "language", normalize_locale(self.language))
        object.__setattr__(self, "fallback", normalize_locale(self.fallback))

        for locale in (self.language, self.fallback):
            if not is_known_locale(locale):
                logger.warning("Locale '%s' is not known to CLDR", locale)

    @classmethod
    def from_system(cls, **overrides: Any) -> Settings:
        """Create settings targeting the operating system locale.

        Args:
            **overrides: Field values taking precedence over the detected
                language and the defaults

        Returns:
            Settings instance
        """
        overrides.setdefault("language", get_system_locale())
        return cls(**overrides)

    @property
    def locale_codes(self) -> tuple[LocaleCode, ...]:
        """Codes loaded into the primary map, in load order."""
        return derive_locale_codes(self.language)
