"""PropertiesLocalization Example - Fallback Language.

Demonstrates handling incomplete translations with a fallback language.

Scenarios covered:
1. E-commerce site with partial Latvian translations
2. Observing fallbacks and missing keys
3. In-memory bundles with MappingResourceLoader
4. Custom resource loaders

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from propsl10n import (
    FallbackInfo,
    MappingResourceLoader,
    MissingKeyInfo,
    PropertiesLocalization,
    Settings,
)
from propsl10n.localization import build_file_name


def example_1_basic_fallback() -> None:
    """Example 1: Latvian with English fallback, files on disk."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv -> en)")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "shop_lv.properties").write_text(
            "welcome = Sveiki, {0}!\ncart = Grozs\ncheckout = Kase\n", encoding="utf-8"
        )
        (root / "shop_en.properties").write_text(
            "welcome = Hello, {0}!\ncart = Cart\ncheckout = Checkout\n"
            "payment_success = Payment successful!\n"
            "payment_error = Payment failed: {0}\n",
            encoding="utf-8",
        )

        l10n = PropertiesLocalization(
            Settings(name="shop", language="lv", fallback="en", path=f"{root}/")
        )

        print("\nMessages in Latvian:")
        print(f"  welcome: {l10n.prop('welcome', ['Anna'])}")
        print(f"  cart: {l10n.prop('cart')}")

        print("\nMessages falling back to English:")
        print(f"  payment_success: {l10n.prop('payment_success')}")
        print(f"  payment_error: {l10n.prop('payment_error', ['card declined'])}")


def example_2_observers() -> None:
    """Example 2: Collect fallback and missing-key notifications."""
    print("\n" + "=" * 60)
    print("Example 2: Fallback and Missing-Key Observers")
    print("=" * 60)

    fallbacks: list[FallbackInfo] = []
    missing: list[MissingKeyInfo] = []

    loader = MappingResourceLoader(
        {
            "et": "title = Pealkiri",
            "en": "title = Title\nfooter = Footer",
        }
    )
    l10n = PropertiesLocalization(
        Settings(language="et", fallback="en"),
        loader,
        on_fallback=fallbacks.append,
        on_missing=missing.append,
    )

    for key in ("title", "footer", "sidebar"):
        print(f"  {key}: {l10n.prop(key)}")

    print(f"\nFell back: {[info.message_key for info in fallbacks]}")
    print(f"Missing: {[info.message_key for info in missing]}")
    # Fell back: ['footer']
    # Missing: ['sidebar']


def example_3_country_override() -> None:
    """Example 3: Country bundle layered over the language bundle."""
    print("\n" + "=" * 60)
    print("Example 3: pt_BR over pt")
    print("=" * 60)

    loader = MappingResourceLoader(
        {
            "pt": "bus = autocarro\ntrain = comboio\nhello = Olá",
            "pt_BR": "bus = ônibus\ntrain = trem",
            "en": "bus = bus\ntrain = train\nhello = Hello",
        }
    )
    l10n = PropertiesLocalization(Settings(language="pt-BR"), loader)

    print(f"  loaded: {l10n.loaded_locales}")
    for key in ("bus", "train", "hello"):
        print(f"  {key}: {l10n.prop(key)}")


class UpperCaseLoader:
    """Custom loader: wraps another loader and shouts every value."""

    def __init__(self, inner: MappingResourceLoader) -> None:
        self._inner = inner

    def load(self, locale: str, settings: Settings) -> str:
        source = self._inner.load(locale, settings)
        lines = []
        for line in source.split("\n"):
            key, sep, value = line.partition("=")
            lines.append(f"{key}{sep}{value.upper()}" if sep else line)
        return "\n".join(lines)

    def describe_path(self, locale: str, settings: Settings) -> str:
        return f"upper://{build_file_name(locale, settings)}"


def example_4_custom_loader() -> None:
    """Example 4: Any object with load() and describe_path() is a loader."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Loader")
    print("=" * 60)

    loader = UpperCaseLoader(MappingResourceLoader({"en": "alert = careful, {0}!"}))
    l10n = PropertiesLocalization(Settings(), loader)
    print(f"  alert: {l10n.prop('alert', ['Bob'])}")
    # alert: CAREFUL, Bob!

    for result in l10n.get_load_summary().results:
        print(f"  {result.source_path}: {result.status}")


if __name__ == "__main__":
    example_1_basic_fallback()
    example_2_observers()
    example_3_country_override()
    example_4_custom_loader()
