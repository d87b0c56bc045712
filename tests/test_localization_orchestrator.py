"""Tests for PropertiesLocalization: lookup, fallback, notifications.

Python 3.13+.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from propsl10n import (
    FallbackInfo,
    MappingResourceLoader,
    MissingKeyInfo,
    PathResourceLoader,
    PropertiesLocalization,
    ResourceLoadError,
    Settings,
)
from propsl10n.enums import LoadStatus, MapKind
from propsl10n.localization import ResourceLoader
from tests.strategies.properties import property_keys


@dataclass
class RecordingLoader:
    """Delegating loader that records every locale it is asked for."""

    inner: ResourceLoader
    calls: list[str] = field(default_factory=list)

    def load(self, locale: str, settings: Settings) -> str:
        self.calls.append(locale)
        return self.inner.load(locale, settings)

    def describe_path(self, locale: str, settings: Settings) -> str:
        return self.inner.describe_path(locale, settings)


@pytest.fixture
def missing() -> list[MissingKeyInfo]:
    """Collector for missing-key notifications."""
    return []


@pytest.fixture
def fallbacks() -> list[FallbackInfo]:
    """Collector for fallback notifications."""
    return []


@pytest.fixture
def loader(fixture_loader: PathResourceLoader) -> RecordingLoader:
    """Recording wrapper around the fixture loader."""
    return RecordingLoader(fixture_loader)


@pytest.fixture
def l10n(
    fixture_settings: Settings,
    loader: RecordingLoader,
    missing: list[MissingKeyInfo],
    fallbacks: list[FallbackInfo],
) -> PropertiesLocalization:
    """messages bundle, en_GB with French fallback, observers attached."""
    return PropertiesLocalization(
        fixture_settings, loader, on_missing=missing.append, on_fallback=fallbacks.append
    )


class TestConfigure:
    """Initial load of the fixture bundle."""

    def test_primary_map_holds_unique_keys(self, l10n: PropertiesLocalization) -> None:
        """The primary map is the union of the en and en_GB keys."""
        assert len(l10n.get_keys()) == 9

    def test_fallback_not_loaded_yet(
        self, l10n: PropertiesLocalization, loader: RecordingLoader
    ) -> None:
        """configure() loads only the short and long code files."""
        assert loader.calls == ["en", "en_GB"]
        assert l10n.loaded_locales == ("en", "en_GB")
        assert l10n.get_load_summary().get_by_kind(MapKind.FALLBACK) == ()
        assert not l10n.has_key("fallback")

    def test_long_code_overrides_short_code(self, l10n: PropertiesLocalization) -> None:
        """The en_GB file wins over the en file."""
        assert l10n.prop("police_man") == "bobby"
        assert l10n.prop("lorry") == "lorry"

    def test_load_summary(self, l10n: PropertiesLocalization) -> None:
        """Both files load; malformed lines in the en file are counted."""
        summary = l10n.get_load_summary()
        assert summary.successful == 2
        assert summary.junk_count == 2
        assert summary.all_successful
        assert not summary.all_clean

    def test_language_without_country(
        self, fixture_settings: Settings, fixture_loader: PathResourceLoader
    ) -> None:
        """A two letter language loads a single file."""
        settings = Settings(
            name=fixture_settings.name, language="fr", fallback="en", path=fixture_settings.path
        )
        l10n = PropertiesLocalization(settings, fixture_loader)
        assert l10n.loaded_locales == ("fr",)
        assert l10n.prop("plain_text") == "ceci est une valeur."

    def test_missing_files_not_fatal(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Absent bundle files are recorded, not raised."""
        monkeypatch.chdir(tmp_path)
        l10n = PropertiesLocalization()
        assert l10n.loaded_locales == ()
        assert l10n.get_load_summary().not_found == 1
        assert l10n.prop("anything") == "[anything]"

    def test_strict_raises(self) -> None:
        """strict=True turns a failed primary load into ResourceLoadError."""
        with pytest.raises(ResourceLoadError) as exc_info:
            PropertiesLocalization(Settings(language="de"), MappingResourceLoader({}), strict=True)
        assert exc_info.value.status == LoadStatus.NOT_FOUND

    def test_reconfigure_merges(self) -> None:
        """configure() adds to the primary map without clearing it."""
        loader = MappingResourceLoader({"en": "a=A\nshared=en", "de": "b=B\nshared=de"})
        l10n = PropertiesLocalization(Settings(language="en"), loader)
        l10n.configure(Settings(language="de"))
        assert l10n.settings.language == "de"
        assert l10n.loaded_locales == ("en", "de")
        assert l10n.prop("a") == "A"
        assert l10n.prop("shared") == "de"

    def test_reconfigure_new_fallback(self) -> None:
        """A changed fallback drops the old fallback keys and loads the new one."""
        loader = MappingResourceLoader(
            {"en": "a=A", "fr": "only_fr=fr", "de": "only_de=de"}
        )
        l10n = PropertiesLocalization(Settings(language="en", fallback="fr"), loader)
        assert l10n.prop("only_fr") == "fr"

        l10n.configure(Settings(language="en", fallback="de"))
        assert l10n.prop("only_fr", allow_null=True) is None
        assert l10n.prop("only_de") == "de"
        assert l10n.prop("a") == "A"

    def test_loader_without_describe_path(self) -> None:
        """Loaders need only implement load()."""

        class LoadOnlyLoader:
            def load(self, locale: str, settings: Settings) -> str:
                if locale != "en":
                    raise FileNotFoundError(locale)
                return "a=A"

        l10n = PropertiesLocalization(Settings(language="en_GB"), LoadOnlyLoader())
        assert l10n.prop("a") == "A"
        paths = [result.source_path for result in l10n.get_load_summary().results]
        assert paths == ["Messages_en.properties", "Messages_en_GB.properties"]

    def test_repr(self, l10n: PropertiesLocalization) -> None:
        """repr shows language, fallback and loaded locales."""
        assert repr(l10n) == (
            "PropertiesLocalization(language='en_GB', fallback='fr', loaded=('en', 'en_GB'))"
        )


class TestPlainText:
    """Values without placeholders."""

    def test_plain_value(self, l10n: PropertiesLocalization) -> None:
        """Plain text comes back unchanged."""
        assert l10n.prop("plain_text") == "this is a value."

    def test_substitutions_ignored_without_placeholders(
        self, l10n: PropertiesLocalization
    ) -> None:
        """Extra substitutions do not alter plain text."""
        assert l10n.prop("plain_text", ["a"]) == "this is a value."

    def test_trimmed(self, l10n: PropertiesLocalization) -> None:
        """Key and value whitespace is trimmed."""
        assert l10n.prop("trim_test") == "that space intentionally left blank."

    def test_value_with_equals(self, l10n: PropertiesLocalization) -> None:
        """Values may contain '='."""
        assert l10n.prop("double_equal") == "this value has another = sign in it."


class TestPlaceholders:
    """Positional substitution."""

    def test_interpolation(self, l10n: PropertiesLocalization) -> None:
        """Placeholders are replaced by position, on first and later lookups."""
        assert l10n.prop("placeholder_text", ["a", "b"]) == "this is a value with b."
        assert l10n.prop("placeholder_text", ["x", "z"]) == "this is x value with z."

    def test_missing_values_echoed(self, l10n: PropertiesLocalization) -> None:
        """Placeholders without a value stay visible."""
        assert l10n.prop("placeholder_text") == "this is {0} value with {1}."

    def test_tuple_substitutions(self, l10n: PropertiesLocalization) -> None:
        """Any sequence works; values go through str()."""
        assert l10n.prop("placeholder_text", (1, 2.5)) == "this is 1 value with 2.5."

    def test_none_substitutions(self, l10n: PropertiesLocalization) -> None:
        """None behaves like an empty sequence."""
        assert l10n.prop("plain_text", None) == "this is a value."

    def test_string_substitutions_rejected(self, l10n: PropertiesLocalization) -> None:
        """A bare string is not accepted as the substitution sequence."""
        with pytest.raises(TypeError, match="not a str"):
            l10n.prop("placeholder_text", "ab")

    def test_placeholder_indices(self, l10n: PropertiesLocalization) -> None:
        """Indices used by a value are reported."""
        assert l10n.get_placeholder_indices("placeholder_text") == frozenset({0, 1})
        assert l10n.get_placeholder_indices("plain_text") == frozenset()
        assert l10n.get_placeholder_indices("escaped_placeholder") == frozenset()
        assert l10n.get_placeholder_indices("no_such_key") is None


class TestEscapes:
    """Backslash handling end to end."""

    def test_backslash(self, l10n: PropertiesLocalization) -> None:
        """A double backslash becomes one."""
        assert l10n.prop("backslash") == "this has a backslash \\ in it."

    def test_double_backslash(self, l10n: PropertiesLocalization) -> None:
        """Four backslashes become two."""
        assert l10n.prop("double") == "this has a double backslash \\\\ in it."

    def test_escaped_placeholder(self, l10n: PropertiesLocalization) -> None:
        """An escaped placeholder is output literally, never substituted."""
        assert l10n.prop("escaped_placeholder", ["foo"]) == "this is a literal {0}."


class TestFallback:
    """Lazy fallback locale."""

    def test_fallback_value(
        self, l10n: PropertiesLocalization, fallbacks: list[FallbackInfo]
    ) -> None:
        """Keys missing from the primary map come from the fallback file."""
        assert l10n.prop("fallback") == "repli charge"
        assert fallbacks == [
            FallbackInfo(message_key="fallback", requested_locale="en_GB", fallback_locale="fr")
        ]

    def test_primary_wins_over_fallback(
        self, l10n: PropertiesLocalization, fallbacks: list[FallbackInfo]
    ) -> None:
        """Keys in both maps come from the primary map without notification."""
        l10n.prop("fallback")
        assert l10n.prop("plain_text") == "this is a value."
        assert len(fallbacks) == 1

    def test_fallback_loaded_once(
        self, l10n: PropertiesLocalization, loader: RecordingLoader
    ) -> None:
        """Repeated fallback and missing lookups load the fallback file once."""
        for _ in range(3):
            l10n.prop("fallback")
            l10n.prop("no_such_key")
        assert loader.calls.count("fr") == 1
        assert len(l10n.get_load_summary().get_by_kind(MapKind.FALLBACK)) == 1

    def test_fallback_notified_every_time(
        self, l10n: PropertiesLocalization, fallbacks: list[FallbackInfo]
    ) -> None:
        """Each fallback hit notifies."""
        l10n.prop("fallback")
        l10n.prop("fallback")
        assert len(fallbacks) == 2

    def test_fallback_same_as_primary_not_reloaded(self, loader: RecordingLoader) -> None:
        """A fallback that is already a primary locale is not loaded again."""
        settings = Settings(name="messages", language="en_GB", fallback="en", path="fixtures/")
        l10n = PropertiesLocalization(settings, loader)
        assert l10n.prop("fallback") == "[fallback]"
        assert loader.calls == ["en", "en_GB"]

    def test_has_key_after_fallback_load(self, l10n: PropertiesLocalization) -> None:
        """Fallback keys become visible once the fallback file is loaded."""
        l10n.prop("no_such_key")
        assert l10n.has_key("fallback")
        assert "fallback" in l10n.get_keys()


class TestMissingKeys:
    """Keys absent from both maps."""

    def test_bracketed_key(
        self, l10n: PropertiesLocalization, missing: list[MissingKeyInfo]
    ) -> None:
        """Missing keys return [key] and notify."""
        assert l10n.prop("foo") == "[foo]"
        assert missing == [MissingKeyInfo(message_key="foo", requested_locale="en_GB")]

    def test_logged(self, l10n: PropertiesLocalization, caplog: pytest.LogCaptureFixture) -> None:
        """Missing keys are logged at warning level."""
        with caplog.at_level(logging.WARNING, logger="propsl10n.localization.orchestrator"):
            l10n.prop("foo")
        assert "foo" in caplog.text

    @pytest.mark.parametrize("substitutions", [(), ["bar"], None])
    def test_allow_null(
        self,
        l10n: PropertiesLocalization,
        missing: list[MissingKeyInfo],
        substitutions: list[str] | None,
    ) -> None:
        """allow_null returns None and does not notify."""
        assert l10n.prop("foo", substitutions, allow_null=True) is None
        assert missing == []

    def test_allow_null_still_uses_fallback(self, l10n: PropertiesLocalization) -> None:
        """allow_null does not skip the fallback map."""
        assert l10n.prop("fallback", allow_null=True) == "repli charge"

    def test_no_negative_caching(self) -> None:
        """A key added after a miss is found on the next lookup."""
        l10n = PropertiesLocalization(Settings(), MappingResourceLoader({"en": "a=A"}))
        assert l10n.prop("late") == "[late]"
        l10n.add_resource("late=now here")
        assert l10n.prop("late") == "now here"


class TestAddResourceAndReset:
    """Direct resource merging and clearing."""

    def test_add_resource_primary(self, l10n: PropertiesLocalization) -> None:
        """Entries override the loaded ones; junk is returned."""
        junk = l10n.add_resource("police_man=constable\nbroken")
        assert l10n.prop("police_man") == "constable"
        assert [j.content for j in junk] == ["broken"]
        assert l10n.loaded_locales == ("en", "en_GB")

    def test_add_resource_fallback(
        self, l10n: PropertiesLocalization, fallbacks: list[FallbackInfo]
    ) -> None:
        """Entries can be merged into the fallback map."""
        l10n.add_resource("extra=from fallback", kind=MapKind.FALLBACK)
        assert l10n.prop("extra") == "from fallback"
        assert len(fallbacks) == 1

    def test_reset_then_configure(
        self, l10n: PropertiesLocalization, loader: RecordingLoader
    ) -> None:
        """reset() empties everything; configure() loads again."""
        l10n.prop("fallback")
        l10n.reset()
        assert l10n.get_keys() == frozenset()
        assert l10n.loaded_locales == ()
        assert l10n.get_load_summary().total_attempted == 0

        l10n.configure(l10n.settings)
        assert l10n.prop("police_man") == "bobby"
        assert l10n.prop("fallback") == "repli charge"
        assert loader.calls == ["en", "en_GB", "fr", "en", "en_GB", "fr"]


class TestConcurrentLookups:
    """Lookups from several threads."""

    def test_parallel_prop(self, l10n: PropertiesLocalization, loader: RecordingLoader) -> None:
        """Concurrent lookups agree and load the fallback at most once."""
        keys = ["placeholder_text", "fallback", "police_man", "missing_key"] * 25

        def lookup(key: str) -> str | None:
            return l10n.prop(key, ["a", "b"])

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lookup, keys))

        assert set(results) == {
            "this is a value with b.",
            "repli charge",
            "bobby",
            "[missing_key]",
        }
        assert loader.calls.count("fr") == 1


class TestPropertiesLocalizationHypothesis:
    """Property-based lookup checks."""

    @given(key=property_keys(), value=st.text(alphabet="abc xyz", min_size=1, max_size=20))
    def test_added_key_resolves(self, key: str, value: str) -> None:
        """Any added key=value resolves to the trimmed value."""
        l10n = PropertiesLocalization(Settings(), MappingResourceLoader({}))
        l10n.add_resource(f"{key}={value}")
        assert l10n.prop(key) == value.strip()

    @given(key=property_keys())
    def test_unknown_key_bracketed(self, key: str) -> None:
        """Unknown keys always come back as [key]."""
        l10n = PropertiesLocalization(Settings(), MappingResourceLoader({}))
        assert l10n.prop(key) == f"[{key}]"
