"""Tests for infrastructure.i18n.resolver module and Catalog lookups."""

import random

import pytest

from infrastructure.i18n import Catalog, Locale
from infrastructure.i18n.resolver import (
    choose_variant,
    resolve,
    resolve_default,
    resolve_localizations,
)
from tests.factories.i18n import make_catalog


class TestGet:
    """Tests for Catalog.get()."""

    @pytest.mark.parametrize(
        "locale,key,variables,want_any",
        [
            (Locale.RU, "hello.world", {"name": "World"}, ["Привет, World!"]),
            (Locale.RU, "goodbye", None, ["Пока!", "До свидания!"]),
            (Locale.EN_US, "hello.world", {"name": "World"}, ["Hello, World!"]),
            (Locale.EN_US, "goodbye", None, ["See you!", "Goodbye!"]),
            (Locale.DE, "hello.world", {"name": "Welt"}, ["Hallo, Welt!"]),
            (Locale.DE, "goodbye", None, ["Tschüss!", "Auf Wiedersehen!"]),
        ],
    )
    def test_translations_for_multiple_locales(
        self, loaded_catalog, locale, key, variables, want_any
    ):
        assert loaded_catalog.get(locale, key, variables) in want_any

    def test_variants_stay_within_sequence(self, loaded_catalog):
        """Repeated lookups only return stored variants and vary over trials."""
        results = {loaded_catalog.get(Locale.EN_US, "goodbye") for _ in range(200)}
        assert results <= {"See you!", "Goodbye!"}
        assert len(results) > 1

    def test_goodbye_scenario(self):
        catalog = make_catalog(bundles={"L1": {"goodbye": ["Bye!", "See ya!"]}})
        assert catalog.get("L1", "goodbye") in {"Bye!", "See ya!"}

    def test_string_and_enum_locale_equivalent(self, loaded_catalog):
        assert loaded_catalog.get("de", "hello.world", {"name": "X"}) == "Hallo, X!"

    def test_template_without_variables_returned_raw(self, loaded_catalog):
        """variables=None skips rendering entirely."""
        assert loaded_catalog.get(Locale.EN_US, "hello.world") == "Hello, {{.name}}!"

    def test_undefined_variable_returns_raw_template(self, loaded_catalog):
        result = loaded_catalog.get(Locale.EN_US, "hello.world", {"other": "x"})
        assert result == "Hello, {{.name}}!"

    def test_empty_variables_still_strict(self, loaded_catalog):
        result = loaded_catalog.get(Locale.EN_US, "hello.world", {})
        assert result == "Hello, {{.name}}!"

    def test_malformed_template_returns_raw_text(self):
        catalog = make_catalog(bundles={"en-US": {"broken": ["Hi {{.name"]}})
        assert catalog.get("en-US", "broken", {"name": "x"}) == "Hi {{.name"

    def test_plain_variant_ignores_variables(self):
        catalog = make_catalog(bundles={"en-US": {"plain": ["Just text"]}})
        assert catalog.get("en-US", "plain", {"name": "x"}) == "Just text"

    def test_raising_variable_returns_raw_template(self):
        class Flaky:
            @property
            def name(self):
                raise ValueError("backend down")

        catalog = make_catalog(bundles={"en-US": {"hi": "Hi {{.user.name}}"}})
        assert catalog.get("en-US", "hi", {"user": Flaky()}) == "Hi {{.user.name}}"

    def test_dotless_placeholder_returns_raw_template(self):
        catalog = make_catalog(bundles={"en-US": {"hi": "Hi {{ name }}"}})
        assert catalog.get("en-US", "hi", {"name": "x"}) == "Hi {{ name }}"


class TestFallback:
    """Tests for single-hop fallback behaviour."""

    def test_unloaded_locale_falls_back_to_default(self, catalog, temp_locales_dir):
        catalog.load_bundle(Locale.RU, temp_locales_dir / "ru.json")
        catalog.load_bundle(Locale.EN_US, temp_locales_dir / "en-US.json")
        catalog.set_default(Locale.EN_US)

        translation = catalog.get(Locale.DE, "hello.world", {"name": "Welt"})
        assert translation == "Hello, Welt!"

    def test_missing_key_falls_back_to_default(self, loaded_catalog):
        loaded_catalog.upsert(Locale.EN_US, "only.english", "English only")
        assert loaded_catalog.get(Locale.DE, "only.english") == "English only"

    def test_empty_variants_fall_back_to_default(self, loaded_catalog):
        loaded_catalog.translations["de"]["goodbye"] = []
        assert loaded_catalog.get(Locale.DE, "goodbye") in {"See you!", "Goodbye!"}

    def test_missing_key_in_some_locales(self, loaded_catalog):
        """A key only in a non-default locale resolves to the key for the default."""
        russian_bundle = loaded_catalog.translations[Locale.RU.value]
        russian_bundle["new.key"] = ["Новый ключ"]

        assert loaded_catalog.get(Locale.EN_US, "new.key") == "new.key"
        assert loaded_catalog.get(Locale.RU, "new.key") == "Новый ключ"

    def test_missing_everywhere_returns_key(self, loaded_catalog):
        assert loaded_catalog.get(Locale.DE, "does.not.exist") == "does.not.exist"

    def test_default_locale_not_loaded_returns_key(self, catalog):
        assert catalog.get(Locale.EN_US, "hello.world") == "hello.world"

    def test_unloaded_locale_and_unloaded_default_returns_key(self, catalog):
        assert catalog.get(Locale.RU, "hello.world", {"name": "x"}) == "hello.world"

    def test_fallback_is_single_hop(self):
        """Fallback goes to the default only, never to a related locale."""
        catalog = make_catalog(
            default_locale=Locale.EN_US,
            bundles={"pt": {"greeting": "Olá"}, "en-US": {"other": "x"}},
        )
        assert catalog.get(Locale.PT_BR, "greeting") == "greeting"

    def test_fallback_matches_default_result(self, loaded_catalog):
        loaded_catalog.upsert(Locale.EN_US, "welcome", "Welcome {{.name}}")
        variables = {"name": "Ann"}
        assert loaded_catalog.get(Locale.DE, "welcome", variables) == (
            loaded_catalog.get(loaded_catalog.default_locale, "welcome", variables)
        )

    def test_changed_default_changes_fallback(self, loaded_catalog):
        loaded_catalog.upsert(Locale.RU, "only.russian", "Только русский")
        loaded_catalog.set_default(Locale.RU)
        assert loaded_catalog.get(Locale.DE, "only.russian") == "Только русский"


class TestGetDefault:
    """Tests for Catalog.get_default()."""

    @pytest.mark.parametrize(
        "key,variables",
        [
            ("hello.world", {"name": "World"}),
            ("hello.world", None),
            ("missing.key", None),
            ("hello.world", {"wrong": "x"}),
        ],
    )
    def test_get_default_equals_get_on_default(self, loaded_catalog, key, variables):
        assert loaded_catalog.get_default(key, variables) == loaded_catalog.get(
            loaded_catalog.default_locale, key, variables
        )

    def test_get_default_uses_current_default(self, loaded_catalog):
        loaded_catalog.set_default(Locale.DE)
        assert loaded_catalog.get_default("hello.world", {"name": "Welt"}) == (
            "Hallo, Welt!"
        )


class TestGetLocalizations:
    """Tests for Catalog.get_localizations()."""

    def test_all_loaded_locales(self, loaded_catalog):
        result = loaded_catalog.get_localizations("hello.world", {"name": "Bot"})
        assert result == {
            "ru": "Привет, Bot!",
            "en-US": "Hello, Bot!",
            "de": "Hallo, Bot!",
        }

    def test_missing_keys_fall_back_per_locale(self, loaded_catalog):
        loaded_catalog.upsert(Locale.EN_US, "help", "Help")
        loaded_catalog.upsert(Locale.RU, "help", "Помощь")

        result = loaded_catalog.get_localizations("help")
        assert result == {"ru": "Помощь", "en-US": "Help", "de": "Help"}

    def test_empty_catalog(self, catalog):
        assert catalog.get_localizations("anything") == {}


class TestResolverFunctions:
    """Tests for the module-level resolver functions."""

    def test_resolve_matches_catalog_get(self):
        catalog = make_catalog(bundles={"en-US": {"k": "v"}})
        assert resolve(catalog, "en-US", "k") == catalog.get("en-US", "k")

    def test_resolve_default(self):
        catalog = make_catalog(bundles={"en-US": {"k": "v"}})
        assert resolve_default(catalog, "k") == "v"

    def test_resolve_localizations(self):
        catalog = make_catalog(bundles={"en-US": {"k": "v"}, "fr": {"k": "w"}})
        assert resolve_localizations(catalog, "k") == {"en-US": "v", "fr": "w"}

    def test_choose_variant_uses_rng(self):
        variants = ["a", "b", "c"]
        rng_one, rng_two = random.Random(3), random.Random(3)
        first = [choose_variant(variants, rng_one) for _ in range(20)]
        second = [choose_variant(variants, rng_two) for _ in range(20)]
        assert first == second
        assert set(first) <= set(variants)

    def test_seeded_catalogs_are_reproducible(self):
        bundles = {"en-US": {"k": ["a", "b", "c", "d"]}}
        one = Catalog(rng=random.Random(9))
        two = Catalog(rng=random.Random(9))
        for catalog in (one, two):
            for key, variants in bundles["en-US"].items():
                catalog.upsert("en-US", key, variants)

        assert [one.get("en-US", "k") for _ in range(10)] == [
            two.get("en-US", "k") for _ in range(10)
        ]
