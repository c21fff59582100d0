"""Tests for infrastructure.i18n.models module."""

from pathlib import Path
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from infrastructure.i18n import DEFAULT_LOCALE, I18nOptions


class TestI18nOptions:
    """Tests for I18nOptions."""

    def test_defaults(self):
        options = I18nOptions()
        assert options.default_locale == DEFAULT_LOCALE == "en"
        assert options.locales_path is None
        assert options.locales is None

    def test_camel_case_aliases(self):
        options = I18nOptions.model_validate(
            {"defaultLocale": "it", "localesPath": "locales"}
        )
        assert options.default_locale == "it"
        assert options.locales_path == Path("locales")

    def test_snake_case_names(self):
        options = I18nOptions(default_locale="it", locales_path="locales")
        assert options.default_locale == "it"
        assert options.locales_path == Path("locales")

    def test_nested_supplied_phrases_are_flattened(self):
        options = I18nOptions(locales={"en": {"nav": {"home": "Home"}}})
        assert options.locales == {"en": {"nav.home": "Home"}}

    def test_non_mapping_dictionary_rejected(self):
        with pytest.raises(ValidationError):
            I18nOptions(locales={"en": "Hello"})

    def test_non_mapping_locales_rejected(self):
        with pytest.raises(ValidationError):
            I18nOptions(locales=["en"])

    def test_non_string_phrase_key_rejected(self):
        with pytest.raises(ValidationError):
            I18nOptions(locales={"en": {False: "No"}})

    def test_non_string_locale_code_rejected(self):
        with pytest.raises(ValidationError):
            I18nOptions(locales={1: {"hi": "Hello"}})

    def test_empty_default_locale_rejected(self):
        with pytest.raises(ValidationError):
            I18nOptions(default_locale="")

    def test_options_are_frozen(self):
        options = I18nOptions()
        with pytest.raises(ValidationError):
            options.default_locale = "it"

    def test_from_settings(self):
        settings = SimpleNamespace(
            i18n=SimpleNamespace(DEFAULT_LOCALE="fr", LOCALES_PATH=Path("/srv/locales"))
        )
        options = I18nOptions.from_settings(settings)
        assert options.default_locale == "fr"
        assert options.locales_path == Path("/srv/locales")
        assert options.locales is None
