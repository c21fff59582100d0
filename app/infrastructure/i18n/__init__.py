"""i18n system - locale dictionaries and translation for FastAPI applications.

Loads per-locale dictionaries from a directory and/or an in-memory mapping,
merges them (supplied phrases win), validates the default locale and exposes
a translator with requested -> default -> key fallback.

Main components:
- models: I18nOptions, LocaleTable
- loader: LocaleLoader and YAMLLocaleLoader
- merge: two-level locale table merge helpers
- translator: Translator with fallback lookup and interpolation
- factory: initialize() / initialize_async()
- plugin: register() / i18n_lifespan() / I18nDep for FastAPI
"""

from infrastructure.i18n.errors import (
    ERR_MISSING_DICTIONARY_FOR_DEFAULT_LOCALE,
    ERR_NO_LOCALES,
    ConfigurationError,
    I18nError,
    LocaleParseError,
    MissingDefaultLocaleError,
    NoLocalesError,
    PluginNotRegisteredError,
)
from infrastructure.i18n.factory import create_translator, initialize, initialize_async
from infrastructure.i18n.loader import LocaleLoader, YAMLLocaleLoader, load_locales
from infrastructure.i18n.merge import merge_locale_tables
from infrastructure.i18n.models import DEFAULT_LOCALE, I18nOptions, LocaleTable
from infrastructure.i18n.plugin import (
    I18nDep,
    get_i18n,
    i18n_lifespan,
    register,
    register_async,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "DEFAULT_LOCALE",
    "ERR_MISSING_DICTIONARY_FOR_DEFAULT_LOCALE",
    "ERR_NO_LOCALES",
    "ConfigurationError",
    "I18nError",
    "LocaleParseError",
    "MissingDefaultLocaleError",
    "NoLocalesError",
    "PluginNotRegisteredError",
    "I18nOptions",
    "LocaleTable",
    "LocaleLoader",
    "YAMLLocaleLoader",
    "load_locales",
    "merge_locale_tables",
    "Translator",
    "initialize",
    "initialize_async",
    "create_translator",
    "register",
    "register_async",
    "i18n_lifespan",
    "get_i18n",
    "I18nDep",
]
