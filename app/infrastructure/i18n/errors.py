"""Exceptions raised while building or using the i18n plugin.

Every error carries a stable ``code`` so callers can branch on the failure
without parsing messages.
"""

from pathlib import Path
from typing import Optional

ERR_MISSING_DICTIONARY_FOR_DEFAULT_LOCALE = "Missing dictionary for default locale"
ERR_NO_LOCALES = "No locales found: provide locales_path and/or locales"
ERR_PLUGIN_NOT_REGISTERED = "i18n plugin has not been registered on this application"
ERR_PLUGIN_ALREADY_REGISTERED = "i18n plugin is already registered on this application"


class I18nError(Exception):
    """Base class for i18n errors."""

    code = "ERR_I18N"


class ConfigurationError(I18nError):
    """Raised when the plugin options cannot produce a usable locale table."""

    code = "ERR_I18N_CONFIGURATION"


class MissingDefaultLocaleError(ConfigurationError):
    """The merged locale table has no dictionary for the default locale.

    The message is always ``ERR_MISSING_DICTIONARY_FOR_DEFAULT_LOCALE``.

    Attributes:
        locale: The configured default locale.
    """

    code = "ERR_MISSING_DICTIONARY_FOR_DEFAULT_LOCALE"

    def __init__(self, locale: str):
        super().__init__(ERR_MISSING_DICTIONARY_FOR_DEFAULT_LOCALE)
        self.locale = locale


class NoLocalesError(MissingDefaultLocaleError):
    """Neither the locales directory nor the supplied locales produced a
    dictionary.

    An empty table cannot hold the default locale either, so this is a
    specialisation of ``MissingDefaultLocaleError``; use ``code`` or
    ``isinstance`` to tell the two apart.
    """

    code = "ERR_NO_LOCALES"

    @property
    def reason(self) -> str:
        return ERR_NO_LOCALES


class LocaleParseError(I18nError, ValueError):
    """A dictionary file could not be parsed into a key -> string mapping.

    Attributes:
        path: File that failed to parse.
    """

    code = "ERR_LOCALE_PARSE"

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class PluginNotRegisteredError(I18nError, RuntimeError):
    """The translator was requested from an application that never registered
    the plugin."""

    code = "ERR_PLUGIN_NOT_REGISTERED"

    def __init__(self, message: str = ERR_PLUGIN_NOT_REGISTERED):
        super().__init__(message)
