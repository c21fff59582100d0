"""Factory functions for creating translators.

Builds the merged locale table from the locales directory and the supplied
dictionaries, validates it, and returns a ready ``Translator``. Building is
all-or-nothing: on any error no translator is returned.
"""

from typing import Any, Dict, Mapping, Optional, Union

from fastapi.concurrency import run_in_threadpool

from infrastructure.i18n.errors import MissingDefaultLocaleError, NoLocalesError
from infrastructure.i18n.loader import load_locales
from infrastructure.i18n.merge import merge_locale_tables
from infrastructure.i18n.models import I18nOptions
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

OptionsInput = Union[I18nOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsInput = None) -> I18nOptions:
    """Coerce ``options`` into ``I18nOptions``.

    Args:
        options: ``I18nOptions``, a plain mapping (snake_case or camelCase
            keys), or None for the defaults.

    Returns:
        Validated I18nOptions.

    Raises:
        pydantic.ValidationError: If the mapping is invalid.
    """
    if options is None:
        return I18nOptions()
    if isinstance(options, I18nOptions):
        return options
    return I18nOptions.model_validate(dict(options))


def build_locale_table(options: I18nOptions) -> Dict[str, Dict[str, str]]:
    """Load, merge and validate the locale table described by ``options``.

    Args:
        options: Validated options.

    Returns:
        Merged table, with supplied phrases overriding on-disk ones.

    Raises:
        NoLocalesError: If no dictionary was found at all.
        MissingDefaultLocaleError: If the default locale has no (or an empty)
            dictionary.
        LocaleParseError: If a dictionary file is malformed.
    """
    on_disk = load_locales(options.locales_path)
    table = merge_locale_tables(on_disk, options.locales)

    if not table:
        logger.error(
            "no_locales_found",
            locales_path=str(options.locales_path) if options.locales_path else None,
            default_locale=options.default_locale,
        )
        raise NoLocalesError(options.default_locale)

    if not table.get(options.default_locale):
        logger.error(
            "default_locale_dictionary_missing",
            default_locale=options.default_locale,
            available_locales=sorted(table),
        )
        raise MissingDefaultLocaleError(options.default_locale)

    return table


def initialize(options: OptionsInput = None) -> Translator:
    """Create a ready Translator.

    Args:
        options: ``I18nOptions`` or an equivalent mapping, e.g.
            ``{"defaultLocale": "en", "localesPath": "locales",
            "locales": {"it": {"hi": "Ciao"}}}``.

    Returns:
        Translator over the frozen, merged locale table.

    Raises:
        NoLocalesError: If no dictionary was found at all.
        MissingDefaultLocaleError: If the default locale has no dictionary.
        LocaleParseError: If a dictionary file is malformed.
        pydantic.ValidationError: If ``options`` is invalid.

    Usage:
        translator = initialize({"locales": {"en": {"hi": "Hello"}}})
        translator.t("hi")  # "Hello"
    """
    resolved = resolve_options(options)
    table = build_locale_table(resolved)
    translator = Translator(table, default_locale=resolved.default_locale)

    logger.info(
        "translator_created",
        default_locale=resolved.default_locale,
        locales=translator.available_locales,
    )
    return translator


async def initialize_async(options: OptionsInput = None) -> Translator:
    """Create a Translator without blocking the event loop.

    The directory scan and parsing run in the threadpool; the translator is
    only returned once they have completed.
    """
    resolved = resolve_options(options)
    return await run_in_threadpool(initialize, resolved)


def create_translator(
    locales_path: Optional[Any] = None,
    default_locale: Optional[str] = None,
    locales: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> Translator:
    """Keyword-argument shortcut for ``initialize``."""
    options: Dict[str, Any] = {"locales_path": locales_path, "locales": locales}
    if default_locale is not None:
        options["default_locale"] = default_locale
    return initialize(options)
