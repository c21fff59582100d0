"""FastAPI integration for the i18n plugin.

Registration builds a Translator and binds it to ``app.state.i18n``. Routes
get it back through the ``I18nDep`` dependency.

Usage:
    app = FastAPI(lifespan=i18n_lifespan({"localesPath": "locales"}))

    @app.get("/greeting")
    def greeting(i18n: I18nDep, locale: str = "en"):
        return {"message": i18n.t("hi", {"locale": locale})}
"""

from contextlib import asynccontextmanager
from typing import Annotated, AsyncContextManager, AsyncIterator, Callable

from fastapi import Depends, FastAPI, Request

from infrastructure.i18n.errors import (
    ERR_PLUGIN_ALREADY_REGISTERED,
    ConfigurationError,
    PluginNotRegisteredError,
)
from infrastructure.i18n.factory import OptionsInput, initialize, initialize_async
from infrastructure.i18n.models import I18nOptions
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

STATE_ATTRIBUTE = "i18n"


def _options_or_settings(options: OptionsInput) -> OptionsInput:
    if options is None:
        return I18nOptions.from_settings(get_settings())
    return options


def _ensure_not_registered(app: FastAPI) -> None:
    if getattr(app.state, STATE_ATTRIBUTE, None) is not None:
        logger.error("i18n_already_registered")
        raise ConfigurationError(ERR_PLUGIN_ALREADY_REGISTERED)


def _bind(app: FastAPI, translator: Translator) -> Translator:
    setattr(app.state, STATE_ATTRIBUTE, translator)
    logger.info(
        "i18n_registered",
        default_locale=translator.default_locale,
        locales=translator.available_locales,
    )
    return translator


def register(app: FastAPI, options: OptionsInput = None) -> Translator:
    """Build a Translator and attach it to ``app.state.i18n``.

    When ``options`` is None they are read from the application settings
    (``I18N_DEFAULT_LOCALE``, ``I18N_LOCALES_PATH``). On failure
    ``app.state`` is left untouched and the error propagates.

    Args:
        app: FastAPI application.
        options: ``I18nOptions`` or an equivalent mapping.

    Returns:
        The registered Translator.

    Raises:
        ConfigurationError: If the plugin is already registered, or if the
            options produce no usable locale table.
        LocaleParseError: If a dictionary file is malformed.
    """
    _ensure_not_registered(app)
    translator = initialize(_options_or_settings(options))
    return _bind(app, translator)


async def register_async(app: FastAPI, options: OptionsInput = None) -> Translator:
    """Async variant of ``register``; locale files are read in the threadpool.

    The registration check runs again once loading completes, so of two
    concurrent calls on the same app only the first to finish binds; the
    other raises ``ConfigurationError``.
    """
    _ensure_not_registered(app)
    translator = await initialize_async(_options_or_settings(options))
    _ensure_not_registered(app)
    return _bind(app, translator)


def unregister(app: FastAPI) -> None:
    """Detach the translator from ``app.state`` (used on shutdown)."""
    if getattr(app.state, STATE_ATTRIBUTE, None) is not None:
        setattr(app.state, STATE_ATTRIBUTE, None)
        logger.info("i18n_unregistered")


def i18n_lifespan(
    options: OptionsInput = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    """Create a FastAPI lifespan that registers the plugin on startup.

    Startup fails if the translator cannot be built.

    Args:
        options: ``I18nOptions`` or an equivalent mapping; None reads settings.

    Returns:
        Lifespan callable for ``FastAPI(lifespan=...)``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await register_async(app, options)
        try:
            yield
        finally:
            unregister(app)

    return lifespan


def get_i18n(request: Request) -> Translator:
    """FastAPI dependency returning the application's Translator.

    Raises:
        PluginNotRegisteredError: If the plugin was never registered.
    """
    translator = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if translator is None:
        logger.error("i18n_not_registered", path=request.url.path)
        raise PluginNotRegisteredError()
    return translator


# Translator dependency
I18nDep = Annotated[Translator, Depends(get_i18n)]
