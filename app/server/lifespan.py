from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import register_async
from infrastructure.i18n.factory import OptionsInput
from infrastructure.i18n.plugin import unregister
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        log_level=settings.LOG_LEVEL,
        is_production=settings.is_production,
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


async def _activate_i18n(
    app: FastAPI,
    options: OptionsInput,
    logger: BoundLogger,
) -> None:
    try:
        await register_async(app, options)
    except Exception as exc:
        # Fail fast: the application must not start without a translator
        logger.error("i18n_activation_failed", error=str(exc))
        raise


def build_lifespan(
    options: OptionsInput = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    """Build the application lifespan.

    ``options`` are passed to the i18n plugin; None reads them from settings.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = _get_logger(settings)

        app.state.settings = settings
        app.state.logger = logger

        logger.info("application_startup")
        _list_configs(settings, logger)

        await _activate_i18n(app, options, logger)

        try:
            yield
        finally:
            logger.info("application_shutdown")
            unregister(app)

    return lifespan


