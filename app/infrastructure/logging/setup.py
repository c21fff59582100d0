"""Structlog setup for the i18n plugin and its host application.

``configure_logging()`` is called once by the server lifespan with the
application settings; every other module asks for a logger bound to its own
dotted path through ``get_module_logger()``. Output is silenced while pytest
is running.
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.services.providers import get_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(is_production: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_silent() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Events such as ``locales_loaded`` or ``i18n_registered`` are rendered
    on the console in development and as JSON lines in production, with
    timestamp, level and callsite attached.

    Args:
        log_level: Level name; falls back to ``Settings.LOG_LEVEL``.
        is_production: Rendering mode; falls back to ``Settings.is_production``.

    Returns:
        Root structlog logger.
    """
    if _is_test_environment():
        _configure_silent()
        return structlog.stdlib.get_logger()

    settings = get_settings()
    if is_production is None:
        is_production = settings.is_production

    structlog.configure(
        processors=_build_processors(is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the caller's module.

    ``infrastructure/i18n/loader.py`` gets ``component="loader"`` and
    ``module_path="infrastructure.i18n.loader"``.
    """
    current_frame = inspect.currentframe()
    caller = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
