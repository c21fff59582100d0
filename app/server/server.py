from fastapi import FastAPI

from infrastructure.i18n.factory import OptionsInput
from server.lifespan import build_lifespan


def create_app(options: OptionsInput = None) -> FastAPI:
    """Create the FastAPI application with the i18n plugin wired into its lifespan.

    Args:
        options: i18n options; None reads ``I18N_*`` settings from the environment.

    Returns:
        FastAPI application. ``app.state.i18n`` is available once startup completes.
    """
    return FastAPI(lifespan=build_lifespan(options))
