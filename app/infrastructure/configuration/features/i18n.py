"""i18n feature settings."""

from pathlib import Path

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale loading configuration used when the plugin is registered
    without explicit options.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used for fallback lookups (default: en)
        I18N_LOCALES_PATH: Directory holding one dictionary file per locale.
            Unset means no directory is scanned; there is no implicit
            ``locales/`` relative to the working directory.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.i18n.DEFAULT_LOCALE
        locales_path = settings.i18n.LOCALES_PATH
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    LOCALES_PATH: Path | None = Field(default=None, alias="I18N_LOCALES_PATH")
