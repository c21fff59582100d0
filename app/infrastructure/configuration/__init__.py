"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale loading settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    default_locale = settings.i18n.DEFAULT_LOCALE
    ```
"""

from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings"]
