"""Infrastructure modules for the application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- services: Dependency injection services (SettingsDep, get_settings)
- i18n: Locale loading, merging and translation (initialize, register, I18nDep)
"""
