"""Infrastructure modules for the translation engine.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale-aware translation catalog and resolver
"""
