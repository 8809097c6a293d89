"""Infrastructure modules for the translation catalog manager.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- hookspecs: Plugin hook specifications (language override, plugin
  translations, client-side keys)
- i18n: Translation catalog store, loader, resolver and client export
- services: Dependency injection providers and plugin managers
"""
