"""Infrastructure modules for the translation cache service.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings, TranslatorSettings)
- i18n: Route-scoped translation cache, catalogs and cache stores
- logging: Structured logging (get_module_logger, bind_request_context)
- services: Dependency injection services (SettingsDep, TranslatorDep, get_settings)
"""

# Configuration
from infrastructure.configuration import Settings

# Observability
from infrastructure.logging import get_module_logger

# Dependency Injection Services
from infrastructure.services import get_settings

__all__ = [
    # Configuration
    "Settings",
    # Observability
    "get_module_logger",
    # Dependency Injection Services
    "get_settings",
]
