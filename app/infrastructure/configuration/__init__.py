"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the application
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale and catalog settings class
    TranslatorSettings: Translator registry and autoload settings class
    TranslationCacheSettings: Cache store backend settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    locale = settings.i18n.I18N_DEFAULT_LOCALE
    events = settings.translator.TRANSLATOR_AUTOLOAD_EVENTS

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.infrastructure import (
    I18nSettings,
    TranslationCacheSettings,
    TranslatorSettings,
)
from infrastructure.configuration.settings import Settings

__all__ = [
    "Settings",
    "I18nSettings",
    "TranslatorSettings",
    "TranslationCacheSettings",
]
