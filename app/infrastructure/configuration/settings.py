"""Application configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import (
    I18nSettings,
    TranslationCacheSettings,
    TranslatorSettings,
)


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **i18n**: Default locale, supported locales, catalog directory, formatter
    - **translator**: Registry default name, translator class, autoload events
    - **translation_cache**: Persistent cache store backend

    Environment Variables:
        PREFIX: Environment prefix for multi-tenant deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Deployed revision reported by /version

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        locale = settings.i18n.I18N_DEFAULT_LOCALE
        backend = settings.translation_cache.TRANSLATION_CACHE_BACKEND

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings
    translator: TranslatorSettings
    translation_cache: TranslationCacheSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
            "translator": TranslatorSettings,
            "translation_cache": TranslationCacheSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
