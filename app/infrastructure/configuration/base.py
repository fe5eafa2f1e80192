"""Shared base class for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class InfrastructureSettings(BaseSettings):
    """Base class for infrastructure-level settings.

    Every settings section (locales and catalogs, translator registry,
    translation cache store) inherits from this class to get the same
    configuration behavior: env file loading, case sensitivity and ignored
    unknown variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
