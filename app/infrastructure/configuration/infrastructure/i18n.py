"""Internationalization infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Locale and message catalog configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when a request does not specify one
            (default: en_US)
        I18N_SUPPORTED_LOCALES: JSON list of locales the application serves
        I18N_LOCALES_DIR: Directory holding ``<domain>.<locale>.yml`` catalogs
            (default: auto-discover app/locales)
        I18N_DEFAULT_FORMATTER: Token formatter name, ``default`` (ICU-style)
            or ``sprintf`` (default: default)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        locale = settings.i18n.I18N_DEFAULT_LOCALE
        ```
    """

    I18N_DEFAULT_LOCALE: str = Field(default="en_US", alias="I18N_DEFAULT_LOCALE")
    I18N_SUPPORTED_LOCALES: List[str] = Field(
        default_factory=lambda: ["en_US", "fr_FR"],
        alias="I18N_SUPPORTED_LOCALES",
    )
    I18N_LOCALES_DIR: str | None = Field(default=None, alias="I18N_LOCALES_DIR")
    I18N_DEFAULT_FORMATTER: str = Field(
        default="default", alias="I18N_DEFAULT_FORMATTER"
    )
