"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.configuration.infrastructure.translation_cache import (
    TranslationCacheSettings,
)
from infrastructure.configuration.infrastructure.translator import TranslatorSettings

__all__ = [
    "I18nSettings",
    "TranslationCacheSettings",
    "TranslatorSettings",
]
