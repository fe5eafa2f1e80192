"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n.registry import TranslatorRegistry, get_registry
from infrastructure.i18n.stores import TranslationCacheStore, get_store
from infrastructure.i18n.translator import TranslatorInterface
from infrastructure.services.providers import get_settings


def get_default_translator() -> TranslatorInterface:
    """Provider for the registry's default translator."""
    registry = get_registry()
    return registry.get(registry.default_translator())


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translator registry dependency
TranslatorRegistryDep = Annotated[TranslatorRegistry, Depends(get_registry)]

# Default translator dependency
TranslatorDep = Annotated[TranslatorInterface, Depends(get_default_translator)]

# Persistent translation cache store dependency
TranslationCacheStoreDep = Annotated[TranslationCacheStore, Depends(get_store)]

__all__ = [
    "SettingsDep",
    "TranslatorRegistryDep",
    "TranslatorDep",
    "TranslationCacheStoreDep",
    "get_default_translator",
]
