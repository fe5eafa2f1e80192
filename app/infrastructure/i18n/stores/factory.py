"""Translation cache store factory."""

from pathlib import Path
from threading import Lock
from typing import Optional

from infrastructure.i18n.exceptions import TranslatorConfigurationError
from infrastructure.i18n.stores.base import TranslationCacheStore
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

# Singleton store instance
_store_instance: Optional[TranslationCacheStore] = None
_store_lock = Lock()


def create_store(backend: Optional[str] = None) -> TranslationCacheStore:
    """Build a store for ``backend`` (default: TRANSLATION_CACHE_BACKEND).

    Raises:
        TranslatorConfigurationError: If the backend name is unknown.
    """
    cache_settings = get_settings().translation_cache
    backend = backend or cache_settings.TRANSLATION_CACHE_BACKEND

    if backend == "memory":
        from infrastructure.i18n.stores.memory import MemoryCacheStore

        return MemoryCacheStore()

    if backend == "file":
        from infrastructure.i18n.stores.file import FileCacheStore

        return FileCacheStore(Path(cache_settings.TRANSLATION_CACHE_DIR))

    if backend == "dynamodb":
        from infrastructure.i18n.stores.dynamodb import DynamoDBCacheStore

        return DynamoDBCacheStore(
            table_name=cache_settings.TRANSLATION_CACHE_TABLE,
            ttl_seconds=cache_settings.TRANSLATION_CACHE_TTL_SECONDS,
            region_name=cache_settings.AWS_REGION,
        )

    logger.error("unknown_cache_store_backend", backend=backend)
    raise TranslatorConfigurationError(f"Unknown translation cache backend '{backend}'")


def get_store() -> TranslationCacheStore:
    """Get the translation cache store singleton for the configured backend."""
    global _store_instance

    with _store_lock:
        if _store_instance is None:
            _store_instance = create_store()
            logger.info(
                "initialized_translation_cache_store",
                backend=type(_store_instance).__name__,
            )
        return _store_instance


def reset_store() -> None:
    """Reset the store singleton (for testing only)."""
    global _store_instance

    with _store_lock:
        _store_instance = None
    logger.debug("reset_store_singleton")
