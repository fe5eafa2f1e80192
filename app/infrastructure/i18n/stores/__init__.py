"""Persistent stores for exported translation caches.

Usage:

    from infrastructure.i18n.stores import get_store

    store = get_store()

    cache = store.read("TranslatorAutoload.posts.index")
    if cache is not None:
        translator.import_cache(cache)

    store.write("TranslatorAutoload.posts.index", translator.export())
"""

from infrastructure.i18n.stores.base import TranslationCacheStore
from infrastructure.i18n.stores.factory import create_store, get_store, reset_store
from infrastructure.i18n.stores.file import FileCacheStore
from infrastructure.i18n.stores.memory import MemoryCacheStore

__all__ = [
    "TranslationCacheStore",
    "MemoryCacheStore",
    "FileCacheStore",
    "create_store",
    "get_store",
    "reset_store",
]
