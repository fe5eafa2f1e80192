"""i18n system - route-scoped translation cache.

Resolves message keys against an ordered list of domains for the current
locale, memoizes every resolution, and loads / saves that memo per route
through a persistent cache store.

Main components:
- storage: nested key-path helpers
- translator: TranslatorInterface and the TranslationCache translator
- registry: named translator instances with a default
- autoload: RequestCacheBinding tying the cache to a request route
- shortcuts: translate(), translate_plural(), translate_context(), ...
- catalog / loader: YAML catalogs consulted on cache misses
- formatters: ICU-style and printf-style token interpolation
- stores: memory, file and DynamoDB cache stores
"""

from infrastructure.i18n.autoload import (
    CacheAction,
    LifecyclePhase,
    RequestCacheBinding,
    RouteParams,
)
from infrastructure.i18n.catalog import CatalogResolver, YAMLCatalogResolver
from infrastructure.i18n.exceptions import (
    MissingTranslatorClassError,
    TranslatorConfigurationError,
    TranslatorError,
)
from infrastructure.i18n.formatters import (
    FormatterLocator,
    IcuFormatter,
    SprintfFormatter,
)
from infrastructure.i18n.loader import CatalogLoader, YAMLCatalogLoader
from infrastructure.i18n.models import MessageVariant, TranslationCatalog
from infrastructure.i18n.registry import TranslatorRegistry, clear_registry, get_registry
from infrastructure.i18n.translator import TranslationCache, TranslatorInterface

__all__ = [
    "CacheAction",
    "LifecyclePhase",
    "RequestCacheBinding",
    "RouteParams",
    "CatalogResolver",
    "YAMLCatalogResolver",
    "CatalogLoader",
    "YAMLCatalogLoader",
    "FormatterLocator",
    "IcuFormatter",
    "SprintfFormatter",
    "MessageVariant",
    "TranslationCatalog",
    "TranslatorRegistry",
    "get_registry",
    "clear_registry",
    "TranslationCache",
    "TranslatorInterface",
    "TranslatorError",
    "TranslatorConfigurationError",
    "MissingTranslatorClassError",
]
