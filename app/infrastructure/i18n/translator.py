"""Translation cache service.

The translator resolves message keys against an ordered list of domains for
the current locale and memoizes every resolution in a nested mapping::

    {locale: {domains_key: {message_key: message}}}

The mapping can be exported after a request and imported again on the next
one, so each key is looked up in the catalogs at most once per route.
"""

import copy
import json
from abc import ABC, abstractmethod
from contextvars import ContextVar
from dataclasses import dataclass, field
from threading import Lock, RLock
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, Union

from infrastructure.i18n import storage
from infrastructure.i18n.catalog import CatalogResolver
from infrastructure.i18n.factory import create_catalog_resolver
from infrastructure.i18n.formatters import FormatterLocator
from infrastructure.i18n.locale import get_locale
from infrastructure.i18n.models import VARIANT_TOKENS, MessageVariant
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import get_settings

logger = get_module_logger()

CacheData = Dict[str, Dict[str, Dict[str, str]]]
Tokens = Union[Mapping[str, Any], Iterable[Any], None]

_instances: Dict[type, "TranslatorInterface"] = {}
_instances_lock = Lock()


def encode_domains(domains: Iterable[str]) -> str:
    """Return the cache partition key for an ordered list of domains."""
    return json.dumps(list(domains), ensure_ascii=False)


@dataclass
class DomainScope:
    """Domains searched by one request, and their cache partition key."""

    domains: List[str] = field(default_factory=list)
    key: str = field(default_factory=lambda: encode_domains([]))


def normalize_tokens(tokens: Tokens) -> Dict[str, Any]:
    """Return ``tokens`` as a dict; positional values are keyed "0", "1", ..."""
    if tokens is None:
        return {}
    if isinstance(tokens, Mapping):
        return {str(name): value for name, value in tokens.items()}
    if isinstance(tokens, (str, bytes)):
        return {"0": tokens}
    try:
        return {str(index): value for index, value in enumerate(tokens)}
    except TypeError:
        return {"0": tokens}


class TranslatorInterface(ABC):
    """Capability contract for translators managed by the registry.

    A translator translates messages for the current locale and a list of
    domains, caches what it resolved, and can import and export that cache.
    """

    @classmethod
    @abstractmethod
    def get_instance(cls) -> "TranslatorInterface":
        """Return the process-wide instance of this translator class."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Reset domains, cache and tainted flag."""
        pass

    @abstractmethod
    def lang(self) -> str:
        """Return the locale currently used by the application."""
        pass

    @abstractmethod
    def domains(self, domains: Union[str, Iterable[str], None] = None) -> List[str]:
        """Set or return the domains searched by the translator."""
        pass

    @abstractmethod
    def domains_key(self) -> str:
        """Return the cache partition key of the current domains."""
        pass

    @abstractmethod
    def export(self) -> CacheData:
        """Return the cached translations."""
        pass

    @abstractmethod
    def import_cache(self, cache: Mapping[str, Any]) -> None:
        """Merge previously exported translations into the cache."""
        pass

    @abstractmethod
    def tainted(self) -> bool:
        """Return True if translations were resolved since the last reset."""
        pass

    @abstractmethod
    def translate(self, key: Any, tokens: Tokens = None) -> str:
        """Return the translation of ``key``, or ``key`` itself if none is found."""
        pass

    def begin_scope(self) -> None:
        """Give the current request its own domains. No-op by default."""
        pass

    def end_scope(self) -> None:
        """Return the current request to the shared domains. No-op by default."""
        pass


class TranslationCache(TranslatorInterface):
    """Translator memoizing catalog lookups per locale and domain list.

    The memo and the tainted flag are shared by every caller. The domains are
    held per request: ``begin_scope()`` gives the current context its own
    ``DomainScope``, which threads started from that context share. Outside
    a scope the instance-wide domains are used.

    Attributes:
        formatters: FormatterLocator used for token interpolation.
    """

    def __init__(
        self,
        resolver: Optional[CatalogResolver] = None,
        formatter: Optional[str] = None,
        formatters: Optional[FormatterLocator] = None,
    ):
        """Initialize TranslationCache.

        Args:
            resolver: Catalog resolver used on cache misses. Created from the
                configured catalogs directory on first use when omitted.
            formatter: Formatter name. Defaults to I18N_DEFAULT_FORMATTER.
            formatters: FormatterLocator to pick the formatter from.
        """
        self._resolver = resolver
        self._formatter_name = formatter
        self.formatters = formatters or FormatterLocator()
        self._lock = RLock()
        self._shared_scope = DomainScope()
        self._scope: ContextVar[Optional[DomainScope]] = ContextVar(
            f"translation_cache_scope_{id(self)}", default=None
        )
        self._cache: CacheData = {}
        self._tainted = False

    @classmethod
    def get_instance(cls) -> "TranslationCache":
        with _instances_lock:
            instance = _instances.get(cls)
            if instance is None:
                instance = cls()
                _instances[cls] = instance
                logger.info("translator_instance_created", translator=cls.__name__)
            return instance

    @property
    def resolver(self) -> CatalogResolver:
        with self._lock:
            if self._resolver is None:
                self._resolver = create_catalog_resolver()
            return self._resolver

    @property
    def formatter_name(self) -> str:
        return self._formatter_name or get_settings().i18n.I18N_DEFAULT_FORMATTER

    def _current_scope(self) -> DomainScope:
        scope = self._scope.get()
        return self._shared_scope if scope is None else scope

    def begin_scope(self) -> None:
        """Give the current context its own, empty, domains.

        The scope object is shared with contexts copied from this one, such
        as the threadpool workers running the request.
        """
        self._scope.set(DomainScope())

    def end_scope(self) -> None:
        self._scope.set(None)

    def reset(self) -> None:
        with self._lock:
            scope = self._current_scope()
            scope.domains = []
            scope.key = encode_domains([])
            self._shared_scope = DomainScope()
            self._cache = {}
            self._tainted = False
        logger.debug("translation_cache_reset")

    def lang(self) -> str:
        return get_locale()

    def domains(self, domains: Union[str, Iterable[str], None] = None) -> List[str]:
        """Set or return the ordered list of domains to search.

        Args:
            domains: A domain name or an iterable of domain names. When
                omitted, the current list is returned unchanged.

        Returns:
            The current list of domains.
        """
        with self._lock:
            scope = self._current_scope()
            if domains is None:
                return list(scope.domains)

            if isinstance(domains, str):
                domains = [domains]
            scope.domains = [str(domain) for domain in domains]
            scope.key = encode_domains(scope.domains)
            return list(scope.domains)

    def domains_key(self) -> str:
        with self._lock:
            return self._current_scope().key

    def path(self, key: Any, tokens: Tokens = None) -> List[str]:
        """Return the cache path ``[locale, domains_key, message_key]`` of ``key``.

        Plural and context tokens (``_count``, ``_singular``, ``_context``)
        qualify the message key so their variants get their own entries.
        """
        variant = MessageVariant.from_tokens(normalize_tokens(tokens))
        with self._lock:
            return [self.lang(), self._current_scope().key, variant.qualify(str(key))]

    def export(self) -> CacheData:
        with self._lock:
            return copy.deepcopy(self._cache)

    def import_cache(self, cache: Mapping[str, Any]) -> None:
        """Merge an exported cache into the current one.

        Incoming messages overwrite the entries with the same locale, domains
        key and message key; every other entry is kept. The tainted flag is
        not changed.

        Args:
            cache: Nested mapping ``{locale: {domains_key: {message_key: message}}}``.
        """
        if not cache:
            return

        with self._lock:
            if not self._cache:
                self._cache = copy.deepcopy(dict(cache))
            else:
                for locale, partitions in cache.items():
                    for domains_key, messages in partitions.items():
                        self._partition(locale, domains_key).update(messages)

        logger.debug("translation_cache_imported", locales=list(cache.keys()))

    def tainted(self) -> bool:
        with self._lock:
            return self._tainted

    def translate(self, key: Any, tokens: Tokens = None) -> str:
        """Translate ``key`` for the current locale and domains.

        Cached messages are returned without touching the catalogs. On a miss
        the domains are searched in order and the first message that differs
        from ``key`` wins, falling back to the default resolution. The result
        is cached (even when it is ``key`` itself) and the cache is marked as
        tainted.

        Args:
            key: Message key.
            tokens: Token values, as a mapping or a sequence of positional
                values. May carry ``_count``, ``_singular`` and ``_context``.

        Returns:
            The translated message with tokens interpolated.

        Raises:
            TranslatorConfigurationError: If the configured formatter is unknown.
            ValueError: If the message needs a token that was not provided.
        """
        key = str(key)
        tokens = normalize_tokens(tokens)
        variant = MessageVariant.from_tokens(tokens)
        locale = self.lang()

        with self._lock:
            scope = self._current_scope()
            domains = list(scope.domains)
            domains_key = scope.key
            path = [locale, domains_key, variant.qualify(key)]
            cached = storage.exists(self._cache, path)
            message = storage.get(self._cache, path)

        if cached:
            logger.debug("translation_cache_hit", key=key, locale=locale)
        else:
            message = self._resolve(key, locale, domains, variant)
            with self._lock:
                self._partition(locale, domains_key)[path[-1]] = message
                self._tainted = True
            logger.debug(
                "translation_cache_miss",
                key=key,
                locale=locale,
                domains=domains,
                translated=message != key,
            )

        values = {
            name: value for name, value in tokens.items() if name not in VARIANT_TOKENS
        }
        if not values:
            return message

        formatter = self.formatters.get(self.formatter_name)
        return formatter.format(locale, message, values)

    def _partition(self, locale: str, domains_key: str) -> Dict[str, str]:
        # Caller holds the lock
        return self._cache.setdefault(locale, {}).setdefault(domains_key, {})

    def _resolve(
        self,
        key: str,
        locale: str,
        domains: List[str],
        variant: MessageVariant,
    ) -> str:
        for domain in domains:
            message = self.resolver.translate(key, locale, domain=domain, variant=variant)
            if message != key:
                return message

        return self.resolver.translate(key, locale, domain=None, variant=variant)


def drop_instances(cls: Optional[Type[TranslatorInterface]] = None) -> None:
    """Forget the process-wide instance of ``cls``, or of every class (for tests)."""
    with _instances_lock:
        if cls is None:
            _instances.clear()
        else:
            _instances.pop(cls, None)
