"""Catalog resolution for translation lookups.

The catalog resolver answers "does domain D translate this key in this
locale?". A miss is signalled by returning the key unchanged, never by
raising.
"""

from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import MessageVariant
from infrastructure.i18n.plurals import plural_index

DEFAULT_DOMAIN = "default"


class CatalogResolver(ABC):
    """Abstract base for per-domain message catalog lookups."""

    @abstractmethod
    def translate(
        self,
        key: str,
        locale: str,
        domain: Optional[str] = None,
        variant: Optional[MessageVariant] = None,
    ) -> str:
        """Resolve ``key`` in ``domain`` for ``locale``.

        Args:
            key: Message key. For plurals this is the plural message id.
            locale: Locale identifier.
            domain: Domain to search. None selects the domain-less default
                resolution.
            variant: Plural and context qualifiers.

        Returns:
            The translated message, or ``key`` unchanged when ``domain`` has
            no translation for it.
        """
        pass


class YAMLCatalogResolver(CatalogResolver):
    """Catalog resolver backed by YAML catalogs.

    Plural entries are lists of forms picked with the locale's plural rule.
    When ``_singular`` is given it is the message id looked up in the catalog,
    the key being the plural id.

    Attributes:
        loader: CatalogLoader providing the domain catalogs.
        default_domain: Domain searched by the domain-less default resolution.
    """

    def __init__(self, loader: CatalogLoader, default_domain: str = DEFAULT_DOMAIN):
        self.loader = loader
        self.default_domain = default_domain

    def translate(
        self,
        key: str,
        locale: str,
        domain: Optional[str] = None,
        variant: Optional[MessageVariant] = None,
    ) -> str:
        variant = variant or MessageVariant()
        msgid = variant.singular if variant.singular is not None else key

        catalog = self.loader.load(
            domain if domain is not None else self.default_domain, locale
        )
        message = catalog.get_message(msgid, variant.context) if catalog else None

        if message is None:
            if domain is None:
                return self._untranslated(key, variant)
            return key

        if isinstance(message, list):
            index = plural_index(locale, variant.count) if variant.count is not None else 0
            message = message[min(index, len(message) - 1)]

        return message

    @staticmethod
    def _untranslated(key: str, variant: MessageVariant) -> str:
        # Same fallback as gettext's ngettext without a catalog
        if variant.singular is not None and variant.count is not None:
            return variant.singular if int(variant.count) == 1 else key
        return key
