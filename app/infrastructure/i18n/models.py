"""Translation models for the i18n system.

Defines the data structures shared by the catalog loader, the catalog
resolver and the translation cache.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

# Catalog entry: a message, a list of plural forms, or a context map
CatalogEntry = Union[str, List[str], Dict[str, Union[str, List[str]]]]

# Separates the variant qualifier from the message key in cache entries,
# as gettext does for msgctxt
VARIANT_SEPARATOR = "\x04"

VARIANT_TOKENS = ("_count", "_singular", "_context")


@dataclass(frozen=True)
class MessageVariant:
    """Plural and context qualifiers carried in translation tokens.

    Attributes:
        count: Item count selecting the plural form (``_count``).
        singular: Singular message id when translating a plural (``_singular``).
        context: Disambiguation context (``_context``).
    """

    count: Optional[int] = None
    singular: Optional[str] = None
    context: Optional[str] = None

    @classmethod
    def from_tokens(cls, tokens: Mapping[str, Any]) -> "MessageVariant":
        """Extract the variant qualifiers present in ``tokens``."""
        singular = tokens.get("_singular")
        context = tokens.get("_context")
        return cls(
            count=tokens.get("_count"),
            singular=None if singular is None else str(singular),
            context=None if context is None else str(context),
        )

    def is_empty(self) -> bool:
        return self.count is None and self.singular is None and self.context is None

    def cache_fields(self) -> Dict[str, Any]:
        """Return the present qualifiers keyed by their token names."""
        fields = {
            "_count": self.count,
            "_singular": self.singular,
            "_context": self.context,
        }
        return {name: value for name, value in fields.items() if value is not None}

    def qualify(self, key: str) -> str:
        """Return the cache message key for ``key`` under this variant.

        The bare key is returned when no qualifier is present, so plural and
        contextual variants never collide with the plain lookup.
        """
        if self.is_empty():
            return key
        qualifier = json.dumps(
            self.cache_fields(), sort_keys=True, separators=(",", ":")
        )
        return f"{qualifier}{VARIANT_SEPARATOR}{key}"


@dataclass
class TranslationCatalog:
    """Container for the messages of one domain in one locale.

    Attributes:
        domain: Domain (namespace) name, e.g. "groups_index" or "default".
        locale: Locale identifier, e.g. "fr_FR".
        messages: Mapping of message id to catalog entry.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
    """

    domain: str
    locale: str
    messages: Dict[str, CatalogEntry] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(
        self, key: str, context: Optional[str] = None
    ) -> Optional[Union[str, List[str]]]:
        """Retrieve a message or its plural forms.

        Context maps are keyed by context name; the empty-string context holds
        the message used when no context is requested.

        Args:
            key: Message id.
            context: Optional context name.

        Returns:
            Message string, list of plural forms, or None if not found.
        """
        entry = self.messages.get(key)
        if entry is None:
            return None

        if isinstance(entry, dict):
            return entry.get(context if context is not None else "")

        if context is not None:
            return None

        return entry

