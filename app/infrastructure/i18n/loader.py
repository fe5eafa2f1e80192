"""Catalog loading interface and implementations.

Defines the contract for loading message catalogs and provides the
YAML-based loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Dict, Optional, Tuple

import structlog
import yaml

from infrastructure.i18n.models import TranslationCatalog

logger = structlog.get_logger()


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define how to locate and parse the catalog of a
    domain for a locale.
    """

    @abstractmethod
    def load(self, domain: str, locale: str) -> Optional[TranslationCatalog]:
        """Load the catalog of ``domain`` for ``locale``.

        Args:
            domain: Domain name (e.g., "groups_index", "default").
            locale: Locale identifier (e.g., "fr_FR").

        Returns:
            TranslationCatalog, or None when the domain has no catalog for
            the locale.

        Raises:
            ValueError: If a catalog file exists but cannot be parsed.
        """
        pass


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML message catalogs.

    Expects files named ``<domain>.<locale>.yml`` in the catalogs
    directory, each holding a flat mapping of message id to entry::

        Group.name: Nom
        horse: [cheval, chevaux]
        X:
          "": X
          context2: La valeur X

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether parsed catalogs are kept in memory.
        cache: Parsed catalogs keyed by ``(domain, locale)``; a None value
            records a domain without a catalog.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize YAML catalog loader.

        Args:
            translations_dir: Path to directory with YAML catalog files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Tuple[str, str], Optional[TranslationCatalog]] = {}
        self._lock = Lock()

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_catalog_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, domain: str, locale: str) -> Optional[TranslationCatalog]:
        """Load a catalog from ``<domain>.<locale>.yml``.

        Args:
            domain: Domain name.
            locale: Locale identifier.

        Returns:
            TranslationCatalog, or None if the file does not exist.

        Raises:
            ValueError: If YAML parsing fails.
        """
        cache_key = (domain, locale)
        if self.use_cache:
            with self._lock:
                if cache_key in self.cache:
                    return self.cache[cache_key]

        catalog = self._read(domain, locale)

        if self.use_cache:
            with self._lock:
                self.cache[cache_key] = catalog

        return catalog

    def _read(self, domain: str, locale: str) -> Optional[TranslationCatalog]:
        yaml_file = self.translations_dir / f"{domain}.{locale}.yml"
        if not yaml_file.is_file():
            logger.debug("catalog_not_found", domain=domain, locale=locale)
            return None

        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

        catalog = TranslationCatalog(
            domain=domain,
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        if data:
            self._merge_yaml_data(catalog, data, yaml_file)

        logger.info(
            "loaded_catalog",
            domain=domain,
            locale=locale,
            message_count=len(catalog.messages),
        )
        return catalog

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Dict,
        source_file: Path,
    ) -> None:
        """Copy valid entries from parsed YAML into ``catalog``.

        Entries that are not a string, a list of strings, or a mapping of
        context to either of those are skipped with a warning.
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for key, entry in data.items():
            if self._is_message(entry):
                catalog.messages[str(key)] = entry
            elif isinstance(entry, dict) and all(
                self._is_message(value) for value in entry.values()
            ):
                catalog.messages[str(key)] = {
                    "" if context is None else str(context): value
                    for context, value in entry.items()
                }
            else:
                logger.warning(
                    "invalid_catalog_entry",
                    file=str(source_file),
                    key=str(key),
                )

    @staticmethod
    def _is_message(value: object) -> bool:
        if isinstance(value, str):
            return True
        return (
            isinstance(value, list)
            and bool(value)
            and all(isinstance(form, str) for form in value)
        )

