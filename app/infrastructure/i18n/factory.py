"""Factory functions for creating i18n components.

Provides convenience functions for initializing the catalog resolver with
default configuration suitable for the application.
"""

from pathlib import Path

import structlog

from infrastructure.i18n.catalog import YAMLCatalogResolver
from infrastructure.i18n.loader import YAMLCatalogLoader
from infrastructure.services.providers import get_settings

logger = structlog.get_logger()


def default_locales_dir() -> Path:
    """Return the configured catalogs directory, or app/locales."""
    configured = get_settings().i18n.I18N_LOCALES_DIR
    if configured:
        return Path(configured)

    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_catalog_resolver(
    translations_dir: Path | None = None,
    use_cache: bool = True,
) -> YAMLCatalogResolver:
    """Create and configure a YAML catalog resolver.

    Args:
        translations_dir: Path to YAML catalogs (default: I18N_LOCALES_DIR or
            auto-discovered app/locales)
        use_cache: Whether the loader keeps parsed catalogs in memory

    Returns:
        YAMLCatalogResolver: Configured resolver

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        resolver = create_catalog_resolver()
        resolver.translate("Group.name", "fr_FR", domain="groups")
    """
    if translations_dir is None:
        translations_dir = default_locales_dir()

    loader = YAMLCatalogLoader(translations_dir=translations_dir, use_cache=use_cache)
    logger.info("catalog_resolver_created", translations_dir=str(translations_dir))
    return YAMLCatalogResolver(loader)
