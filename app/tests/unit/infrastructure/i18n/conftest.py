"""Feature-level fixtures for i18n system tests.

Provides catalogs, resolvers and translators wired to either a temporary
catalogs directory or the catalogs shipped in app/locales.
"""

import pytest
import yaml

from infrastructure.i18n.catalog import YAMLCatalogResolver
from infrastructure.i18n.locale import locale_context
from infrastructure.i18n.loader import YAMLCatalogLoader
from infrastructure.i18n.stores import MemoryCacheStore
from infrastructure.i18n.translator import TranslationCache


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalogs.

    Returns a directory structure like:
    - posts.fr_FR.yml
    - posts_index.fr_FR.yml
    - default.fr_FR.yml
    - posts.en_US.yml
    """
    catalogs = {
        "posts.fr_FR.yml": {
            "Post.title": "Titre de l'article",
            "Post.author": "Auteur",
        },
        "posts_index.fr_FR.yml": {
            "Post.title": "Titre",
        },
        "default.fr_FR.yml": {
            "comment": ["commentaire", "commentaires"],
            "Save": {"": "Enregistrer", "menu": "Sauvegarder"},
            "Hello {name}": "Bonjour {name}",
        },
        "posts.en_US.yml": {
            "Post.title": "Post title",
        },
    }
    for file_name, messages in catalogs.items():
        with open(tmp_path / file_name, "w", encoding="utf-8") as f:
            yaml.dump(messages, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLCatalogLoader for temporary catalogs directory."""
    return YAMLCatalogLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLCatalogLoader with caching enabled."""
    return YAMLCatalogLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def resolver(yaml_loader):
    return YAMLCatalogResolver(yaml_loader)


@pytest.fixture
def app_resolver(locales_dir):
    """Resolver over the catalogs shipped in app/locales."""
    return YAMLCatalogResolver(YAMLCatalogLoader(locales_dir))


@pytest.fixture
def translator(resolver):
    """TranslationCache over the temporary catalogs."""
    return TranslationCache(resolver=resolver)


@pytest.fixture
def app_translator(app_resolver):
    """TranslationCache over the catalogs shipped in app/locales."""
    return TranslationCache(resolver=app_resolver)


@pytest.fixture
def fr_locale():
    """Use fr_FR as the current locale for the test."""
    with locale_context("fr_FR") as locale:
        yield locale


@pytest.fixture
def memory_store():
    return MemoryCacheStore()


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "*;q=0.8,fr;q=0.9",
        "invalid_quality": "de;q=invalid,fr",
    }
