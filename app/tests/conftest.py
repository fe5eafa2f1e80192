import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection. Pytest
# may import `conftest` before the project root is on sys.path depending on
# invocation; add it explicitly here before importing application modules.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.i18n.locale import reset_locale
from infrastructure.i18n.registry import clear_registry
from infrastructure.i18n.stores import reset_store
from infrastructure.i18n.translator import drop_instances
from infrastructure.services.providers import get_settings

LOCALES_DIR = Path(project_root) / "locales"


@pytest.fixture(autouse=True)
def reset_translation_state():
    """Drop every process-wide translator singleton after each test."""
    yield
    clear_registry()
    drop_instances()
    reset_store()
    reset_locale()


@pytest.fixture
def clean_settings(monkeypatch):
    """Give the test a fresh settings instance built from its environment.

    Usage:
        def test_backend(clean_settings, monkeypatch):
            monkeypatch.setenv("TRANSLATION_CACHE_BACKEND", "file")
            ...
    """
    monkeypatch.delenv("I18N_LOCALES_DIR", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def locales_dir():
    """Directory of the catalogs shipped with the application."""
    return LOCALES_DIR
