"""Fixtures for server integration tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_settings():
    """Create a mock settings object for lifespan helpers."""
    settings = MagicMock()
    settings.is_production = False
    settings.PREFIX = ""
    settings.LOG_LEVEL = "INFO"
    settings.translator.TRANSLATOR_DEFAULT_NAME = "TranslationCache"
    settings.translator.TRANSLATOR_CLASS = "TranslationCache"
    settings.model_dump.return_value = {
        "PREFIX": "",
        "LOG_LEVEL": "INFO",
        "i18n": {"I18N_DEFAULT_LOCALE": "en_US"},
        "translator": {"TRANSLATOR_DEFAULT_NAME": "TranslationCache"},
    }
    return settings
