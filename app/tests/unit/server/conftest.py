"""Fixtures for server module unit tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_settings():
    """Create a mock settings object."""
    settings = MagicMock()
    settings.is_production = False
    settings.PREFIX = ""
    settings.LOG_LEVEL = "INFO"
    settings.translator.TRANSLATOR_DEFAULT_NAME = "TranslationCache"
    settings.translator.TRANSLATOR_CLASS = "TranslationCache"
    settings.model_dump.return_value = {
        "PREFIX": "",
        "i18n": {"I18N_DEFAULT_LOCALE": "en_US"},
    }
    return settings
