"""Tests for infrastructure.i18n.stores.factory module."""

from unittest.mock import patch

import pytest

from infrastructure.i18n.exceptions import TranslatorConfigurationError
from infrastructure.i18n.stores import (
    FileCacheStore,
    MemoryCacheStore,
    create_store,
    get_store,
    reset_store,
)

pytestmark = pytest.mark.unit


class TestCreateStore:
    """Tests for create_store()."""

    def test_memory_is_default(self):
        assert isinstance(create_store(), MemoryCacheStore)

    def test_file_backend(self, clean_settings, monkeypatch, tmp_path):
        monkeypatch.setenv("TRANSLATION_CACHE_DIR", str(tmp_path / "cache"))
        store = create_store("file")

        assert isinstance(store, FileCacheStore)
        assert store.cache_dir == tmp_path / "cache"

    def test_backend_from_settings(self, clean_settings, monkeypatch, tmp_path):
        monkeypatch.setenv("TRANSLATION_CACHE_BACKEND", "file")
        monkeypatch.setenv("TRANSLATION_CACHE_DIR", str(tmp_path))
        assert isinstance(create_store(), FileCacheStore)

    def test_dynamodb_backend(self, clean_settings, monkeypatch):
        monkeypatch.setenv("TRANSLATION_CACHE_TABLE", "sre_translation_cache")
        monkeypatch.setenv("AWS_REGION", "ca-central-1")
        with patch("infrastructure.i18n.stores.dynamodb.boto3") as mock_boto3:
            store = create_store("dynamodb")

        assert store.table_name == "sre_translation_cache"
        assert store.ttl_seconds == 86400
        mock_boto3.client.assert_called_once_with(
            "dynamodb", region_name="ca-central-1"
        )

    def test_unknown_backend(self):
        with pytest.raises(TranslatorConfigurationError, match="redis"):
            create_store("redis")


class TestGetStore:
    """Tests for the store singleton."""

    def test_get_store_is_shared(self):
        assert get_store() is get_store()

    def test_reset_store(self):
        first = get_store()
        reset_store()
        assert get_store() is not first
