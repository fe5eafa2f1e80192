"""Tests for infrastructure.i18n.stores.dynamodb module."""

import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from infrastructure.i18n.stores.dynamodb import PARTITION_KEY, DynamoDBCacheStore

pytestmark = pytest.mark.unit

CACHE = {"fr_FR": {'["groups"]': {"Group.name": "Nom du groupe"}}}


def client_error(operation):
    return ClientError(
        {"Error": {"Code": "ResourceNotFoundException", "Message": "No table"}},
        operation,
    )


@pytest.fixture
def mock_client():
    return MagicMock()


@pytest.fixture
def store(mock_client):
    return DynamoDBCacheStore(
        table_name="translation_cache", ttl_seconds=3600, client=mock_client
    )


class TestDynamoDBCacheStore:
    """Tests for DynamoDBCacheStore."""

    def test_default_client(self):
        """Without a client one is built for the configured region."""
        with patch("infrastructure.i18n.stores.dynamodb.boto3") as mock_boto3:
            DynamoDBCacheStore("translation_cache", 60, region_name="ca-central-1")

        mock_boto3.client.assert_called_once_with(
            "dynamodb", region_name="ca-central-1"
        )

    def test_read(self, store, mock_client):
        mock_client.get_item.return_value = {
            "Item": {
                PARTITION_KEY: {"S": "TranslatorAutoload.groups.view"},
                "payload_json": {"S": json.dumps(CACHE)},
            }
        }

        assert store.read("TranslatorAutoload.groups.view") == CACHE
        mock_client.get_item.assert_called_once_with(
            TableName="translation_cache",
            Key={PARTITION_KEY: {"S": "TranslatorAutoload.groups.view"}},
        )

    def test_read_missing(self, store, mock_client):
        mock_client.get_item.return_value = {}
        assert store.read("key") is None

    def test_read_error_is_a_miss(self, store, mock_client):
        mock_client.get_item.side_effect = client_error("GetItem")
        assert store.read("key") is None

    def test_read_invalid_payload(self, store, mock_client):
        mock_client.get_item.return_value = {"Item": {"payload_json": {"S": "{bad"}}}
        assert store.read("key") is None

    def test_write(self, store, mock_client):
        with patch("infrastructure.i18n.stores.dynamodb.time.time", return_value=1000):
            store.write("TranslatorAutoload.groups.view", CACHE)

        mock_client.put_item.assert_called_once_with(
            TableName="translation_cache",
            Item={
                PARTITION_KEY: {"S": "TranslatorAutoload.groups.view"},
                "payload_json": {"S": json.dumps(CACHE, ensure_ascii=False)},
                "ttl": {"N": "4600"},
                "updated_at": {"N": "1000"},
            },
        )

    def test_write_error_is_logged_not_raised(self, store, mock_client):
        mock_client.put_item.side_effect = client_error("PutItem")
        store.write("key", CACHE)
        mock_client.put_item.assert_called_once()

    def test_delete(self, store, mock_client):
        store.delete("key")
        mock_client.delete_item.assert_called_once_with(
            TableName="translation_cache", Key={PARTITION_KEY: {"S": "key"}}
        )

    def test_delete_error_is_logged_not_raised(self, store, mock_client):
        mock_client.delete_item.side_effect = client_error("DeleteItem")
        store.delete("key")

    def test_clear(self, store, mock_client):
        paginator = MagicMock()
        paginator.paginate.return_value = [
            {"Items": [{PARTITION_KEY: {"S": "a"}}, {PARTITION_KEY: {"S": "b"}}]},
            {"Items": []},
        ]
        mock_client.get_paginator.return_value = paginator

        store.clear()

        mock_client.get_paginator.assert_called_once_with("scan")
        assert mock_client.delete_item.call_count == 2
