"""DynamoDB translation cache store."""

import json
import time
from typing import Any, Dict, Optional

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from infrastructure.i18n.stores.base import TranslationCacheStore

logger = structlog.get_logger()

PARTITION_KEY = "cache_key"


class DynamoDBCacheStore(TranslationCacheStore):
    """DynamoDB-backed translation cache store.

    Uses a table with:
    - PK: cache_key (string)
    - Attributes: payload_json, ttl (for DynamoDB TTL), updated_at

    Suitable for multi-instance deployments where every worker must see the
    caches saved by the others. Read failures are logged and treated as a
    miss; write failures are logged.
    """

    def __init__(
        self,
        table_name: str,
        ttl_seconds: int,
        region_name: Optional[str] = None,
        client: Any = None,
    ):
        """Initialize DynamoDB cache store.

        Args:
            table_name: DynamoDB table name.
            ttl_seconds: Lifetime of written entries.
            region_name: AWS region for the default client.
            client: Optional pre-built boto3 DynamoDB client.
        """
        self.table_name = table_name
        self.ttl_seconds = ttl_seconds
        self.client = client or boto3.client("dynamodb", region_name=region_name)
        logger.info(
            "initialized_dynamodb_cache_store",
            table_name=table_name,
            ttl_seconds=ttl_seconds,
            region=region_name,
        )

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.get_item(
                TableName=self.table_name,
                Key={PARTITION_KEY: {"S": key}},
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "cache_store_read_error",
                key=key,
                backend="dynamodb",
                error=str(e),
            )
            return None

        item = response.get("Item")
        if not item:
            logger.debug("cache_store_miss", key=key, backend="dynamodb")
            return None

        payload = item.get("payload_json", {})
        # DynamoDB stores strings in {"S": "value"} format
        if isinstance(payload, dict) and "S" in payload:
            payload = payload["S"]

        try:
            return json.loads(payload)
        except (TypeError, ValueError) as e:
            logger.error(
                "cache_store_payload_error",
                key=key,
                backend="dynamodb",
                error=str(e),
            )
            return None

    def write(self, key: str, data: Dict[str, Any]) -> None:
        now = int(time.time())
        payload = json.dumps(data, ensure_ascii=False)

        try:
            self.client.put_item(
                TableName=self.table_name,
                Item={
                    PARTITION_KEY: {"S": key},
                    "payload_json": {"S": payload},
                    "ttl": {"N": str(now + self.ttl_seconds)},
                    "updated_at": {"N": str(now)},
                },
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "cache_store_write_error",
                key=key,
                backend="dynamodb",
                error=str(e),
            )
            return

        logger.debug("cache_store_write", key=key, backend="dynamodb")

    def delete(self, key: str) -> None:
        try:
            self.client.delete_item(
                TableName=self.table_name,
                Key={PARTITION_KEY: {"S": key}},
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "cache_store_delete_error",
                key=key,
                backend="dynamodb",
                error=str(e),
            )

    def clear(self) -> None:
        """Delete every item of the table.

        Scans the whole table; meant for tests, use DynamoDB TTL in production.
        """
        logger.warning("cache_store_clear_called", backend="dynamodb")
        paginator = self.client.get_paginator("scan")
        deleted = 0
        for page in paginator.paginate(
            TableName=self.table_name, ProjectionExpression=PARTITION_KEY
        ):
            for item in page.get("Items", []):
                self.client.delete_item(
                    TableName=self.table_name,
                    Key={PARTITION_KEY: item[PARTITION_KEY]},
                )
                deleted += 1
        logger.info("cache_store_cleared", backend="dynamodb", items_deleted=deleted)
