"""Persistent translation cache store settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class TranslationCacheSettings(InfrastructureSettings):
    """Backend configuration for the per-route translation cache store.

    Environment Variables:
        TRANSLATION_CACHE_BACKEND: Backend type - 'memory', 'file' or 'dynamodb'
        TRANSLATION_CACHE_DIR: Directory for the file backend
        TRANSLATION_CACHE_TABLE: DynamoDB table name for the dynamodb backend
        TRANSLATION_CACHE_TTL_SECONDS: TTL for DynamoDB entries (default: 86400s = 1 day)
        AWS_REGION: AWS region for the dynamodb backend

    Cache Backends:
        - memory: Process-local dict (development, testing)
        - file: One JSON document per cache key on local disk
        - dynamodb: Shared table for multi-instance deployments
    """

    TRANSLATION_CACHE_BACKEND: str = Field(
        default="memory", alias="TRANSLATION_CACHE_BACKEND"
    )
    TRANSLATION_CACHE_DIR: str = Field(
        default="tmp/translation_cache", alias="TRANSLATION_CACHE_DIR"
    )
    TRANSLATION_CACHE_TABLE: str = Field(
        default="translation_cache", alias="TRANSLATION_CACHE_TABLE"
    )
    TRANSLATION_CACHE_TTL_SECONDS: int = Field(
        default=86400, alias="TRANSLATION_CACHE_TTL_SECONDS"
    )
    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
