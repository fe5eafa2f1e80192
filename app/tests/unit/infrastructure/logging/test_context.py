"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- get_correlation_id()
- clear_request_context()
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_context():
    clear_request_context()
    yield
    clear_request_context()


class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context(request_path="/groups"):
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        with bind_request_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_request_and_extra_context(self):
        """Request metadata and extra keys such as the cache key are bound."""
        with bind_request_context(
            request_path="/groups/1",
            request_method="GET",
            cache_key="TranslatorAutoload.groups.view",
            locale="fr_FR",
        ):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/groups/1"
            assert ctx["request_method"] == "GET"
            assert ctx["cache_key"] == "TranslatorAutoload.groups.view"
            assert ctx["locale"] == "fr_FR"

    def test_skips_none_values(self):
        with bind_request_context():
            ctx = structlog.contextvars.get_contextvars()
            assert set(ctx) == {"correlation_id"}

    def test_clears_after_exit(self):
        with bind_request_context(correlation_id="req-1", request_path="/groups"):
            pass

        assert structlog.contextvars.get_contextvars() == {}

    def test_exception_still_clears_context(self):
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="req-1"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


class TestCorrelationId:
    """Test suite for correlation ID helpers."""

    def test_none_when_not_set(self):
        assert get_correlation_id() is None

    def test_clear_request_context(self):
        structlog.contextvars.bind_contextvars(correlation_id="req-789")
        clear_request_context()
        assert get_correlation_id() is None
