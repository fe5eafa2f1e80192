"""
Root-level conftest.py for integration tests.

Integration tests drive the FastAPI application through its HTTP surface,
with the memory translation cache store and the catalogs shipped in
app/locales.
"""

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n.stores import get_store
from server.server import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    """TestClient running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def cache_store():
    """The translation cache store used by the application."""
    return get_store()


@pytest.fixture
def french():
    return {"Accept-Language": "fr-FR,fr;q=0.9"}
