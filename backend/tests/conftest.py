"""
Album Catalog API - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    test_settings:   Settings with JSON error bodies and quiet logging
    sample_catalog:  The three albums the service ships with
    empty_catalog:   A catalog with no albums
    app:             FastAPI app built around sample_catalog
    test_client:     HTTPX AsyncClient bound to `app`
    client_for:      Factory for clients bound to any other app
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ERROR_BODY_STYLE"] = "json"
os.environ["ENABLE_DOCS"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from albums_api.config import Settings
from albums_api.main import create_app
from albums_api.services.catalog import Catalog, default_catalog


@pytest.fixture
def test_settings() -> Settings:
    return Settings(log_level="WARNING", error_body_style="json", enable_docs=False)


@pytest.fixture
def plain_settings() -> Settings:
    """Settings pinning 404/500 bodies to plain text."""
    return Settings(log_level="WARNING", error_body_style="plain", enable_docs=False)


@pytest.fixture
def sample_catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def empty_catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def app(test_settings, sample_catalog):
    return create_app(settings=test_settings, catalog=sample_catalog)


@pytest.fixture
def client_for():
    """
    Returns a factory building an AsyncClient for a given app.

    Usage:
        async with client_for(create_app(catalog=Catalog())) as client:
            response = await client.get("/albums")
    """

    def _client_for(application) -> AsyncClient:
        transport = ASGITransport(app=application)
        return AsyncClient(transport=transport, base_url="http://test")

    return _client_for


@pytest_asyncio.fixture
async def test_client(app, client_for):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_albums(test_client):
            response = await test_client.get("/albums")
            assert response.status_code == 200
    """
    async with client_for(app) as client:
        yield client


@pytest.fixture
def expected_default_body() -> str:
    """Exact JSON body for GET /albums on the shipped catalog."""
    return (
        '[{"id":"1","title":"Blue Train","artist":"John Coltrane","price":56.99},'
        '{"id":"2","title":"Jeru","artist":"Gerry Mulligan","price":17.99},'
        '{"id":"3","title":"Sarah Vaughan and Clifford Brown","artist":"Sarah Vaughan","price":39.99}]'
    )
