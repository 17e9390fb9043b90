"""
Pytest configuration and fixtures for drupal_mcp/ host tests.

Provides:
- Environment setup (base URL, no token)
- Mock Drupal client
- FastAPI app and async test client
"""

import os
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest

from drupal_mcp.services.drupal import DrupalClient, DrupalSettings


# ============ Environment Setup ============


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ.setdefault("DRUPAL_JSONAPI_BASE", "https://drupal.example.com/jsonapi")
    os.environ.setdefault("LOG_LEVEL", "DEBUG")
    os.environ.pop("OTLP_ENDPOINT", None)
    yield


# ============ Drupal ============


@pytest.fixture
def drupal_settings() -> DrupalSettings:
    return DrupalSettings(base_url="https://drupal.example.com/jsonapi")


@pytest.fixture
def mock_drupal_client() -> AsyncMock:
    """Drupal client whose get_item is an AsyncMock."""
    return AsyncMock(spec=DrupalClient)


@pytest.fixture
def sample_document() -> dict:
    return {
        "data": {
            "id": "abc",
            "type": "node--item",
            "attributes": {"title": "Shoe", "field_prezzo": "49,90", "field_valuta": "EUR"},
            "relationships": {
                "field_taglie": {
                    "data": [
                        {"id": "t1", "type": "taxonomy_term--taglie"},
                        {"id": "t2", "type": "taxonomy_term--taglie"},
                    ]
                }
            },
        },
        "included": [
            {"id": "t1", "type": "taxonomy_term--taglie", "attributes": {"name": "Large"}},
        ],
    }


# ============ FastAPI Test Client ============


@pytest.fixture
def app(drupal_settings):
    """Create FastAPI app instance for testing."""
    from drupal_mcp.api.main import create_app

    return create_app(drupal_settings)


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Async test client for FastAPI."""
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
