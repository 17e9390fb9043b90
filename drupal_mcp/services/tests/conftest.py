"""
Pytest fixtures for drupal_mcp/services tests.

Provides:
- Drupal settings and client pointing at a fake base URL
- Sample JSON:API product documents
"""

import pytest

from drupal_mcp.services.drupal import DrupalClient, DrupalSettings

BASE_URL = "https://drupal.example.com/jsonapi"
ITEM_ID = "8f1c2a3e-0000-4000-8000-000000000001"


@pytest.fixture
def settings() -> DrupalSettings:
    """Settings without a bearer token."""
    return DrupalSettings(base_url=BASE_URL)


@pytest.fixture
def token_settings() -> DrupalSettings:
    """Settings with a bearer token."""
    return DrupalSettings(base_url=BASE_URL, token="secret-token")


@pytest.fixture
def client(settings) -> DrupalClient:
    return DrupalClient(settings)


@pytest.fixture
def item_document() -> dict:
    """A full product document with two sizes included."""
    return {
        "jsonapi": {"version": "1.0"},
        "data": {
            "id": ITEM_ID,
            "type": "node--item",
            "attributes": {
                "title": "Sneaker",
                "field_categoria": "Scarpe",
                "field_materiale": "Pelle",
                "field_prezzo": "129,00",
                "field_valuta": "EUR",
                "drupal_internal__nid": 42,
            },
            "relationships": {
                "field_taglie": {
                    "data": [
                        {"id": "t-42", "type": "taxonomy_term--taglie"},
                        {"id": "t-43", "type": "taxonomy_term--taglie"},
                    ]
                },
                "uid": {"data": {"id": "u-1", "type": "user--user"}},
            },
        },
        "included": [
            {
                "id": "t-43",
                "type": "taxonomy_term--taglie",
                "attributes": {"name": "43"},
            },
            {
                "id": "t-42",
                "type": "taxonomy_term--taglie",
                "attributes": {"name": "42"},
            },
        ],
    }
