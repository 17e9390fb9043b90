"""Drupal JSON:API product access: fetching and flattening."""

from .client import DrupalClient, DrupalSettings, get_drupal_settings
from .exceptions import (
    ConfigurationError,
    DrupalError,
    DrupalTransportError,
    PayloadValidationError,
    UnknownToolError,
)
from .flattener import flatten_item, term_names_by_id, to_number_maybe
from .models import (
    FetchResult,
    Found,
    JsonApiDocument,
    NotFound,
    Product,
)

__all__ = [
    # Client
    "DrupalClient",
    "DrupalSettings",
    "get_drupal_settings",
    # Flattening
    "flatten_item",
    "term_names_by_id",
    "to_number_maybe",
    # Models
    "FetchResult",
    "Found",
    "JsonApiDocument",
    "NotFound",
    "Product",
    # Errors
    "ConfigurationError",
    "DrupalError",
    "DrupalTransportError",
    "PayloadValidationError",
    "UnknownToolError",
]
