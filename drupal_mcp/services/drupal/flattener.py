"""Flatten a Drupal JSON:API product document into a single record.

The primary `data` resource supplies identity and scalar attributes; the
`field_taglie` relationship is resolved against the taxonomy terms in
`included`, so one request returns the product with its size names.

Example:
    >>> doc = {
    ...     "data": {
    ...         "id": "abc",
    ...         "type": "node--item",
    ...         "attributes": {"title": "Shoe", "field_prezzo": "49,90"},
    ...     }
    ... }
    >>> product = flatten_item(doc)
    >>> product.prezzo
    49.9
    >>> product.taglie
    []
"""

import math
import re
from collections.abc import Hashable
from typing import Any, Optional, Union

from pydantic import ValidationError

from .exceptions import PayloadValidationError
from .models import JsonApiDocument, Product

# Plain decimal notation only: ASCII digits, optional sign, fraction and exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def to_number_maybe(value: Any) -> Optional[Union[int, float]]:
    """Coerce a price value to a number, or None.

    Numbers pass through unchanged. Strings in plain decimal notation
    (ASCII digits, optional sign and exponent) accept either decimal
    separator ("129.00" and "129,00" both give 129.0); only the first comma
    is replaced. Anything unparsable, non-finite, or of another type gives None.
    Never raises.
    """
    if value is None:
        return None
    # bool is an int subclass but is not a price
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return None

    normalized = value.replace(",", ".", 1).strip()
    if not DECIMAL_PATTERN.fullmatch(normalized):
        return None
    number = float(normalized)
    return number if math.isfinite(number) else None


def _parse_document(payload: Any) -> JsonApiDocument:
    if not isinstance(payload, dict):
        raise PayloadValidationError("Invalid JSON:API payload (expected an object)")
    try:
        return JsonApiDocument.model_validate(payload)
    except ValidationError as e:
        raise PayloadValidationError(f"Invalid JSON:API payload: {e}") from e


def term_names_by_id(document: JsonApiDocument) -> dict[Hashable, Any]:
    """Map included taxonomy term ids to their display names.

    Terms without an id or a name are left out.
    """
    names: dict[Hashable, Any] = {}
    for resource in document.included:
        if not resource.is_taxonomy_term or not resource.id or not isinstance(resource.id, Hashable):
            continue
        if resource.attributes.name:
            names[resource.id] = resource.attributes.name
    return names


def flatten_item(payload: Any) -> Product:
    """Convert a decoded JSON:API product document to a Product.

    Args:
        payload: Decoded JSON body of `GET node/item/{id}?include=field_taglie`

    Returns:
        Flattened Product

    Raises:
        PayloadValidationError: If `data.id` or `data.type` is missing, or
            the document does not have the JSON:API shape
    """
    document = _parse_document(payload)
    item = document.data
    if item is None or not item.id or not item.type:
        raise PayloadValidationError("Invalid JSON:API payload (missing data.id/type)")

    attrs = item.attributes

    sizes = item.relationships.field_taglie
    taglie_ids = [ref.id for ref in sizes.identifiers() if ref.id] if sizes else []

    # Ids without a matching included term are dropped, not reported
    names = term_names_by_id(document)
    taglie = [names[term_id] for term_id in taglie_ids if isinstance(term_id, Hashable) and term_id in names]

    return Product(
        id=item.id,
        type=item.type,
        title=attrs.title,
        categoria=attrs.field_categoria,
        materiale=attrs.field_materiale,
        prezzo=to_number_maybe(attrs.field_prezzo),
        valuta=attrs.field_valuta,
        taglie=taglie,
        taglie_ids=taglie_ids,
    )
