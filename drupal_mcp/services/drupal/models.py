"""Typed views of the JSON:API documents served by Drupal, and the flat product.

Only the keys the product flattening reads are modelled; everything else in
the upstream payload is ignored. Absent keys default to None.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Drupal prefixes every taxonomy term resource type with this namespace
TAXONOMY_TYPE_PREFIX = "taxonomy_term--"

# Collection path and relationship used for products
ITEM_COLLECTION = "node/item"
SIZES_RELATIONSHIP = "field_taglie"


class _JsonApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ResourceIdentifier(_JsonApiModel):
    """A `{id, type}` reference inside a relationship."""

    id: Any = None
    type: Any = None


class Relationship(_JsonApiModel):
    """A relationship object; `data` is to-one, to-many, or empty."""

    data: Union[list[ResourceIdentifier], ResourceIdentifier, None] = None

    @field_validator("data", mode="before")
    @classmethod
    def _references_only(cls, value: Any) -> Any:
        # Entries that are not reference objects are skipped, not rejected
        if isinstance(value, list):
            return [ref for ref in value if isinstance(ref, dict)]
        return value if isinstance(value, dict) else None

    def identifiers(self) -> list[ResourceIdentifier]:
        """Return the to-many references; a to-one or empty relationship yields none."""
        if isinstance(self.data, list):
            return list(self.data)
        return []


class ItemAttributes(_JsonApiModel):
    """Scalar attributes, passed through as Drupal sends them."""

    title: Any = None
    field_categoria: Any = None
    field_materiale: Any = None
    field_prezzo: Any = None  # number or localized string, see to_number_maybe
    field_valuta: Any = None


class ItemRelationships(_JsonApiModel):
    field_taglie: Optional[Relationship] = None

    @field_validator("field_taglie", mode="before")
    @classmethod
    def _relationship_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


class TermAttributes(_JsonApiModel):
    name: Any = None


class IncludedResource(_JsonApiModel):
    """A secondary resource from the document's `included` array."""

    id: Any = None
    type: Any = None
    attributes: TermAttributes = Field(default_factory=TermAttributes)

    @property
    def is_taxonomy_term(self) -> bool:
        return isinstance(self.type, str) and self.type.startswith(TAXONOMY_TYPE_PREFIX)

    @field_validator("attributes", mode="before")
    @classmethod
    def _attributes_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}


class ItemResource(_JsonApiModel):
    """The primary `data` resource of a product document."""

    id: Optional[str] = None
    type: Optional[str] = None
    attributes: ItemAttributes = Field(default_factory=ItemAttributes)
    relationships: ItemRelationships = Field(default_factory=ItemRelationships)

    @field_validator("attributes", "relationships", mode="before")
    @classmethod
    def _mapping_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}


class JsonApiDocument(_JsonApiModel):
    """A decoded JSON:API response for a single product."""

    data: Optional[ItemResource] = None
    included: list[IncludedResource] = Field(default_factory=list)

    @field_validator("included", mode="before")
    @classmethod
    def _included_list(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [entry for entry in value if isinstance(entry, dict)]


class Product(BaseModel):
    """Flattened, consumer-ready product record."""

    id: str
    type: str
    title: Any = None
    categoria: Any = None
    materiale: Any = None
    prezzo: Optional[Union[int, float]] = None
    valuta: Any = None
    taglie: list[Any] = Field(default_factory=list)
    taglie_ids: list[Any] = Field(default_factory=list)


@dataclass(frozen=True)
class Found:
    """The upstream returned the resource."""

    document: dict[str, Any]


@dataclass(frozen=True)
class NotFound:
    """The upstream answered 404 for the requested resource."""

    url: str


FetchResult = Union[Found, NotFound]
