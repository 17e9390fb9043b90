"""Read-only client for the Drupal JSON:API.

One request per call: the relationship to resolve is requested with
`include=` so the related taxonomy terms come back in the same response.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx

from drupal_mcp.lib.config_manager import ConfigManager, config

from .exceptions import ConfigurationError, DrupalTransportError, PayloadValidationError
from .models import ITEM_COLLECTION, SIZES_RELATIONSHIP, FetchResult, Found, NotFound

logger = logging.getLogger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


@dataclass(frozen=True)
class DrupalSettings:
    """Connection settings for the upstream JSON:API."""

    base_url: str
    token: Optional[str] = None
    timeout: float = 5.0

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return f"DrupalSettings(base_url={self.base_url!r}, token={token!r}, timeout={self.timeout!r})"


def get_drupal_settings(cfg: Optional[ConfigManager] = None) -> DrupalSettings:
    """Resolve DrupalSettings from configuration.

    Raises:
        ConfigurationError: If DRUPAL_JSONAPI_BASE is not set
    """
    cfg = cfg or config
    base_url = (cfg.get("DRUPAL_JSONAPI_BASE") or "").strip()
    if not base_url:
        raise ConfigurationError("Missing DRUPAL_JSONAPI_BASE in environment or .env")

    return DrupalSettings(
        base_url=base_url.rstrip("/"),
        token=cfg.get("DRUPAL_TOKEN") or None,
        timeout=cfg.get("DRUPAL_TIMEOUT"),
    )


class DrupalClient:
    """Fetches single resources from the Drupal JSON:API."""

    def __init__(self, settings: DrupalSettings):
        """Initialize the client.

        Args:
            settings: Base URL, optional bearer token and timeout
        """
        self.settings = settings

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": JSONAPI_MEDIA_TYPE}
        if self.settings.token:
            headers["Authorization"] = f"Bearer {self.settings.token}"
        return headers

    def resource_url(self, resource_path: str) -> str:
        return f"{self.settings.base_url}/{resource_path.lstrip('/')}"

    async def fetch_resource(self, resource_path: str, include: Optional[str] = None) -> FetchResult:
        """Fetch one JSON:API resource.

        Args:
            resource_path: Path below the base URL, e.g. "node/item/<uuid>"
            include: Relationship name to embed in `included`

        Returns:
            Found with the decoded document, or NotFound on HTTP 404

        Raises:
            DrupalTransportError: On any other non-2xx status or a network failure
        """
        url = self.resource_url(resource_path)
        params = {"include": include} if include else None

        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                response = await client.get(url, headers=self.headers, params=params)
        except httpx.HTTPError as e:
            raise DrupalTransportError(f"Drupal JSON:API request failed: {e}", url=url) from e

        if response.status_code == 404:
            logger.debug(f"Drupal returned 404 for {url}")
            return NotFound(url=url)
        if not response.is_success:
            raise DrupalTransportError(
                f"Drupal JSON:API error {response.status_code}",
                status_code=response.status_code,
                url=url,
            )

        try:
            document: Any = response.json()
        except ValueError as e:
            raise PayloadValidationError(f"Drupal returned a non-JSON body for {url}") from e
        return Found(document=document)

    async def get_item(self, item_id: str) -> FetchResult:
        """Fetch a product node with its size terms included."""
        path = f"{ITEM_COLLECTION}/{quote(item_id, safe='')}"
        return await self.fetch_resource(path, include=SIZES_RELATIONSHIP)
