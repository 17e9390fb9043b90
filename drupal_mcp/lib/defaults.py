"""Default configuration values for the products MCP server.

All hardcoded defaults live here. Everything except the Drupal base URL
has a usable default; the base URL must come from .env or the environment.

Config hierarchy: .env → process environment → these defaults
"""

from typing import Any

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULTS: dict[str, Any] = {
    # -------------------------------------------------------------------------
    # Drupal JSON:API upstream
    # -------------------------------------------------------------------------
    "DRUPAL_JSONAPI_BASE": "",  # Required, startup fails without it
    "DRUPAL_TOKEN": "",  # Empty = no Authorization header
    "DRUPAL_TIMEOUT": 5.0,

    # -------------------------------------------------------------------------
    # HTTP host
    # -------------------------------------------------------------------------
    "HOST": "0.0.0.0",
    "PORT": 3000,

    # -------------------------------------------------------------------------
    # Observability
    # -------------------------------------------------------------------------
    "LOG_LEVEL": "INFO",
    "OTLP_ENDPOINT": "",  # Empty = tracing disabled
    "ENVIRONMENT": "production",
}

# Keys that should be masked in config dumps
SENSITIVE_KEYS: set[str] = {
    "DRUPAL_TOKEN",
}


def get_default(key: str) -> Any:
    """Get default value for a config key.

    Args:
        key: Configuration key

    Returns:
        Default value or None if not defined
    """
    return DEFAULTS.get(key)
