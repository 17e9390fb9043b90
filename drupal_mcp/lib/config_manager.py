"""Configuration manager with hierarchy: environment → .env → defaults.

This module provides a centralized way to access configuration values:
1. Process environment (what the hosting platform injects)
2. .env file at the git root or working directory (local development)
3. Sensible hardcoded defaults from ``defaults.py``

Usage:
    from drupal_mcp.lib.config_manager import config

    base_url = config.get("DRUPAL_JSONAPI_BASE")
    port = config.get("PORT")  # coerced to int
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from drupal_mcp.lib.defaults import DEFAULTS, SENSITIVE_KEYS, get_default
from drupal_mcp.lib.logging_config import log_with_context

logger = logging.getLogger(__name__)


def _find_git_root(start_path: Optional[Path] = None) -> Path:
    """Walk up directory tree to find .git/ folder."""
    current = start_path or Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent

    raise FileNotFoundError("No .git directory found in any parent directory")


def _coerce_type(value: str, default: Any) -> Any:
    """Coerce string value to match the type of the default.

    Args:
        value: String value from the environment
        default: Default value (determines target type)

    Returns:
        Value coerced to appropriate type
    """
    if default is None:
        return value

    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            return default
    if isinstance(default, float):
        try:
            return float(value)
        except ValueError:
            return default
    return value


class ConfigManager:
    """Manages configuration with environment → .env → defaults hierarchy.

    The manager loads .env on initialization. Values already present in the
    process environment are never overridden by the file.
    """

    def __init__(self, load_env: bool = True):
        """Initialize the config manager and optionally load .env."""
        self._env_loaded = False
        self.env_path: Optional[Path] = None
        if load_env:
            self._load_env()

    def _load_env(self) -> None:
        """Load .env file from git root, falling back to the working directory."""
        if self._env_loaded:
            return

        try:
            env_path = _find_git_root() / ".env"
        except FileNotFoundError:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            self.env_path = env_path
            logger.debug(f"Loaded .env from {env_path}")
        else:
            logger.debug(f"No .env file found at {env_path}")

        self._env_loaded = True

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value (environment → defaults).

        Args:
            key: Configuration key
            default: Override default (uses DEFAULTS if not provided)

        Returns:
            Configuration value
        """
        env_value = os.getenv(key)
        if env_value is not None:
            default_val = default if default is not None else get_default(key)
            return _coerce_type(env_value, default_val)

        if default is not None:
            return default
        return get_default(key)

    def get_all(self, mask_sensitive: bool = False) -> dict[str, Any]:
        """Get all known configuration values.

        Args:
            mask_sensitive: Replace secrets with a masked representation

        Returns:
            Dictionary of all config keys and their resolved values
        """
        result = {}
        for key in DEFAULTS:
            value = self.get(key)
            result[key] = self.mask_value(key, value) if mask_sensitive else value
        return result

    def log_summary(self) -> None:
        """Log the resolved configuration at startup, secrets masked."""
        log_with_context(
            logger,
            "info",
            "Configuration loaded",
            env_file=str(self.env_path) if self.env_path else None,
            config=self.get_all(mask_sensitive=True),
        )

    def is_sensitive(self, key: str) -> bool:
        """Check if a key contains sensitive data."""
        return key in SENSITIVE_KEYS

    def mask_value(self, key: str, value: Any) -> Any:
        """Mask sensitive values for display.

        Args:
            key: Configuration key
            value: Value to potentially mask

        Returns:
            Masked string for sensitive keys, the original value otherwise
        """
        if not self.is_sensitive(key):
            return value

        str_value = str(value)
        if not str_value:
            return ""
        if len(str_value) <= 8:
            return "*" * len(str_value)
        return str_value[:4] + "*" * (len(str_value) - 8) + str_value[-4:]


# Singleton instance
config = ConfigManager()
