"""Errors raised by the Drupal JSON:API integration."""

from typing import Optional


class DrupalError(Exception):
    """Base class for Drupal integration errors."""


class ConfigurationError(DrupalError):
    """Required configuration is missing; the process cannot start."""


class DrupalTransportError(DrupalError):
    """Upstream answered with an unexpected status, or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class PayloadValidationError(DrupalError):
    """Upstream document is structurally invalid."""


class UnknownToolError(DrupalError):
    """A tool name other than the supported one was invoked."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name
