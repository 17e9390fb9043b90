"""API middleware components."""

from drupal_mcp.api.middleware.correlation import CorrelationMiddleware

__all__ = ["CorrelationMiddleware"]
