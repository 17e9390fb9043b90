"""OpenTelemetry tracing, enabled only when an OTLP endpoint is configured."""

import asyncio
import functools
import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from drupal_mcp.lib.config_manager import config

logger = logging.getLogger(__name__)


def setup_tracing(
    service_name: str,
    otlp_endpoint: Optional[str] = None,
    app=None,
) -> bool:
    """Configure OpenTelemetry tracing.

    Args:
        service_name: Name of the service (e.g., "http", "stdio")
        otlp_endpoint: OTLP HTTP endpoint (default: OTLP_ENDPOINT config)
        app: FastAPI app to instrument, if any

    Returns:
        True if tracing was enabled
    """
    if otlp_endpoint is None:
        otlp_endpoint = config.get("OTLP_ENDPOINT")
    if not otlp_endpoint:
        logger.debug("OTLP_ENDPOINT not set, tracing disabled")
        return False

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.namespace": "drupal-products-mcp",
            "deployment.environment": config.get("ENVIRONMENT"),
        }
    )

    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{otlp_endpoint.rstrip('/')}/v1/traces"))
    )
    trace.set_tracer_provider(provider)

    HTTPXClientInstrumentor().instrument()
    if app is not None:
        FastAPIInstrumentor.instrument_app(app)

    logger.info(f"Tracing enabled, exporting to {otlp_endpoint}")
    return True


def traced(name: Optional[str] = None):
    """Decorator to run a function inside a span.

    Without a configured provider the global no-op tracer is used.

    Example:
        @traced("get_product_by_id")
        async def get_product_by_id(...):
            ...
    """

    def decorator(func):
        span_name = name or func.__name__
        tracer = trace.get_tracer(__name__)

        if asyncio.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                with tracer.start_as_current_span(span_name):
                    return await func(*args, **kwargs)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with tracer.start_as_current_span(span_name):
                return func(*args, **kwargs)

        return wrapper

    return decorator
