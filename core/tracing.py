import os

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from core.dependencies import get_settings

log = structlog.get_logger(__name__)

TRACER_NAME = "payments.nvp_client"


def init_tracer(service_name: str | None = None) -> TracerProvider:
    """Initialize OpenTelemetry tracer with OTLP exporter"""
    if service_name is None:
        service_name = get_settings().OTEL_SERVICE_NAME
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))

    # Allow disabling tracing via environment variable (useful in tests)
    if os.getenv("DISABLE_TRACING", "").lower() in {"1", "true", "yes"}:
        exporter = ConsoleSpanExporter()
    else:
        try:
            exporter = OTLPSpanExporter()
        except Exception as exc:  # pragma: no cover – only hit when no collector
            log.warning("OTLP exporter unavailable, tracing disabled", error=str(exc))
            exporter = ConsoleSpanExporter()

    provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    return provider


def get_tracer():
    """Tracer used around gateway round trips; a no-op until init_tracer runs."""
    return trace.get_tracer(TRACER_NAME)
