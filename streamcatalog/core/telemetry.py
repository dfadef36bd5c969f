"""
Telemetry configuration (Tracing).
Sets up OpenTelemetry so playback sessions show up as spans.
"""
from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from streamcatalog.config import Settings, get_settings

TRACER_NAME = "streamcatalog"


def setup_telemetry(settings: Optional[Settings] = None) -> Optional[TracerProvider]:
    """
    Setup OpenTelemetry tracing via OTLP.

    Does nothing unless ENABLE_OTEL is set; the API then falls back to its
    no-op tracer.

    Returns:
        The installed TracerProvider, or None when tracing is disabled
    """
    settings = settings or get_settings()

    if not settings.ENABLE_OTEL:
        return None

    # Define resource (service name, version, etc.)
    resource = Resource.create(attributes={
        "service.name": settings.APP_NAME,
        "service.version": settings.APP_VERSION,
        "deployment.environment": "production" if not settings.DEBUG else "development",
    })

    provider = TracerProvider(resource=resource)

    # OTLP Exporter (sends traces to Jaeger/Tempo/Honeycomb)
    # Default is localhost:4317
    otlp_exporter = OTLPSpanExporter()
    provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    trace.set_tracer_provider(provider)
    return provider


def get_tracer() -> trace.Tracer:
    """Tracer used by the playback simulation."""
    return trace.get_tracer(TRACER_NAME)
