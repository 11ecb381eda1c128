"""OpenTelemetry initialization and configuration for wordrank.

OpenTelemetry allows the global tracer provider to be set only once per
process. The provider is therefore installed on the first init and kept;
init/shutdown swap the span processor it exports through.
"""

import logging
import os
import sys
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)


class _SwappableSpanProcessor(SpanProcessor):
    """Forwards spans to the current processor, if any."""

    def __init__(self):
        self.delegate: Optional[SpanProcessor] = None

    def on_start(self, span, parent_context=None):
        if self.delegate is not None:
            self.delegate.on_start(span, parent_context=parent_context)

    def on_end(self, span):
        if self.delegate is not None:
            self.delegate.on_end(span)

    def shutdown(self):
        if self.delegate is not None:
            self.delegate.shutdown()
            self.delegate = None

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        if self.delegate is not None:
            return self.delegate.force_flush(timeout_millis)
        return True


_initialized = False
_provider: Optional[TracerProvider] = None
_processor = _SwappableSpanProcessor()


def _build_processor(
    exporter: str, endpoint: Optional[str], span_exporter: Optional[SpanExporter]
) -> SpanProcessor:
    if span_exporter is not None:
        return SimpleSpanProcessor(span_exporter)
    if exporter == "otlp":
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        endpoint = endpoint or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")
        return BatchSpanProcessor(
            OTLPSpanExporter(endpoint=endpoint, insecure=True),
            schedule_delay_millis=1000,
        )
    if exporter == "console":
        return SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr))
    raise ValueError(f"unknown span exporter '{exporter}' (expected 'console' or 'otlp')")


def init_telemetry(
    service_name: Optional[str] = None,
    exporter: str = "console",
    endpoint: Optional[str] = None,
    span_exporter: Optional[SpanExporter] = None,
) -> Optional[TracerProvider]:
    """Initialize OpenTelemetry tracing.

    Can be called again after shutdown_telemetry; spans then go to the new
    exporter. The service name is fixed by the first call in the process.

    Args:
        service_name: Service name for traces (default: OTEL_SERVICE_NAME or "wordrank")
        exporter: "console" to print spans, "otlp" to ship them to a collector
        endpoint: OTLP collector endpoint (default: OTEL_EXPORTER_OTLP_ENDPOINT
            or http://localhost:4317)
        span_exporter: Use this exporter instead of building one from ``exporter``

    Returns:
        The installed provider, or None if tracing is already active
    """
    global _initialized, _provider
    if _initialized:
        return None

    processor = _build_processor(exporter, endpoint, span_exporter)

    if _provider is None:
        service_name = service_name or os.getenv("OTEL_SERVICE_NAME", "wordrank")
        resource = Resource.create(
            {
                "service.name": service_name,
                "service.version": "0.1.0",
            }
        )
        provider = TracerProvider(resource=resource)
        provider.add_span_processor(_processor)
        trace.set_tracer_provider(provider)
        _provider = provider

    _processor.delegate = processor
    _initialized = True
    logging.debug("[wordrank.tracing] OpenTelemetry initialized: exporter=%s", exporter)
    return _provider


def shutdown_telemetry() -> None:
    """Stop exporting, flushing pending spans. The provider stays installed."""
    global _initialized
    if not _initialized:
        return

    _processor.shutdown()
    _initialized = False
    logging.debug("[wordrank.tracing] OpenTelemetry shutdown complete")


__all__ = ["init_telemetry", "shutdown_telemetry"]
