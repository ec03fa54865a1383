"""Optional tracing collaborator.

Components take a Tracer argument instead of reaching for global state. The
default NullTracer records nothing; the CLI swaps in an OpenTelemetry-backed
tracer when an OTLP endpoint is configured.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

OTLP_ENDPOINT_VAR = "OTEL_EXPORTER_OTLP_ENDPOINT"
SERVICE_NAME = "llm-quota"


class Tracer(Protocol):
    """Minimal tracing surface used by the pipeline."""

    def span(self, name: str, **attributes: Any) -> Any:
        """Return a context manager covering one unit of work."""
        ...

    def shutdown(self) -> None:
        """Flush and release exporter resources."""
        ...


class NullTracer:
    """Tracer that records nothing."""

    @contextmanager
    def span(self, name: str, **attributes: Any) -> Iterator[None]:
        yield

    def shutdown(self) -> None:
        pass


class OtelTracer:
    """Tracer backed by an OpenTelemetry SDK provider."""

    def __init__(self, provider: Any) -> None:
        self._provider = provider
        self._tracer = provider.get_tracer("llmquota")

    @contextmanager
    def span(self, name: str, **attributes: Any) -> Iterator[Any]:
        with self._tracer.start_as_current_span(name) as span:
            for key, value in attributes.items():
                if value is not None:
                    span.set_attribute(key, value)
            yield span

    def shutdown(self) -> None:
        self._provider.shutdown()


def create_otlp_tracer() -> OtelTracer:
    """Build a tracer exporting spans over OTLP/HTTP.

    The exporter reads OTEL_EXPORTER_OTLP_ENDPOINT, _PROTOCOL and _HEADERS
    from the environment itself.
    """
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
    return OtelTracer(provider)


def init_tracer() -> Tracer:
    """Return an OTLP tracer if an endpoint is configured, else a NullTracer."""
    if os.environ.get(OTLP_ENDPOINT_VAR, "").strip():
        return create_otlp_tracer()
    return NullTracer()
