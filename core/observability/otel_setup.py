"""
Catalog observability setup

- Logs: stdlib logging, JSON in production, text for local runs, every
  record stamped with the current request id
- Traces: OpenTelemetry, one span per HTTP request, exported over OTLP
  when an endpoint is configured
"""
from __future__ import annotations
from typing import Optional
import json
import logging
import os
from datetime import datetime, timezone

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

# Extra record attributes surfaced by the JSON formatter when present
_EXTRA_FIELDS = ("request_id", "method", "path", "status_code", "duration_ms")


class RequestIdFilter(logging.Filter):
    """Attach the current request id (or "-") to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        from api.middleware import get_current_request_id

        if getattr(record, "request_id", None) is None:
            record.request_id = get_current_request_id()
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install a single root handler. Safe to call more than once."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_catalog_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._catalog_handler = True
    handler.addFilter(RequestIdFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_otel(
    service_name: str = "book-catalog",
    endpoint: Optional[str] = None,
):
    """Initialize OpenTelemetry and return a tracer.

    Spans are only exported when an OTLP endpoint is given or set in
    OTEL_EXPORTER_OTLP_ENDPOINT; the exporter package ships in the `otel`
    extra.
    """
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    otlp_endpoint = endpoint or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if otlp_endpoint:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    return trace.get_tracer(service_name)


def create_request_span(tracer, method: str, path: str, request_id: str):
    """Create a span for one HTTP request."""
    if tracer is None:
        return None
    return tracer.start_span(
        f"{method} {path}",
        attributes={
            "http.method": method,
            "http.target": path,
            "request.id": request_id,
        },
    )
