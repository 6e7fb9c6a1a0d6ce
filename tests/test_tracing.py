"""Test per-request tracing spans."""
from fastapi.testclient import TestClient
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from api.main import create_app
from api.middleware import REQUEST_ID_HEADER
from core.observability.otel_setup import create_request_span
from verticals.catalog.repository import BookStore


def test_no_tracer_no_span():
    assert create_request_span(None, "GET", "/api/books", "r1") is None


def test_request_span_recorded():
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))

    app = create_app(store=BookStore())
    app.state.tracer = provider.get_tracer("test")
    TestClient(app).get("/api/books/999", headers={REQUEST_ID_HEADER: "trace-1"})

    spans = exporter.get_finished_spans()
    assert len(spans) == 1
    span = spans[0]
    assert span.name == "GET /api/books/999"
    assert span.attributes["http.status_code"] == 404
    assert span.attributes["request.id"] == "trace-1"
