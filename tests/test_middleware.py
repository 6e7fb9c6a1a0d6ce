"""Test request context middleware and the 500 catch-all."""
import logging

from fastapi.testclient import TestClient

from api.main import create_app
from api.middleware import REQUEST_ID_HEADER, get_current_request_id
from verticals.catalog.repository import BookStore


class BrokenStore(BookStore):
    def find_all(self):
        raise RuntimeError("disk on fire")

    def create(self, data):
        raise KeyError("secret internal detail")


def test_unexpected_error_returns_generic_500():
    client = TestClient(create_app(store=BrokenStore()))
    response = client.get("/api/books")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_500_does_not_leak_details():
    client = TestClient(create_app(store=BrokenStore()))
    response = client.post(
        "/api/books",
        json={"title": "T", "author": "A", "year": 2024, "genre": "G"},
    )
    assert response.status_code == 500
    assert "secret" not in response.text


def test_unexpected_error_is_logged(caplog):
    caplog.set_level(logging.ERROR, logger="api.middleware")
    client = TestClient(create_app(store=BrokenStore()))
    client.get("/api/books")
    assert any("Unhandled exception" in r.getMessage() for r in caplog.records)
    assert any(r.exc_info for r in caplog.records)


def test_request_id_echoed():
    client = TestClient(create_app(store=BookStore()))
    response = client.get("/api/books", headers={REQUEST_ID_HEADER: "abc-123"})
    assert response.headers[REQUEST_ID_HEADER] == "abc-123"


def test_request_id_generated():
    client = TestClient(create_app(store=BookStore()))
    first = client.get("/api/books").headers[REQUEST_ID_HEADER]
    second = client.get("/api/books").headers[REQUEST_ID_HEADER]
    assert first
    assert first != second


def test_request_id_on_error_responses():
    client = TestClient(create_app(store=BrokenStore()))
    response = client.get("/api/books", headers={REQUEST_ID_HEADER: "err-1"})
    assert response.headers[REQUEST_ID_HEADER] == "err-1"


def test_access_log_line(caplog):
    caplog.set_level(logging.INFO, logger="api.middleware")
    client = TestClient(create_app(store=BookStore()))
    client.get("/api/books/999", headers={REQUEST_ID_HEADER: "log-1"})
    records = [r for r in caplog.records if r.name == "api.middleware"]
    assert records
    assert records[-1].status_code == 404
    assert records[-1].path == "/api/books/999"


def test_request_id_default_outside_request():
    assert get_current_request_id() == "-"
