"""Test catalog configuration and logging setup."""
import json
import logging

import pytest

from core.observability.otel_setup import JSONFormatter, setup_logging
from patterns.domain_config import CatalogConfig


def test_defaults():
    config = CatalogConfig.default()
    assert config.api_prefix == "/api/books"
    assert config.seed_on_startup is True


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("CATALOG_API_PREFIX", "v1/books/")
    monkeypatch.setenv("CATALOG_SEED_ON_STARTUP", "false")
    config = CatalogConfig.from_env()
    assert config.api_prefix == "/v1/books"
    assert config.seed_on_startup is False


def test_from_env_without_vars(monkeypatch):
    monkeypatch.delenv("CATALOG_API_PREFIX", raising=False)
    monkeypatch.delenv("CATALOG_SEED_ON_STARTUP", raising=False)
    assert CatalogConfig.from_env() == CatalogConfig()


def test_config_is_frozen():
    config = CatalogConfig()
    with pytest.raises(Exception):
        config.api_prefix = "/other"


def test_json_formatter_includes_extras():
    record = logging.LogRecord("catalog", logging.INFO, __file__, 1, "GET %s", ("/x",), None)
    record.request_id = "req-1"
    record.status_code = 200
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "GET /x"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "req-1"
    assert payload["status_code"] == 200
    assert "method" not in payload


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    before = len([h for h in root.handlers if not getattr(h, "_catalog_handler", False)])
    level = root.level
    try:
        setup_logging("DEBUG", "text")
        setup_logging("DEBUG", "json")
        added = [h for h in root.handlers if getattr(h, "_catalog_handler", False)]
        assert len(added) == 1
        assert len(root.handlers) == before + 1
        assert root.level == logging.DEBUG
    finally:
        for h in list(root.handlers):
            if getattr(h, "_catalog_handler", False):
                root.removeHandler(h)
        root.setLevel(level)
