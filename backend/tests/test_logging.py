"""
Tests for logging setup.
"""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from shared.config.logging import (
    DevelopmentFormatter,
    StructuredFormatter,
    request_id_var,
    setup_logging,
)
from shared.config.settings import Settings


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """setup_logging() follows the settings it is given."""

    def test_production_settings(self, restore_root_logger):
        setup_logging(Settings(environment="production", debug=False))

        handler = restore_root_logger.handlers[0]
        assert restore_root_logger.level == logging.INFO
        assert isinstance(handler.formatter, StructuredFormatter)
        assert handler.formatter.include_source is False

    def test_development_settings(self, restore_root_logger):
        setup_logging(Settings(environment="development", debug=True))

        assert restore_root_logger.level == logging.DEBUG
        assert isinstance(restore_root_logger.handlers[0].formatter, DevelopmentFormatter)

    def test_app_lifespan_uses_injected_settings(self, app, restore_root_logger):
        app.state.settings.debug = False
        with TestClient(app):
            assert restore_root_logger.level == logging.INFO


class TestStructuredFormatter:
    def test_json_record_carries_request_id_and_context(self):
        record = logging.LogRecord("inventory_api", logging.INFO, __file__, 1, "Product created", (), None)
        record.extra_data = {"entity_id": 7}
        token = request_id_var.set("req-1")
        try:
            record.request_id = request_id_var.get()
        finally:
            request_id_var.reset(token)

        data = json.loads(StructuredFormatter().format(record))
        assert data["message"] == "Product created"
        assert data["request_id"] == "req-1"
        assert data["data"] == {"entity_id": 7}
        assert "source" not in data
