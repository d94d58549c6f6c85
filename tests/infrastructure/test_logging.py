"""Tests for structlog configuration."""

import json
import logging

import pytest
import structlog

from stockroom.infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(logging.WARNING)


class TestConfigureLogging:

    def test_json_output(self, capsys):
        configure_logging("INFO", json_logs=True)
        structlog.get_logger("test").info("Item deleted", code="A12T-4GH7-QPL9-3N4M")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "Item deleted"
        assert record["code"] == "A12T-4GH7-QPL9-3N4M"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters(self, capsys):
        configure_logging("WARNING", json_logs=True)
        structlog.get_logger("test").info("quiet")
        assert capsys.readouterr().out == ""
