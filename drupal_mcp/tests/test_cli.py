"""Tests for the command line entry points."""

import json
import logging
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from drupal_mcp.cli.main import app
from drupal_mcp.services.drupal import DrupalClient, Found, NotFound

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structured logs out of the captured command output."""
    with patch("drupal_mcp.cli.main.setup_logging"):
        yield


def test_get_product_prints_envelope(sample_document):
    with patch.object(DrupalClient, "get_item", new=AsyncMock(return_value=Found(document=sample_document))):
        result = runner.invoke(app, ["get-product", "abc"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["product"]["title"] == "Shoe"


def test_get_product_not_found_exit_code():
    with patch.object(DrupalClient, "get_item", new=AsyncMock(return_value=NotFound(url="u"))):
        result = runner.invoke(app, ["get-product", "missing"])

    assert result.exit_code == 2
    assert json.loads(result.stdout)["error"] == "not_found"


def test_missing_base_url_exits(monkeypatch):
    monkeypatch.delenv("DRUPAL_JSONAPI_BASE", raising=False)

    result = runner.invoke(app, ["get-product", "abc"])

    assert result.exit_code == 1


def test_http_command_serves_app():
    with patch("drupal_mcp.cli.main.uvicorn.run") as mock_run:
        result = runner.invoke(app, ["http", "--port", "9999"])

    assert result.exit_code == 0
    kwargs = mock_run.call_args[1]
    assert kwargs["port"] == 9999
    assert kwargs["host"] == "0.0.0.0"


def test_startup_logs_masked_config(monkeypatch, caplog):
    monkeypatch.setenv("DRUPAL_TOKEN", "abcd1234efgh5678")

    with patch.object(DrupalClient, "get_item", new=AsyncMock(return_value=NotFound(url="u"))):
        with caplog.at_level(logging.INFO, logger="drupal_mcp.lib.config_manager"):
            runner.invoke(app, ["get-product", "missing"])

    record = next(r for r in caplog.records if r.getMessage() == "Configuration loaded")
    assert record.extra_config["DRUPAL_TOKEN"] == "abcd********5678"
    assert record.extra_config["DRUPAL_JSONAPI_BASE"]


def test_missing_base_url_skips_config_log(monkeypatch, caplog):
    monkeypatch.delenv("DRUPAL_JSONAPI_BASE", raising=False)

    with caplog.at_level(logging.INFO, logger="drupal_mcp.lib.config_manager"):
        runner.invoke(app, ["get-product", "abc"])

    assert "Configuration loaded" not in caplog.text
