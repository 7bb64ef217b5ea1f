"""Tests for rolegraph.logging module."""

from __future__ import annotations

import json
import logging
import os
from unittest.mock import patch

import pytest

from rolegraph import (
    LogLevel,
    RoleGraphConfig,
    RoleGraphFormatter,
    get_principal_logger,
    safe_preview,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestSafePreview:
    """Tests for safe_preview function."""

    def test_none_value(self) -> None:
        """Test that None returns empty string."""
        assert safe_preview(None) == ""

    def test_string_with_whitespace(self) -> None:
        """Test that whitespace is normalized."""
        assert safe_preview("hello\n\tworld  test") == "hello world test"

    def test_string_truncation(self) -> None:
        """Test that long strings are truncated."""
        result = safe_preview("a" * 300, limit=100)
        assert len(result) == 100
        assert result.endswith("…")

    def test_sets_are_sorted(self) -> None:
        """Test that sets preview in stable order."""
        assert safe_preview(frozenset({"user", "admin", "editor"})) == '["admin", "editor", "user"]'

    def test_dict_value(self) -> None:
        """Test that dicts are converted to JSON."""
        result = safe_preview({"admin": ["manager"]})
        assert json.loads(result) == {"admin": ["manager"]}


class TestRoleGraphFormatter:
    """Tests for RoleGraphFormatter."""

    def test_json_format(self) -> None:
        """Test JSON formatter with principal and extra fields."""
        formatter = RoleGraphFormatter(json_format=True)
        record = make_record()
        record.principal = "user-123"
        record.permission = "product:read"

        data = json.loads(formatter.format(record))
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["principal"] == "user-123"
        assert data["permission"] == "product:read"

    def test_json_without_principal(self) -> None:
        """Test JSON formatter leaves principal out when absent."""
        data = json.loads(RoleGraphFormatter(json_format=True).format(make_record()))
        assert "principal" not in data

    def test_plain_format(self) -> None:
        """Test plain text formatter."""
        formatter = RoleGraphFormatter(json_format=False)
        record = make_record()
        record.principal = "user-123"

        result = formatter.format(record)
        assert "INFO" in result
        assert "Test message" in result
        assert "principal=user-123" in result
        assert not result.startswith("{")


class TestPrincipalLogger:
    """Tests for the principal logger adapter."""

    def test_logger_with_principal(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test records carry the bound principal."""
        logger = get_principal_logger("test", principal="user-123")
        with caplog.at_level(logging.INFO):
            logger.info("Test message")
        assert caplog.records[0].principal == "user-123"

    def test_principal_override(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a per-call principal replaces the bound one."""
        logger = get_principal_logger("test", principal="user-123")
        with caplog.at_level(logging.INFO):
            logger.info("Test message", principal="svc-7")
        assert caplog.records[0].principal == "svc-7"

    def test_logger_without_principal(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test records without a principal have no principal attribute."""
        logger = get_principal_logger("test")
        with caplog.at_level(logging.INFO):
            logger.info("Test message")
        assert not hasattr(caplog.records[0], "principal")


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_with_config(self) -> None:
        """Test logging setup with RoleGraphConfig."""
        setup_logging(config=RoleGraphConfig(log_level=LogLevel.DEBUG), json_format=False)
        assert logging.getLogger().level == logging.DEBUG

    @patch.dict(os.environ, {"ROLEGRAPH_LOG_LEVEL": "WARNING"}, clear=True)
    def test_setup_with_env(self) -> None:
        """Test logging setup loading from environment."""
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_json_from_config(self, capsys: pytest.CaptureFixture) -> None:
        """Test log_json in config selects JSON output."""
        setup_logging(config=RoleGraphConfig(log_level=LogLevel.INFO, log_json=True))
        logging.getLogger("test").info("Test message")

        data = json.loads(capsys.readouterr().err.strip())
        assert data["message"] == "Test message"
        assert data["logger"] == "test"

    def test_plain_format(self, capsys: pytest.CaptureFixture) -> None:
        """Test plain text format output."""
        setup_logging(config=RoleGraphConfig(log_level=LogLevel.INFO), json_format=False)
        logging.getLogger("test").info("Test message")

        stderr_output = capsys.readouterr().err.strip()
        assert "Test message" in stderr_output
        assert not stderr_output.startswith("{")
