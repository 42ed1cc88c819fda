"""Tests for structured logging context."""

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.athlete_analytics.core.logging import (
    bind_principal_context,
    bind_request_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    bind_request_context("test-request-123")
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == "test-request-123"


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    structlog.get_logger().info("test message")

    assert "request_id" not in capturing_logger.calls[0].kwargs


def test_bind_request_context_with_fields(capturing_logger):
    bind_request_context("req-1", method="GET", path="/api/v1/teams")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["path"] == "/api/v1/teams"


def test_bind_principal_context(capturing_logger):
    """Email is not logged by default."""
    bind_principal_context(42, "coach", "coach@example.com")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_id"] == 42
    assert kwargs["user_role"] == "coach"
    assert "user_email" not in kwargs


def test_bind_principal_context_with_email_logging_enabled(capturing_logger, monkeypatch):
    """Test binding principal context with email logging enabled."""
    from unittest.mock import MagicMock

    from src.athlete_analytics.core import config

    mock_settings = MagicMock()
    mock_settings.log_user_emails = True
    monkeypatch.setattr(config, "get_settings", lambda: mock_settings)

    bind_principal_context(42, "coach", "coach@example.com")
    structlog.get_logger().info("test message")

    assert capturing_logger.calls[0].kwargs["user_email"] == "coach@example.com"


def test_clear_request_context(capturing_logger):
    """Nothing bound for one request survives the clear."""
    bind_request_context("test-request-123")
    bind_principal_context(42, "admin")

    clear_request_context()

    structlog.get_logger().info("test message")
    kwargs = capturing_logger.calls[0].kwargs
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs


def test_context_accumulation(capturing_logger):
    """Test that context accumulates across multiple bind calls."""
    bind_request_context("test-request-123")
    bind_principal_context(42, "athlete")

    structlog.get_logger().info("test message")
    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["request_id"] == "test-request-123"
    assert kwargs["user_id"] == 42
