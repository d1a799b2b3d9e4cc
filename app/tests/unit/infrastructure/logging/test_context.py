"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- bind_culture_context() context manager
- get_correlation_id()
- clear_request_context()
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_culture_context,
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_bind_request_context_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context(request_path="/culture"):
            correlation_id = get_correlation_id()
            assert correlation_id is not None
            # Should be a valid UUID
            uuid.UUID(correlation_id)

    def test_bind_request_context_uses_provided_correlation_id(self):
        """Provided correlation ID is used instead of generating one."""
        with bind_request_context(correlation_id="test-correlation-123"):
            assert get_correlation_id() == "test-correlation-123"

    def test_bind_request_context_binds_path_and_method(self):
        """Request path and method are bound to context."""
        with bind_request_context(request_path="/culture", request_method="POST"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("request_path") == "/culture"
            assert ctx.get("request_method") == "POST"

    def test_bind_request_context_binds_extra_context(self):
        """Extra keyword arguments are bound to context."""
        with bind_request_context(client="test", custom_field="value"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("client") == "test"
            assert ctx.get("custom_field") == "value"

    def test_bind_request_context_skips_none_values(self):
        """Unset path and method are not bound."""
        with bind_request_context(correlation_id="test-123"):
            ctx = structlog.contextvars.get_contextvars()
            assert "request_path" not in ctx
            assert "request_method" not in ctx

    def test_bind_request_context_clears_after_exit(self):
        """Context is cleared after exiting the context manager."""
        with bind_request_context(correlation_id="test-123", request_path="/x"):
            assert get_correlation_id() == "test-123"

        assert get_correlation_id() is None
        assert "request_path" not in structlog.contextvars.get_contextvars()

    def test_context_manager_exception_still_clears_context(self):
        """Context is cleared even if exception occurs inside."""
        with pytest.raises(ValueError):
            with bind_request_context(correlation_id="exception-test"):
                raise ValueError("Test exception")

        assert get_correlation_id() is None


@pytest.mark.unit
class TestBindCultureContext:
    """Test suite for bind_culture_context context manager."""

    def test_binds_culture_fields(self):
        with bind_culture_context("fr-CA", "fr"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["culture"] == "fr-CA"
            assert ctx["ui_culture"] == "fr"

    def test_unbinds_on_exit_and_keeps_request_context(self):
        with bind_request_context(correlation_id="req-1"):
            with bind_culture_context("fr-CA", "fr"):
                pass
            ctx = structlog.contextvars.get_contextvars()
            assert "culture" not in ctx
            assert "ui_culture" not in ctx
            assert ctx["correlation_id"] == "req-1"


@pytest.mark.unit
class TestClearRequestContext:
    """Test suite for clear_request_context function."""

    def test_clear_request_context_removes_all_context(self):
        """All context variables are cleared."""
        structlog.contextvars.bind_contextvars(correlation_id="x", culture="en-US")

        clear_request_context()

        assert get_correlation_id() is None
        assert len(structlog.contextvars.get_contextvars()) == 0

    def test_clear_request_context_idempotent(self):
        """Clearing an already clear context doesn't error."""
        clear_request_context()
        clear_request_context()
        assert get_correlation_id() is None
