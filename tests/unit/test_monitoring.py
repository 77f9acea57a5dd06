"""Tests for metrics and tracing."""

import pytest
import structlog
from structlog.testing import capture_logs

from a2ui_sync.core import LogContext, Settings, configure_from_settings
from a2ui_sync.monitoring import metrics_collector, trace_operation


@pytest.mark.unit
def test_metrics_exposition(provider):
    """Test engine activity shows up in the Prometheus output."""
    provider.process_message({"beginRendering": {"surfaceId": "metrics", "root": "root"}})
    provider.set_data_value("metrics", "/x", 1)
    provider.interpolate("metrics", "${/x}")

    output = metrics_collector.get_metrics().decode("utf-8")

    assert "a2ui_messages_total" in output
    assert "a2ui_data_writes_total" in output
    assert "a2ui_template_cache_total" in output
    assert "a2ui_surfaces_active" in output


@pytest.mark.unit
def test_trace_operation_logs():
    """Test start and end events carry the operation context."""
    with capture_logs() as logs:
        with trace_operation("compile", template="t"):
            pass

    events = [log["event"] for log in logs]
    assert events == ["operation_start", "operation_end"]
    assert logs[1]["template"] == "t"
    assert "duration_ms" in logs[1]


@pytest.mark.unit
def test_trace_operation_error():
    """Test failures are logged and re-raised."""
    with capture_logs() as logs:
        with pytest.raises(KeyError):
            with trace_operation("apply"):
                raise KeyError("boom")

    assert logs[-1]["event"] == "operation_error"
    assert logs[-1]["log_level"] == "error"


@pytest.mark.unit
def test_log_context_scopes_surface_id():
    """Test bound context is removed when the scope ends."""
    with LogContext(surface_id="main"):
        assert structlog.contextvars.get_contextvars()["surface_id"] == "main"
    assert "surface_id" not in structlog.contextvars.get_contextvars()


@pytest.mark.unit
def test_configure_from_settings_json():
    """Test host-side logging setup honours json_logs."""
    try:
        configure_from_settings(Settings(log_level="WARNING", json_logs=True))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.contextvars.merge_contextvars in processors
    finally:
        structlog.reset_defaults()
