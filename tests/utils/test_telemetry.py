"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from opentelemetry import trace

from mcpaws.utils.telemetry import configure_telemetry, get_tracer


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        assert isinstance(get_tracer("test.module"), trace.Tracer)

    def test_default_name(self) -> None:
        assert isinstance(get_tracer(), trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans accept attributes silently."""
        with get_tracer("test.noop").start_as_current_span("mcpaws.request") as span:
            span.set_attribute("mcpaws.rpc.method", "tools/list")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_configures_provider(self) -> None:
        try:
            import opentelemetry.sdk.trace  # noqa: F401
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        with patch("mcpaws.utils.telemetry.trace.set_tracer_provider") as mock_set:
            configure_telemetry(service_name="test-svc")
        mock_set.assert_called_once()

    def test_otlp_raises_without_exporter(self) -> None:
        try:
            import opentelemetry.sdk.trace  # noqa: F401
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(otlp_endpoint="localhost:4317")

    def test_otlp_exporter_attached(self) -> None:
        try:
            import opentelemetry.sdk.trace  # noqa: F401
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        fake_module = MagicMock()
        with (
            patch.dict(
                "sys.modules",
                {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": fake_module},
            ),
            patch("mcpaws.utils.telemetry.trace.set_tracer_provider"),
        ):
            configure_telemetry(otlp_endpoint="localhost:4317")
        fake_module.OTLPSpanExporter.assert_called_once_with(endpoint="localhost:4317")
