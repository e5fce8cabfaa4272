"""Telemetry setup: exporter selection and provider lifecycle."""

from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from storefront_admin.core.config import Settings
from storefront_admin.shared.telemetry.telemetry import (
    TelemetryConfig,
    build_span_exporter,
    get_telemetry,
    set_telemetry,
)


def test_exporter_none() -> None:
    assert build_span_exporter("none", None) is None


def test_exporter_otlp_with_endpoint() -> None:
    exporter = build_span_exporter("otlp", "http://localhost:4317")
    assert isinstance(exporter, OTLPSpanExporter)
    exporter.shutdown()


def test_exporter_otlp_without_endpoint_falls_back_to_console() -> None:
    assert isinstance(build_span_exporter("otlp", None), ConsoleSpanExporter)
    assert isinstance(build_span_exporter("jaeger", None), ConsoleSpanExporter)


def test_from_settings() -> None:
    settings = Settings(
        jwt_secret="s", telemetry_enabled=True, telemetry_environment="staging"
    )
    telemetry = TelemetryConfig.from_settings(settings)
    assert telemetry.service_name == "storefront-admin"
    assert telemetry.enabled is True
    assert telemetry.environment == "staging"


def test_disabled_config_installs_nothing() -> None:
    telemetry = TelemetryConfig("svc", "1.0", enabled=False)
    assert telemetry.setup_telemetry() is None
    assert telemetry.tracer_provider is None
    telemetry.shutdown()


def test_set_and_clear_global_instance() -> None:
    telemetry = TelemetryConfig("svc", "1.0", enabled=False)
    set_telemetry(telemetry)
    try:
        assert get_telemetry() is telemetry
    finally:
        set_telemetry(None)
    assert get_telemetry() is None
