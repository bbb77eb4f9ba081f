"""OpenTelemetry configuration helpers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from trade_journal.config import AppSettings

logger = logging.getLogger(__name__)

_TRACER_PROVIDER: TracerProvider | None = None


def _build_resource(settings: AppSettings) -> Resource:
    attributes: dict[str, Any] = {
        "service.name": settings.telemetry_service_name or settings.app_name,
        "service.namespace": "trade-journal",
    }
    return Resource.create(attributes)


def _build_exporter_options(settings: AppSettings) -> dict[str, Any]:
    options: dict[str, Any] = {"insecure": settings.telemetry_otlp_insecure}
    if settings.telemetry_otlp_endpoint:
        options["endpoint"] = settings.telemetry_otlp_endpoint
    return options


def setup_telemetry(app: FastAPI, settings: AppSettings) -> bool:
    """Configure trace export once per process and instrument ``app``.

    Later apps reuse the tracer provider from the first call. Returns whether
    ``app`` was instrumented.
    """

    global _TRACER_PROVIDER  # noqa: PLW0603 - single initialisation guard

    if not settings.telemetry_enabled:
        logger.info("Telemetry disabled via configuration")
        return False

    if _TRACER_PROVIDER is not None:
        FastAPIInstrumentor.instrument_app(app, tracer_provider=_TRACER_PROVIDER)
        return True

    sampler = ParentBased(TraceIdRatioBased(settings.telemetry_sample_ratio))
    tracer_provider = TracerProvider(resource=_build_resource(settings), sampler=sampler)
    exporter = OTLPSpanExporter(**_build_exporter_options(settings))
    tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(tracer_provider)

    FastAPIInstrumentor.instrument_app(app, tracer_provider=tracer_provider)

    _TRACER_PROVIDER = tracer_provider
    logger.info("Telemetry initialised and instrumentation enabled")
    return True


__all__ = ["setup_telemetry"]
