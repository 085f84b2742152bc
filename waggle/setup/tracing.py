"""OpenTelemetry Distributed Tracing Configuration.

분산 트레이싱 설정:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (OAuth provider 호출)
- Redis 자동 계측 (세션 저장소)

Architecture:
  Waggle API (OTel SDK) -> OTLP/HTTP (4318) -> Collector
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from waggle.setup.config import get_settings

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def configure_tracing() -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 여부 (WAGGLE_OTEL_ENABLED=false이면 False)
    """
    global _tracer_provider

    settings = get_settings()
    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled")
        return False
    if _tracer_provider is not None:
        return True

    resource = Resource.create(
        {
            "service.name": settings.service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.profile,
        }
    )
    _tracer_provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    exporter = OTLPSpanExporter(endpoint=f"{settings.otel_exporter_endpoint}/v1/traces")
    _tracer_provider.add_span_processor(
        BatchSpanProcessor(
            exporter,
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(_tracer_provider)

    HTTPXClientInstrumentor().instrument()
    RedisInstrumentor().instrument()

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "endpoint": settings.otel_exporter_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측."""
    if _tracer_provider is None:
        return
    FastAPIInstrumentor.instrument_app(app, excluded_urls="health")
    logger.info("FastAPI instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
        logger.info("OpenTelemetry tracing shutdown complete")
