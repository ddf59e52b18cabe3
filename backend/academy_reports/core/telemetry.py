"""OpenTelemetry wiring for the reporting API.

Tracing, metrics and log export all go to one OTLP endpoint. Nothing is
installed unless ``telemetry_enabled`` is set; the report counter below is a
no-op until a meter provider exists.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from opentelemetry import metrics, trace
from opentelemetry._logs import set_logger_provider
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from opentelemetry.semconv.resource import ResourceAttributes
from sqlalchemy.ext.asyncio import AsyncEngine

from academy_reports.config import AppSettings

logger = logging.getLogger(__name__)

_configured = False
_EXPORT_INTERVAL_MS = 15000

_meter = metrics.get_meter("academy_reports")
_reports_built = _meter.create_counter(
    "academy.reports.built",
    unit="1",
    description="Financial reports and target views served, by period type",
)


def record_report(kind: str, period_type: str) -> None:
    """Count one served report (``kind`` is ``financial`` or ``targets``)."""

    _reports_built.add(1, {"report.kind": kind, "report.period_type": period_type})


def setup_telemetry(app: FastAPI, settings: AppSettings, engine: AsyncEngine | None = None) -> None:
    """Export traces, metrics and logs over OTLP and instrument FastAPI and SQLAlchemy."""

    global _configured  # noqa: PLW0603

    if _configured:
        return
    if not settings.telemetry_enabled:
        logger.info("Telemetry disabled via configuration")
        return

    resource = Resource.create(
        {
            ResourceAttributes.SERVICE_NAME: settings.telemetry_service_name or settings.app_name,
            ResourceAttributes.SERVICE_NAMESPACE: "academy",
        }
    )
    exporter_kwargs: dict[str, Any] = {"insecure": settings.telemetry_otlp_insecure}
    if settings.telemetry_otlp_endpoint:
        exporter_kwargs["endpoint"] = settings.telemetry_otlp_endpoint

    tracer_provider = TracerProvider(
        resource=resource,
        sampler=ParentBased(TraceIdRatioBased(settings.telemetry_sample_ratio)),
    )
    tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(**exporter_kwargs)))
    trace.set_tracer_provider(tracer_provider)

    meter_provider = MeterProvider(
        resource=resource,
        metric_readers=[
            PeriodicExportingMetricReader(
                OTLPMetricExporter(**exporter_kwargs), export_interval_millis=_EXPORT_INTERVAL_MS
            )
        ],
    )
    metrics.set_meter_provider(meter_provider)

    logger_provider = LoggerProvider(resource=resource)
    logger_provider.add_log_record_processor(BatchLogRecordProcessor(OTLPLogExporter(**exporter_kwargs)))
    set_logger_provider(logger_provider)
    # Trace ids in log records; the stdout format from setup_logging stays as is.
    LoggingInstrumentor().instrument(set_logging_format=False)

    FastAPIInstrumentor.instrument_app(
        app,
        tracer_provider=tracer_provider,
        meter_provider=meter_provider,
        excluded_urls="health",
    )
    if engine is not None:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine, tracer_provider=tracer_provider)

    _configured = True
    logger.info(
        "Telemetry exporting to %s as %s",
        settings.telemetry_otlp_endpoint or "the default OTLP endpoint",
        settings.telemetry_service_name,
    )


__all__ = ["record_report", "setup_telemetry"]
