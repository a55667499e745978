"""OpenTelemetry tracing for the HTTP layer and the store's engine."""

import logging

from fastapi import FastAPI
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from profrate.config import Settings
from profrate.database import Store

logger = logging.getLogger(__name__)


def build_tracer_provider(settings: Settings) -> TracerProvider:
    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))
    exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint, insecure=True)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider


def setup_tracing(app: FastAPI, store: Store, settings: Settings) -> bool:
    """Trace requests to ``app`` and queries on ``store``'s engine.

    Spans go to this app's own provider; the process-wide tracer provider is
    left alone. Returns False when tracing could not be configured, which
    does not stop the app from serving.
    """
    try:
        provider = build_tracer_provider(settings)
        SQLAlchemyInstrumentor().instrument(engine=store.engine, tracer_provider=provider)
        FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)
    except Exception as exc:
        logger.warning("Tracing setup failed (non-fatal): %s", exc)
        return False

    logger.info("Tracing %s → %s", settings.service_name, settings.otlp_endpoint)
    return True
