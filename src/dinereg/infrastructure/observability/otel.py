from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.sdk.resources import DEPLOYMENT_ENVIRONMENT, SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

logger = logging.getLogger(__name__)

_instrumented = False

# health probes and scrapes would drown the registry traces
_EXCLUDED_URLS = "health/live,health/ready,metrics"


def build_tracer_provider(service_name: str, endpoint: str | None) -> TracerProvider:
    resource = Resource.create(
        {
            SERVICE_NAME: service_name,
            DEPLOYMENT_ENVIRONMENT: os.getenv("APP_ENV", "dev").lower(),
        }
    )
    provider = TracerProvider(resource=resource)
    if not endpoint:
        return provider

    try:
        exporter = OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
    except Exception:
        logger.exception("otel_exporter_setup_failed", extra={"endpoint": endpoint})
        return provider

    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider


def configure_otel(app: FastAPI) -> None:
    global _instrumented
    if _instrumented:
        return

    provider = build_tracer_provider(
        service_name=os.getenv("OTEL_SERVICE_NAME", "dinereg-backend"),
        endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT") or None,
    )
    trace.set_tracer_provider(provider)
    set_global_textmap(TraceContextTextMapPropagator())
    FastAPIInstrumentor.instrument_app(
        app,
        tracer_provider=provider,
        excluded_urls=_EXCLUDED_URLS,
    )
    _instrumented = True
