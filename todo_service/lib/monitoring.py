# todo_service/lib/monitoring.py
from fastapi import FastAPI
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator

from todo_service.core.logging import log


def register_monitoring(app: FastAPI) -> CollectorRegistry:
    """
    Registers Prometheus monitoring on the FastAPI app and exposes /metrics.

    Each app gets its own registry so several apps can live in one process.
    """
    registry = CollectorRegistry()

    Instrumentator(
        excluded_handlers=["/metrics"],
        registry=registry,
    ).instrument(app).expose(app, include_in_schema=False, should_gzip=True)

    log("HTTP", "Prometheus instrumentation registered at /metrics.")
    return registry
