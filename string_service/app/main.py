"""
Main entrypoint for the String Service.

``create_app`` performs the one‑time assembly of the service:

1. configure logging and create the metrics sink;
2. decorate the base service (logging, then instrumenting, so the
   latency metric includes the time spent logging);
3. build one endpoint per operation, wrap it in the call/return
   logging middleware and check it against the model its route
   decodes;
4. mount the routes.

The decorated service and the endpoints are shared by every request
for the lifetime of the application.  The instance created at import
time can be served with::

    uvicorn string_service.app.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI
from prometheus_client import CollectorRegistry

from .api.endpoints.strings import ROUTE_REQUEST_TYPES
from .api.router import router
from .core.config import Settings, settings
from .core.endpoint import chain, check_endpoint, logging_middleware
from .core.logging_config import flush_logging, setup_logging, with_fields
from .core.metrics import MetricsSink
from .services.endpoints import make_count_endpoint, make_uppercase_endpoint
from .services.instrumenting_service import InstrumentingStringService
from .services.logging_service import LoggingStringService
from .services.string_service import BasicStringService, StringService


def build_service(logger, metrics: MetricsSink) -> StringService:
    """Return the base service wrapped in the logging and instrumenting decorators."""
    svc: StringService = BasicStringService()
    svc = LoggingStringService(logger, svc)
    svc = InstrumentingStringService(metrics, svc)
    return svc


def build_endpoints(svc: StringService, logger) -> dict:
    """Return the fully decorated endpoints keyed by route name."""
    endpoints = {
        "uppercase": chain(logging_middleware(with_fields(logger, method="uppercase")))(
            make_uppercase_endpoint(svc)
        ),
        "count": chain(logging_middleware(with_fields(logger, method="count")))(
            make_count_endpoint(svc)
        ),
    }
    for name, request_type in ROUTE_REQUEST_TYPES.items():
        check_endpoint(endpoints[name], request_type)
    return endpoints


def create_app(
    app_settings: Optional[Settings] = None,
    registry: Optional[CollectorRegistry] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    registry : Optional[CollectorRegistry]
        Registry receiving the service metrics.  A private registry is
        created when omitted, so several applications can coexist in
        one process.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    logger = logging.getLogger("string_service")
    metrics = MetricsSink.from_settings(app_settings, registry)

    svc = build_service(logger.getChild("service"), metrics)
    endpoints = build_endpoints(svc, logger.getChild("endpoint"))

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.metrics = metrics
    app.state.endpoints = endpoints
    app.include_router(router)

    @app.on_event("shutdown")
    def shutdown_event() -> None:
        flush_logging()

    return app


app = create_app()
