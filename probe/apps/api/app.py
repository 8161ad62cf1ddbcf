"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import config
from logger import logger
from probe.apps.api.routes.health import register_health_routes
from probe.core.probe import Probe


def create_app(probe: Probe | None = None) -> FastAPI:
    """Create a service whose readiness follows its own lifespan."""

    service_probe = probe if probe is not None else Probe(logger=logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("%s starting up", config.SERVICE_NAME)
        service_probe.ready()
        try:
            yield
        finally:
            # Stop taking new traffic while in-flight requests drain
            service_probe.not_ready()
            logger.info("%s shutting down", config.SERVICE_NAME)

    app = FastAPI(
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        title=config.SERVICE_NAME,
        lifespan=lifespan,
    )
    app.state.probe = service_probe
    app.state.logger = logger

    register_health_routes(
        app,
        service_probe,
        livez_path=config.LIVEZ_PATH,
        readyz_path=config.READYZ_PATH,
    )

    return app
