"""Liveness and readiness endpoint wiring for the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from probe.adapters.starlette_router import starlette_router
from probe.core.probe import DEFAULT_LIVEZ_PATH, DEFAULT_READYZ_PATH, Probe


def register_health_routes(
    app: FastAPI,
    probe: Probe,
    *,
    livez_path: str = DEFAULT_LIVEZ_PATH,
    readyz_path: str = DEFAULT_READYZ_PATH,
) -> None:
    """Attach the probe handlers to the provided application for every method."""

    router = starlette_router(app)

    if livez_path == DEFAULT_LIVEZ_PATH and readyz_path == DEFAULT_READYZ_PATH:
        probe.register_defaults(router)
        return

    router.add_route(livez_path, probe.livez_handler)
    router.add_route(readyz_path, probe.readyz_handler)
