"""Adapter exposing FastAPI's ``add_api_route`` as a probe router."""

from __future__ import annotations

from typing import Any

from probe.core.router import ALL_METHODS, Handler, Router


class ApiRouterAdapter(Router):
    """Forward ``add_route`` calls to ``add_api_route`` on the wrapped router."""

    def __init__(self, router: Any) -> None:
        self._router = router

    def add_route(self, path: str, endpoint: Handler) -> None:
        self._router.add_api_route(
            path,
            endpoint,
            methods=ALL_METHODS,
            include_in_schema=False,
        )


def api_router(router: Any) -> Router:
    """Wrap an ``APIRouter`` (or ``FastAPI`` app) so probes can register on it."""

    return ApiRouterAdapter(router)
