"""Adapter opening Starlette's ``add_route`` up to every HTTP method."""

from __future__ import annotations

from typing import Any

from probe.core.router import ALL_METHODS, Handler, Router


class StarletteRouterAdapter(Router):
    """Forward ``add_route`` calls with ``methods`` set to ``ALL_METHODS``.

    Without an explicit ``methods`` list Starlette limits function endpoints
    to GET and HEAD.
    """

    def __init__(self, router: Any) -> None:
        self._router = router

    def add_route(self, path: str, endpoint: Handler) -> None:
        self._router.add_route(path, endpoint, methods=ALL_METHODS)


def starlette_router(router: Any) -> Router:
    """Wrap a Starlette ``Router``, ``Starlette`` app or ``FastAPI`` app."""

    return StarletteRouterAdapter(router)
