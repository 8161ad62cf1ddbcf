"""Protocol definition for routers that probe handlers can be mounted on."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from starlette.requests import Request
from starlette.responses import Response

Handler = Callable[[Request], Response]

# Checks answer whatever method the caller uses
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


class Router(Protocol):
    """Anything that can bind a path to a request handler.

    Starlette's ``Router``, ``Starlette`` applications and ``FastAPI``
    applications satisfy this structurally through ``add_route``, but a
    function endpoint registered that way only answers GET and HEAD. Wrap them
    with ``probe.adapters.starlette_router`` to accept every method, and use
    ``probe.adapters.api_router`` for routers that bind through
    ``add_api_route``.
    """

    def add_route(self, path: str, endpoint: Handler) -> None:
        """Register ``endpoint`` to answer requests for ``path``."""
