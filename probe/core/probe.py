"""Liveness and readiness state for a single service.

The default paths follow the Kubernetes convention since it is widely
understood outside that ecosystem too, but strict adherence to k8s practices
is not guaranteed.

The ready flag is a plain attribute and is not protected against concurrent
writes. Handlers only read it, so serving many probe requests at once is fine;
state transitions belong to a single owner, normally the startup and shutdown
sequence of the service. Services that need their own checks must each get
their own ``Probe``.
"""

from __future__ import annotations

from typing import Any

from starlette.requests import Request
from starlette.responses import Response
from starlette.status import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE

from probe.core.router import Router

DEFAULT_LIVEZ_PATH = "/livez"
DEFAULT_READYZ_PATH = "/readyz"


class Probe:
    """Track whether a service is ready and answer liveness/readiness checks.

    A new probe starts out not ready, so the readiness check returns 503 until
    ``ready`` is called.
    """

    def __init__(self, *, logger: Any | None = None) -> None:
        self._ready = False
        self._logger = logger

    @property
    def is_ready(self) -> bool:
        return self._ready

    def livez_handler(self, request: Request) -> Response:
        """Report that the service is up.

        Always 200: a dead service is signalled by its inability to answer at
        all, not by this handler.
        """

        return Response(status_code=HTTP_200_OK)

    def readyz_handler(self, request: Request) -> Response:
        """Report whether the service should receive traffic (200) or not (503)."""

        if self._ready:
            return Response(status_code=HTTP_200_OK)
        return Response(status_code=HTTP_503_SERVICE_UNAVAILABLE)

    def ready(self) -> None:
        """Mark the service ready; the readiness check starts returning 200."""

        self._transition(True)

    def not_ready(self) -> None:
        """Mark the service not ready; the readiness check starts returning 503.

        This is the state of a new probe. Calling it on shutdown keeps traffic
        away while in-flight requests finish.
        """

        self._transition(False)

    def register_defaults(self, router: Router) -> None:
        """Mount the handlers at ``DEFAULT_LIVEZ_PATH`` and ``DEFAULT_READYZ_PATH``.

        To mount them elsewhere, skip this and pass ``livez_handler`` and
        ``readyz_handler`` to the router directly.
        """

        router.add_route(DEFAULT_LIVEZ_PATH, self.livez_handler)
        router.add_route(DEFAULT_READYZ_PATH, self.readyz_handler)

    def _transition(self, ready: bool) -> None:
        if self._ready == ready:
            return

        self._ready = ready
        if self._logger is not None:
            self._logger.info("probe marked %s", "ready" if ready else "not ready")
