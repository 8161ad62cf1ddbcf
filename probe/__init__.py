"""Liveness and readiness checks mountable on any Starlette-style router."""

from probe.core.probe import DEFAULT_LIVEZ_PATH, DEFAULT_READYZ_PATH, Probe
from probe.core.router import ALL_METHODS, Handler, Router

__all__ = [
    "ALL_METHODS",
    "DEFAULT_LIVEZ_PATH",
    "DEFAULT_READYZ_PATH",
    "Handler",
    "Probe",
    "Router",
]
