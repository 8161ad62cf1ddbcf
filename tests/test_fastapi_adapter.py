from __future__ import annotations

from typing import Any

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from probe import Probe
from probe.adapters import ApiRouterAdapter, api_router
from probe.core.router import ALL_METHODS


def make_request(method: str = "GET", path: str = "/") -> Request:
    return Request({"type": "http", "method": method, "path": path, "headers": []})


class StubApiRouter:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any, dict[str, Any]]] = []

    def add_api_route(self, path: str, endpoint: Any, **kwargs: Any) -> None:
        self.calls.append((path, endpoint, kwargs))


def test_api_router_forwards_to_add_api_route() -> None:
    stub = StubApiRouter()
    probe = Probe()

    adapted = api_router(stub)
    adapted.add_route("/custom", probe.livez_handler)

    assert isinstance(adapted, ApiRouterAdapter)  # noqa: S101
    assert stub.calls == [  # noqa: S101
        (
            "/custom",
            probe.livez_handler,
            {"methods": ALL_METHODS, "include_in_schema": False},
        )
    ]


def test_api_router_propagates_errors() -> None:
    class BrokenApiRouter:
        def add_api_route(self, path: str, endpoint: Any, **_: Any) -> None:
            raise RuntimeError("duplicate route")

    with pytest.raises(RuntimeError, match="duplicate route"):
        Probe().register_defaults(api_router(BrokenApiRouter()))


def test_register_defaults_through_adapter() -> None:
    router = APIRouter()
    probe = Probe()
    probe.register_defaults(api_router(router))

    app = FastAPI()
    app.include_router(router)
    client = TestClient(app)

    assert client.get("/livez").status_code == 200  # noqa: S101
    assert client.get("/readyz").status_code == 503  # noqa: S101


def test_adapter_is_transparent() -> None:
    router = APIRouter()
    probe = Probe()
    probe.register_defaults(api_router(router))
    app = FastAPI()
    app.include_router(router)
    client = TestClient(app)

    for state in (probe.ready, probe.not_ready, probe.ready):
        state()
        direct = probe.readyz_handler(make_request())
        routed = client.get("/readyz")
        assert routed.status_code == direct.status_code  # noqa: S101
        assert routed.content == direct.body  # noqa: S101

    assert client.post("/livez").status_code == 200  # noqa: S101
    assert client.get("/livez").content == b""  # noqa: S101


def test_adapter_works_on_fastapi_app() -> None:
    app = FastAPI()
    probe = Probe()
    probe.ready()
    probe.register_defaults(api_router(app))
    client = TestClient(app)

    assert client.put("/readyz").status_code == 200  # noqa: S101
    assert client.request("TRACE", "/livez").status_code == 200  # noqa: S101
