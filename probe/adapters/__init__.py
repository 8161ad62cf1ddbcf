"""Adapters mounting probe handlers on Starlette and FastAPI routers."""

from probe.adapters.fastapi_router import ApiRouterAdapter, api_router
from probe.adapters.starlette_router import StarletteRouterAdapter, starlette_router

__all__ = ["ApiRouterAdapter", "StarletteRouterAdapter", "api_router", "starlette_router"]
