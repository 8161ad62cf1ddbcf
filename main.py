"""Main entrypoint exposing the FastAPI application factory."""

from __future__ import annotations

from config import config
from probe.apps.api.app import create_app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=config.HOST, port=config.PORT, reload=True)
