"""ASGI entry point: `uvicorn mvcmovie.application.api.rest.main:app`."""

from mvcmovie.application.api.rest.app import create_app

app = create_app()
