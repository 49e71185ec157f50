"""ASGI entrypoint for the favorites API."""

from favorites_api.api.app import create_app
from favorites_api.containers import build_container

app = create_app(build_container())
