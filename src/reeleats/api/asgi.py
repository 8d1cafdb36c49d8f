"""ASGI entrypoint for the ReelEats catalog API."""

from reeleats.api.app import create_app
from reeleats.containers import build_container

app = create_app(build_container())
