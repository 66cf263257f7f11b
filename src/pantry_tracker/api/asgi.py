"""ASGI entrypoint for the pantry tracker API."""

from pantry_tracker.api.app import create_app
from pantry_tracker.containers import build_container

app = create_app(build_container())
