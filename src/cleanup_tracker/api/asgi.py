"""ASGI entrypoint for the clean-up tracker API."""

from cleanup_tracker.api.app import create_app
from cleanup_tracker.containers import build_container

app = create_app(build_container())
