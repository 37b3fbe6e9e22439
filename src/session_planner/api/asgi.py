"""ASGI entrypoint for the session planner API."""

from session_planner.api.app import create_app
from session_planner.containers import build_container

app = create_app(build_container())
