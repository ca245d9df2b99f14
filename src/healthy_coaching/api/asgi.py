"""ASGI entrypoint for the HealthyCoaching API."""

from healthy_coaching.api.app import create_app
from healthy_coaching.containers import build_container

app = create_app(build_container())
