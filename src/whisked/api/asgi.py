"""ASGI entrypoint for the Whisked API."""

from whisked.api.app import create_app
from whisked.containers import build_container

app = create_app(build_container())
