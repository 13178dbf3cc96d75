"""ASGI entrypoint for the intake calendar API."""

from intake_calendar.api.app import create_app
from intake_calendar.containers import build_container

app = create_app(build_container())
