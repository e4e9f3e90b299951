"""Route dependencies: per-app singletons stored on app.state by the lifespan."""

from fastapi import Request

from catalog.config import Settings, get_settings
from catalog.core.repository_protocols import EventLogger
from catalog.services.interaction_controller import InteractionController


def get_controller(request: Request) -> InteractionController:
    return request.app.state.controller


def get_events(request: Request) -> EventLogger:
    return request.app.state.events


def get_app_settings() -> Settings:
    return get_settings()
