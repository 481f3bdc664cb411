from __future__ import annotations

from fastapi import Request

from src.config.settings import Settings, get_settings
from src.domain.value_objects.reproduction import ReproductiveParameters


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()


def get_reproductive_parameters(request: Request) -> ReproductiveParameters:
    return get_app_settings(request).reproductive_parameters()
