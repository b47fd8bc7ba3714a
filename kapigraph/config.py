"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kapigraph.models.config import (
    InventoryConfig,
    KapigraphConfig,
    LogConfig,
    RenderConfig,
)

LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMATS = ("console", "json")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KAPIGRAPH_{key}", default)


def _env_optional(key: str) -> str | None:
    return _env(key) or None


def validate_log_level(value: str) -> str:
    if value.lower() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}. Must be one of {set(LOG_LEVELS)}")
    return value.lower()


def validate_log_format(value: str) -> str:
    if value.lower() not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {value}. Must be one of {set(LOG_FORMATS)}")
    return value.lower()


def load_config(log_level: str | None = None, log_format: str | None = None) -> KapigraphConfig:
    """Load configuration from KAPIGRAPH_* environment variables.

    Explicit *log_level* / *log_format* take precedence over the environment;
    only the value actually used is validated.
    """
    return KapigraphConfig(
        inventory=InventoryConfig(
            path=_env("INVENTORY", "inventory"),
            target=_env_optional("TARGET"),
        ),
        render=RenderConfig(
            output=_env("OUTPUT", "kapitan.dot"),
            font_name=_env_optional("FONT"),
        ),
        log=LogConfig(
            level=validate_log_level(log_level or _env("LOG_LEVEL", "info")),
            format=validate_log_format(log_format or _env("LOG_FORMAT", "console")),
        ),
    )
