"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InventoryConfig:
    """Inventory location and target selection."""

    path: str = "inventory"
    target: str | None = None


@dataclass
class RenderConfig:
    """Graph output configuration."""

    output: str = "kapitan.dot"
    font_name: str | None = None


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "console"


@dataclass
class KapigraphConfig:
    """Top-level kapigraph configuration."""

    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    log: LogConfig = field(default_factory=LogConfig)
