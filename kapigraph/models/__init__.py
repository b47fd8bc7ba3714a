"""Core data structures for kapigraph."""

from kapigraph.models.config import (
    InventoryConfig,
    KapigraphConfig,
    LogConfig,
    RenderConfig,
)
from kapigraph.models.inventory import (
    NodeState,
    RelationshipMap,
    ResolutionStats,
    RunResult,
    Universe,
)

__all__ = [
    "InventoryConfig",
    "KapigraphConfig",
    "LogConfig",
    "NodeState",
    "RelationshipMap",
    "RenderConfig",
    "ResolutionStats",
    "RunResult",
    "Universe",
]
