"""Inventory and resolution data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# name -> declared parents, as authored
Universe = dict[str, list[str]]

# name -> direct parents, deduplicated
RelationshipMap = dict[str, frozenset[str]]


class NodeState(StrEnum):
    """Resolution state of a single entity within one pass."""

    UNSEEN = "unseen"
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass
class ResolutionStats:
    """Counters describing one resolution pass."""

    roots: int = 0
    resolved: int = 0
    cycle_edges: int = 0
    unresolved_references: int = 0
    max_depth: int = 0  # deepest explicit stack reached


@dataclass(frozen=True)
class RunResult:
    """Outcome of a full load -> resolve -> render run."""

    output_path: str
    targets: tuple[str, ...]
    node_count: int
    edge_count: int
    stats: ResolutionStats
