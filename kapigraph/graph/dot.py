"""Graphviz DOT rendering for resolved class relationships."""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass, field
from pathlib import Path

from graphviz import Digraph

from kapigraph.errors import OutputWriteError
from kapigraph.observability.logging import get_logger

_logger = get_logger("graph.dot")

DEFAULT_GRAPH_NAME = "kapitan"


@dataclass(frozen=True)
class DotAttributes:
    """Fixed rendering attributes written into the graph header."""

    graph: dict[str, str] = field(
        default_factory=lambda: {"fontsize": "9", "splines": "ortho", "overlap": "false"}
    )
    node: dict[str, str] = field(default_factory=lambda: {"shape": "rect"})
    edge: dict[str, str] = field(default_factory=lambda: {"shape": "normal"})
    font_name: str | None = None

    @property
    def node_attributes(self) -> dict[str, str]:
        if self.font_name:
            return {**self.node, "fontname": self.font_name}
        return dict(self.node)


def iter_edges(relationships: Mapping[str, Set[str]]) -> list[tuple[str, str]]:
    """Return every ``(entity, parent)`` edge, sorted."""
    return sorted((node, parent) for node, parents in relationships.items() for parent in parents)


def build_digraph(
    relationships: Mapping[str, Set[str]],
    attributes: DotAttributes | None = None,
    graph_name: str = DEFAULT_GRAPH_NAME,
) -> Digraph:
    """Build a ``Digraph`` with one edge from each entity to each direct parent.

    Entities with no parents add no statement of their own.
    """
    attributes = attributes or DotAttributes()
    dot = Digraph(
        name=graph_name,
        graph_attr=dict(attributes.graph),
        node_attr=attributes.node_attributes,
        edge_attr=dict(attributes.edge),
    )
    for node, parent in iter_edges(relationships):
        dot.edge(node, parent)
    return dot


def render_dot(
    relationships: Mapping[str, Set[str]],
    attributes: DotAttributes | None = None,
    graph_name: str = DEFAULT_GRAPH_NAME,
) -> str:
    """Render *relationships* as ``digraph`` source text."""
    return build_digraph(relationships, attributes, graph_name).source


def write_dot(text: str, path: str | Path) -> Path:
    """Write rendered DOT *text* to *path*.

    Raises:
        OutputWriteError: if the file cannot be written.
    """
    out_path = Path(path)
    try:
        out_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(out_path, exc.strerror or str(exc)) from exc
    _logger.debug("dot_written", path=str(out_path), bytes=len(text.encode("utf-8")))
    return out_path
