"""Class relationship graph.

Resolves the transitive include structure of an inventory and renders it as a
Graphviz ``digraph``.
"""

from kapigraph.graph.dot import DotAttributes, render_dot, write_dot
from kapigraph.graph.resolver import RelationshipResolver, resolve_relationships

__all__ = [
    "DotAttributes",
    "RelationshipResolver",
    "render_dot",
    "resolve_relationships",
    "write_dot",
]
