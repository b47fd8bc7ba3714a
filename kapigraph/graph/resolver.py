"""Class relationship resolver.

Turns a flat ``name -> [declared parents]`` universe into a relationship
mapping ``name -> {direct parents}`` for every entity reachable from the
requested roots.  Each entity is resolved exactly once per pass.

The walk is an explicit depth-first stack rather than Python recursion, with a
three-state marker per entity:

    unseen       -- never visited in this pass
    in_progress  -- on the stack; an edge into it closes a cycle
    done         -- parent set written to the mapping, never recomputed

An edge into an ``in_progress`` entity is kept in the referencer's parent set
but is not followed, so cyclic inventories terminate.  Stack depth is bounded
by the number of distinct entities in the universe plus one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from kapigraph.models.inventory import NodeState, RelationshipMap, ResolutionStats
from kapigraph.observability.logging import get_logger

_logger = get_logger("graph.resolver")


def _distinct(names: Sequence[str]) -> list[str]:
    """Return *names* with duplicates removed, first occurrence wins."""
    return list(dict.fromkeys(names))


class RelationshipResolver:
    """Resolution context for one pass over a universe.

    Owns the relationship mapping exclusively.  ``resolve`` and
    ``resolve_all`` mutate it in place and return it; callers must treat the
    returned mapping as read-only.
    """

    def __init__(self, universe: Mapping[str, Sequence[str]]) -> None:
        self._universe = universe
        self._relationships: RelationshipMap = {}
        self._state: dict[str, NodeState] = {}
        self._cycles: list[tuple[str, str]] = []
        self._unresolved: set[str] = set()
        self.stats = ResolutionStats()

    @property
    def relationships(self) -> RelationshipMap:
        return self._relationships

    @property
    def cycles(self) -> list[tuple[str, str]]:
        """``(entity, parent)`` edges that closed a cycle and were not followed."""
        return list(self._cycles)

    @property
    def unresolved(self) -> set[str]:
        """Declared parent names that are absent from the universe."""
        return set(self._unresolved)

    def state_of(self, name: str) -> NodeState:
        return self._state.get(name, NodeState.UNSEEN)

    def _parents_of(self, name: str) -> list[str]:
        # A missing key is a terminal entity, not an error.
        return _distinct(self._universe.get(name) or [])

    def resolve(self, root: str) -> RelationshipMap:
        """Resolve *root* and everything reachable from it.

        Idempotent: a root already resolved in this pass returns immediately
        without touching the mapping.
        """
        self.stats.roots += 1
        if self.state_of(root) is NodeState.DONE:
            _logger.debug("root_already_resolved", root=root)
            return self._relationships

        self._state[root] = NodeState.IN_PROGRESS
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(self._parents_of(root)))]
        self.stats.max_depth = max(self.stats.max_depth, 1)

        while stack:
            name, pending = stack[-1]
            descended = False
            for parent in pending:
                state = self.state_of(parent)
                if state is NodeState.DONE:
                    continue
                if state is NodeState.IN_PROGRESS:
                    self._cycles.append((name, parent))
                    self.stats.cycle_edges += 1
                    _logger.debug("cycle_edge_skipped", entity=name, parent=parent)
                    continue
                if parent not in self._universe:
                    if parent not in self._unresolved:
                        self._unresolved.add(parent)
                        self.stats.unresolved_references += 1
                        _logger.debug("unresolved_reference", entity=name, parent=parent)
                    continue
                self._state[parent] = NodeState.IN_PROGRESS
                stack.append((parent, iter(self._parents_of(parent))))
                self.stats.max_depth = max(self.stats.max_depth, len(stack))
                descended = True
                break

            if descended:
                continue

            # Post-order: all parents handled, the entry is final.
            stack.pop()
            self._relationships[name] = frozenset(self._parents_of(name))
            self._state[name] = NodeState.DONE
            self.stats.resolved += 1

        return self._relationships

    def resolve_all(self, roots: Iterable[str]) -> RelationshipMap:
        """Resolve every root in order into the shared mapping."""
        for root in roots:
            self.resolve(root)
        return self._relationships


def resolve_relationships(
    universe: Mapping[str, Sequence[str]],
    roots: Iterable[str],
) -> tuple[RelationshipMap, RelationshipResolver]:
    """Resolve *roots* against *universe* in a fresh context.

    Returns the relationship mapping and the resolver that built it, so callers
    can inspect ``cycles`` and ``stats``.
    """
    resolver = RelationshipResolver(universe)
    relationships = resolver.resolve_all(roots)
    stats = resolver.stats
    _logger.info(
        "relationships_resolved",
        roots=stats.roots,
        entities=stats.resolved,
        cycle_edges=stats.cycle_edges,
        unresolved_references=stats.unresolved_references,
        max_depth=stats.max_depth,
    )
    if resolver.cycles:
        _logger.warning(
            "class_cycles_detected",
            edges=[f"{entity} -> {parent}" for entity, parent in resolver.cycles],
        )
    return relationships, resolver
