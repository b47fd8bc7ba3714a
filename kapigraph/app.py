"""Run pipeline for kapigraph.

Stage order: load classes -> load targets -> select targets -> merge
universes -> resolve relationships -> render DOT -> write output.

Every stage either completes or raises a ``KapigraphError``; the output file
is only written once all earlier stages have succeeded.
"""

from __future__ import annotations

from kapigraph.graph.dot import DotAttributes, iter_edges, render_dot, write_dot
from kapigraph.graph.resolver import resolve_relationships
from kapigraph.inventory.loader import InventoryLoader
from kapigraph.inventory.universe import merge_universes, select_targets
from kapigraph.models.config import KapigraphConfig
from kapigraph.models.inventory import RunResult
from kapigraph.observability.logging import get_logger


def run(config: KapigraphConfig) -> RunResult:
    """Build the class graph described by *config* and write it out.

    Raises:
        InventoryReadError, DocumentDecodeError: inventory could not be loaded.
        TargetNotFoundError: the requested target does not exist.
        OutputWriteError: the DOT file could not be written.
    """
    log = get_logger("app")
    loader = InventoryLoader(config.inventory.path)
    log.debug("inventory_loading", path=str(loader.root))

    classes = loader.load_classes()
    targets = loader.load_targets()

    target = config.inventory.target
    targets = select_targets(targets, target)
    if target:
        log.info("target_filter_applied", target=target)
    else:
        log.info(
            "target_filter_skipped",
            targets=len(targets),
            hint="if the resulting graph is too large, filter down with '-t TARGET_NAME'",
        )

    universe = merge_universes(classes, targets)
    relationships, resolver = resolve_relationships(universe, targets)

    log.info("dot_rendering", nodes=len(relationships))
    attributes = DotAttributes(font_name=config.render.font_name)
    dot = render_dot(relationships, attributes)

    log.info("output_writing", path=config.render.output)
    write_dot(dot, config.render.output)

    return RunResult(
        output_path=config.render.output,
        targets=tuple(targets),
        node_count=len(relationships),
        edge_count=len(iter_edges(relationships)),
        stats=resolver.stats,
    )
