"""``kapigraph`` command.

Generates a .dot file for a Kapitan inventory, for use with Graphviz::

    kapigraph -i inventory -o kapitan.dot
    kapigraph -t cluster1 -f "DejaVu Sans" && dot -Tsvg kapitan.dot > kapitan.svg

Option values override the matching ``KAPIGRAPH_*`` environment variables.
"""

from __future__ import annotations

import click

from kapigraph import __version__
from kapigraph.app import run
from kapigraph.config import LOG_FORMATS, LOG_LEVELS, load_config
from kapigraph.errors import KapigraphError
from kapigraph.models.config import KapigraphConfig
from kapigraph.observability.logging import get_logger, setup_logging


def _apply_overrides(
    config: KapigraphConfig,
    target: str | None,
    inventory: str | None,
    output: str | None,
    font: str | None,
) -> KapigraphConfig:
    if target is not None:
        config.inventory.target = target or None
    if inventory is not None:
        config.inventory.path = inventory
    if output is not None:
        config.render.output = output
    if font is not None:
        config.render.font_name = font or None
    return config


@click.command(
    name="kapigraph",
    help="Generates a .dot file for a Kapitan inventory, for use with Graphviz.",
)
@click.option("-t", "--target", default=None, help="Render for a specific target (defaults to all targets).")
@click.option("-i", "--inventory", default=None, help="Path to inventory root (default: inventory).")
@click.option("-o", "--output", default=None, help="Path to output file (default: kapitan.dot).")
@click.option("-f", "--font", default=None, help="Set graphviz font.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None)
@click.option("--log-format", type=click.Choice(LOG_FORMATS, case_sensitive=False), default=None)
@click.version_option(__version__, prog_name="kapigraph")
def cli(
    target: str | None,
    inventory: str | None,
    output: str | None,
    font: str | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Graph Kapitan class hierarchies."""
    try:
        config = load_config(log_level=log_level, log_format=log_format)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    config = _apply_overrides(
        config,
        target=target,
        inventory=inventory,
        output=output,
        font=font,
    )
    setup_logging(config.log.level, config.log.format)
    log = get_logger("cli")

    try:
        result = run(config)
    except KapigraphError as exc:
        log.error("run_failed", error=str(exc), error_type=type(exc).__name__)
        raise SystemExit(1) from exc

    log.debug(
        "run_complete",
        output=result.output_path,
        nodes=result.node_count,
        edges=result.edge_count,
    )
