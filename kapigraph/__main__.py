"""Entry point for `python -m kapigraph`.

Usage:
    python -m kapigraph -t cluster1 -o cluster1.dot
    uv run python -m kapigraph
"""

from __future__ import annotations

from kapigraph.cli import cli

cli(prog_name="kapigraph")
