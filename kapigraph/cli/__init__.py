"""kapigraph command-line interface.

Exposes:
    cli -- Click command entry point (registered as ``kapigraph`` script).
"""

from kapigraph.cli.main import cli

__all__ = ["cli"]
