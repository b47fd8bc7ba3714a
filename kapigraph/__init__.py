"""kapigraph -- graph Kapitan class hierarchies for Graphviz."""

__version__ = "0.1.0"
