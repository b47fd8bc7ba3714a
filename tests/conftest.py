"""Pytest configuration shared by unit and integration tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

import pytest
import structlog

from kapigraph.observability.logging import setup_logging

_ID = r'"(?:[^"\\]|\\.)*"|[^\s";\[\]]+'
_EDGE_RE = re.compile(rf"^\s*(?P<tail>{_ID})\s*->\s*(?P<head>{_ID})")


def _unquote(identifier: str) -> str:
    if identifier.startswith('"') and identifier.endswith('"'):
        return identifier[1:-1].replace('\\"', '"')
    return identifier


def edges_of(source: str) -> set[tuple[str, str]]:
    """Return the ``(tail, head)`` edges of a DOT document as plain names."""
    edges: set[tuple[str, str]] = set()
    for line in source.splitlines():
        match = _EDGE_RE.match(line)
        if match:
            edges.add((_unquote(match["tail"]), _unquote(match["head"])))
    return edges


@pytest.fixture
def parse_edges() -> Callable[[str], set[tuple[str, str]]]:
    return edges_of


@pytest.fixture(autouse=True)
def _structlog_to_stderr() -> Iterator[None]:
    """Route structlog to the current stderr and reset it after each test."""
    setup_logging("debug")
    yield
    structlog.reset_defaults()
