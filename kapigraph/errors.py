"""Exception hierarchy for kapigraph.

Every failure is fatal to a run.  The CLI catches ``KapigraphError``,
reports the message on stderr and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class KapigraphError(Exception):
    """Base class for all expected kapigraph failures."""


class InventoryReadError(KapigraphError):
    """Raised when an inventory directory or document cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"cannot read inventory path '{path}': {reason}")
        self.path = str(path)
        self.reason = reason


class DocumentDecodeError(KapigraphError):
    """Raised when a document is not valid YAML or has an unexpected shape."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"YAML parse error in {path}: {reason}")
        self.path = str(path)
        self.reason = reason


class TargetNotFoundError(KapigraphError):
    """Raised when the requested target is not in the target universe."""

    def __init__(self, target: str) -> None:
        super().__init__(f"target not found: {target}")
        self.target = target


class OutputWriteError(KapigraphError):
    """Raised when the rendered graph cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"cannot write output '{path}': {reason}")
        self.path = str(path)
        self.reason = reason
