"""Universe selection and merging."""

from __future__ import annotations

from kapigraph.errors import TargetNotFoundError
from kapigraph.models.inventory import Universe


def select_targets(targets: Universe, target: str | None = None) -> Universe:
    """Narrow *targets* to a single entry when *target* is given.

    Raises:
        TargetNotFoundError: if *target* is not a key of *targets*.
    """
    if not target:
        return dict(targets)
    if target not in targets:
        raise TargetNotFoundError(target)
    return {target: targets[target]}


def merge_universes(classes: Universe, targets: Universe) -> Universe:
    """Combine both universes into one lookup; targets win on collision."""
    merged: Universe = dict(classes)
    merged.update(targets)
    return merged
