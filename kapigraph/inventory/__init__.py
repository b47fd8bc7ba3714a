"""Inventory package for kapigraph.

Submodules:
    loader    -- YAML document discovery and ``classes`` header decoding.
    universe  -- Target selection and class/target universe merging.
"""

from kapigraph.inventory.loader import InventoryLoader, decode_classes, entity_name, load_universe
from kapigraph.inventory.universe import merge_universes, select_targets

__all__ = [
    "InventoryLoader",
    "decode_classes",
    "entity_name",
    "load_universe",
    "merge_universes",
    "select_targets",
]
