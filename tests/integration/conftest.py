"""Shared fixtures for kapigraph integration tests.

Builds small on-disk Kapitan inventories under ``tmp_path`` so the full
load -> resolve -> render pipeline runs against real files.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from kapigraph.models.config import InventoryConfig, KapigraphConfig, RenderConfig

InventoryFactory = Callable[[dict[str, str], dict[str, str]], Path]


def write_inventory(root: Path, classes: dict[str, str], targets: dict[str, str]) -> Path:
    """Write ``relative path -> YAML text`` documents into an inventory."""
    for section, documents in (("classes", classes), ("targets", targets)):
        base = root / section
        base.mkdir(parents=True, exist_ok=True)
        for relative, content in documents.items():
            path = base / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_inventory(tmp_path: Path) -> InventoryFactory:
    """Return a factory writing an inventory under ``tmp_path/inventory``."""

    def _make(classes: dict[str, str], targets: dict[str, str]) -> Path:
        return write_inventory(tmp_path / "inventory", classes, targets)

    return _make


@pytest.fixture
def simple_inventory(make_inventory: InventoryFactory) -> Path:
    """``cluster1 -> app -> base``."""
    return make_inventory(
        {
            "app.yml": "classes:\n  - base\n",
            "base.yml": "parameters:\n  name: base\n",
        },
        {
            "cluster1.yml": "classes:\n  - app\n",
        },
    )


@pytest.fixture
def layered_inventory(make_inventory: InventoryFactory) -> Path:
    """Two targets sharing a diamond of classes plus an unused class."""
    return make_inventory(
        {
            "common.yml": "classes: []\n",
            "component/web.yml": "classes: [common]\n",
            "component/db.yml": "classes: [common]\n",
            "profile/full.yml": "classes: [component.web, component.db]\n",
            "unused.yml": "classes: [common]\n",
        },
        {
            "prod/cluster-prod.yml": "classes: [profile.full]\n",
            "dev/cluster-dev.yaml": "classes: [component.web, external.thing]\n",
        },
    )


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., KapigraphConfig]:
    def _make(inventory: Path, target: str | None = None, font_name: str | None = None) -> KapigraphConfig:
        return KapigraphConfig(
            inventory=InventoryConfig(path=str(inventory), target=target),
            render=RenderConfig(output=str(tmp_path / "kapitan.dot"), font_name=font_name),
        )

    return _make
