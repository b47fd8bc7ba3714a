"""Kapitan inventory loading.

Walks the ``classes`` and ``targets`` directories of an inventory and decodes
the ``classes`` header of every YAML document into a universe mapping
``entity name -> declared parents``.

Naming:
    classes/app/web.yml     -> ``app.web``   (path relative to classes/)
    targets/prod/c1.yaml    -> ``c1``        (base name only)
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from kapigraph.errors import DocumentDecodeError, InventoryReadError
from kapigraph.models.inventory import Universe
from kapigraph.observability.logging import get_logger

_logger = get_logger("inventory.loader")

YAML_EXTENSIONS = (".yml", ".yaml")
CLASSES_DIR = "classes"
TARGETS_DIR = "targets"
_CLASSES_KEY = "classes"


def entity_name(path: Path, root: Path, *, include_path: bool) -> str:
    """Derive an entity name from a document path.

    With *include_path* the path relative to *root* is kept and separators
    become dots; otherwise only the base name is used.  The extension is
    stripped in both cases.
    """
    relative = path.relative_to(root) if include_path else Path(path.name)
    name = ".".join(relative.parts)
    return name.removesuffix(path.suffix)


def decode_classes(raw: str, path: str | Path) -> list[str]:
    """Decode the ``classes`` list out of a YAML stream.

    Only the first document of a multi-document stream is read.  An empty
    list item decodes to ``""``.

    Raises:
        DocumentDecodeError: on malformed YAML or an unexpected shape.
    """
    try:
        document = next(yaml.safe_load_all(raw), None)
    except yaml.YAMLError as exc:
        raise DocumentDecodeError(path, str(exc)) from exc

    if document is None:
        return []
    if not isinstance(document, dict):
        raise DocumentDecodeError(path, f"expected a mapping, got {type(document).__name__}")

    classes = document.get(_CLASSES_KEY)
    if classes is None:
        return []
    if not isinstance(classes, list):
        raise DocumentDecodeError(path, f"'{_CLASSES_KEY}' must be a list, got {type(classes).__name__}")

    names: list[str] = []
    for entry in classes:
        if isinstance(entry, str):
            names.append(entry)
        elif entry is None:
            names.append("")
        elif isinstance(entry, (bool, int, float)):
            names.append(str(entry))
        else:
            raise DocumentDecodeError(
                path, f"'{_CLASSES_KEY}' entries must be scalars, got {type(entry).__name__}"
            )
    return names


def _iter_documents(root: Path) -> list[Path]:
    """Return every YAML document under *root* in sorted walk order."""

    def _on_error(exc: OSError) -> None:
        raise InventoryReadError(exc.filename or root, exc.strerror or str(exc)) from exc

    documents: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if os.path.splitext(filename)[1] in YAML_EXTENSIONS:
                documents.append(Path(dirpath) / filename)
    return documents


def load_universe(root: str | Path, *, include_path: bool) -> Universe:
    """Load every YAML document under *root* into a universe.

    Raises:
        InventoryReadError: if *root* is not a directory or a file cannot be read.
        DocumentDecodeError: if any document fails to decode.
    """
    root = Path(root)
    if not root.is_dir():
        raise InventoryReadError(root, "not a directory")

    universe: Universe = {}
    for path in _iter_documents(root):
        name = entity_name(path, root, include_path=include_path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise InventoryReadError(path, exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise DocumentDecodeError(path, str(exc)) from exc

        classes = decode_classes(raw, path)
        if name in universe:
            _logger.warning("duplicate_entity_name", name=name, path=str(path))
        universe[name] = classes

    _logger.debug("universe_loaded", root=str(root), entities=len(universe))
    return universe


class InventoryLoader:
    """Loads the class and target universes of one inventory root."""

    def __init__(self, inventory_root: str | Path) -> None:
        self.root = Path(inventory_root).resolve()

    @property
    def classes_path(self) -> Path:
        return self.root / CLASSES_DIR

    @property
    def targets_path(self) -> Path:
        return self.root / TARGETS_DIR

    def load_classes(self) -> Universe:
        return load_universe(self.classes_path, include_path=True)

    def load_targets(self) -> Universe:
        return load_universe(self.targets_path, include_path=False)
