"""End-to-end tests for kapigraph.app.run().

Exercises inventory loading, target selection, resolution and DOT output
against real files, including every failure path that must leave no output.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from structlog.testing import capture_logs

from kapigraph.app import run
from kapigraph.errors import DocumentDecodeError, InventoryReadError, OutputWriteError, TargetNotFoundError


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


class TestRunSimpleInventory:
    def test_all_targets(self, simple_inventory: Path, make_config, parse_edges) -> None:
        result = run(make_config(simple_inventory))

        dot = _read(result.output_path)
        assert parse_edges(dot) == {("cluster1", "app"), ("app", "base")}
        assert dot.startswith("digraph kapitan {\n")
        assert result.node_count == 3
        assert result.edge_count == 2
        assert result.targets == ("cluster1",)

    def test_target_filter_same_result(self, simple_inventory: Path, make_config) -> None:
        unfiltered = _read(run(make_config(simple_inventory)).output_path)
        filtered = _read(run(make_config(simple_inventory, target="cluster1")).output_path)
        assert filtered == unfiltered

    def test_font_override(self, simple_inventory: Path, make_config) -> None:
        dot = _read(run(make_config(simple_inventory, font_name="DejaVu Sans")).output_path)
        node_line = next(line for line in dot.splitlines() if line.strip().startswith("node ["))
        assert 'fontname="DejaVu Sans"' in node_line
        assert "shape=rect" in node_line


class TestRunLayeredInventory:
    def test_diamond_and_unused_classes(self, layered_inventory: Path, make_config, parse_edges) -> None:
        result = run(make_config(layered_inventory))
        dot = _read(result.output_path)

        assert parse_edges(dot) == {
            ("cluster-prod", "profile.full"),
            ("profile.full", "component.web"),
            ("profile.full", "component.db"),
            ("component.web", "common"),
            ("component.db", "common"),
            ("cluster-dev", "component.web"),
            ("cluster-dev", "external.thing"),
        }
        assert "unused" not in dot
        # cluster-prod, cluster-dev, profile.full, component.web, component.db, common
        assert result.node_count == 6
        assert result.stats.resolved == 6
        assert result.stats.unresolved_references == 1

    def test_filter_narrows_to_reachable_subgraph(self, layered_inventory: Path, make_config, parse_edges) -> None:
        result = run(make_config(layered_inventory, target="cluster-dev"))
        assert parse_edges(_read(result.output_path)) == {
            ("cluster-dev", "component.web"),
            ("cluster-dev", "external.thing"),
            ("component.web", "common"),
        }
        assert result.targets == ("cluster-dev",)


class TestRunCycles:
    def test_fresh_cycle_terminates(self, make_inventory, make_config, parse_edges) -> None:
        inventory = make_inventory(
            {"a.yml": "classes: [b]\n", "b.yml": "classes: [a]\n"},
            {"t.yml": "classes: [a]\n"},
        )
        result = run(make_config(inventory))
        assert parse_edges(_read(result.output_path)) == {("t", "a"), ("a", "b"), ("b", "a")}
        assert result.stats.cycle_edges == 1


class TestRunFailures:
    def test_missing_target(self, simple_inventory: Path, make_config) -> None:
        config = make_config(simple_inventory, target="missing")
        with pytest.raises(TargetNotFoundError):
            run(config)
        assert not Path(config.render.output).exists()

    def test_decode_error_writes_nothing(self, make_inventory, make_config) -> None:
        inventory = make_inventory(
            {"good.yml": "classes: []\n", "broken.yml": "classes: [oops\n"},
            {"t.yml": "classes: [good]\n"},
        )
        config = make_config(inventory)
        with pytest.raises(DocumentDecodeError) as exc_info:
            run(config)
        assert exc_info.value.path.endswith("broken.yml")
        assert not Path(config.render.output).exists()

    def test_missing_inventory(self, tmp_path: Path, make_config) -> None:
        with pytest.raises(InventoryReadError):
            run(make_config(tmp_path / "does-not-exist"))

    def test_unwritable_output(self, simple_inventory: Path, make_config, tmp_path: Path) -> None:
        config = make_config(simple_inventory)
        config.render.output = str(tmp_path / "missing-dir" / "kapitan.dot")
        with pytest.raises(OutputWriteError):
            run(config)


class TestRunLogging:
    def test_stage_events_in_order(self, simple_inventory: Path, make_config) -> None:
        with capture_logs() as logs:
            run(make_config(simple_inventory))
        events = [entry["event"] for entry in logs]
        stages = ["target_filter_skipped", "relationships_resolved", "dot_rendering", "output_writing"]
        assert [event for event in events if event in stages] == stages
        assert all(" " not in event for event in events)

    def test_target_filter_event(self, simple_inventory: Path, make_config) -> None:
        with capture_logs() as logs:
            run(make_config(simple_inventory, target="cluster1"))
        applied = [entry for entry in logs if entry["event"] == "target_filter_applied"]
        assert applied and applied[0]["target"] == "cluster1"
