"""Tests for snapshot serialization and HTML preview export."""

import json

import pytest

from section_grid.export.html_export import HTMLExporter
from section_grid.export.serializers import (
    serialize_attributes,
    serialize_config,
    serialize_snapshot,
)
from section_grid.layout.geometry import Point, Rect
from section_grid.layout.snapshot import IndexPath


class TestSerializers:
    def test_snapshot_roundtrips_through_json(self, engine):
        d = json.loads(serialize_snapshot(engine.snapshot))
        assert d["containerWidth"] == 340
        assert d["contentSize"] == {"width": 340, "height": 1800}
        assert d["safeArea"] == {"top": 0, "left": 0, "bottom": 0, "right": 0}
        assert len(d["sections"]) == 4
        first = d["sections"][0]
        assert first["columnCount"] == 2
        assert first["cellDimension"] == 145
        assert first["header"] == {"x": 0, "y": 10, "width": 340, "height": 50}
        assert first["items"][1] == {"x": 175, "y": 70, "width": 145, "height": 145}

    def test_attributes(self, engine):
        attrs = engine.attributes_for_elements(Rect(0, 0, 340, 100))
        d = json.loads(serialize_attributes(attrs))
        assert [a["kind"] for a in d] == ["header", "item", "item"]
        assert d[1]["section"] == 0
        assert d[1]["item"] == 0
        assert "transform" not in d[1]

    def test_moving_attributes_include_transform(self, engine):
        attrs = engine.attributes_for_interactively_moving_item(IndexPath(0, 0), Point(0, 0))
        d = json.loads(serialize_attributes([attrs]))[0]
        assert set(d["transform"]) == {"a", "b", "c", "d", "tx", "ty"}
        assert d["zIndex"] == 1

    def test_config(self, config):
        d = json.loads(serialize_config(config))
        assert d["headerHeight"] == 50
        assert d["minCellDimension"] == 100


class TestHTMLExporter:
    def test_export_creates_file(self, tmp_path, engine, data_source):
        out = tmp_path / "preview.html"
        HTMLExporter.export(out, engine.snapshot, labels=data_source.sections())
        html = out.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert html.count('class="sg-item"') == 20
        assert html.count('class="sg-header"') == 4

    def test_title(self, engine):
        html = HTMLExporter.render(engine.snapshot, title="My Albums")
        assert "<title>My Albums</title>" in html

    def test_default_labels(self, engine):
        html = HTMLExporter.render(engine.snapshot)
        assert ">3.2</div>" in html
        assert ">Section 1</div>" in html

    def test_labels_are_escaped(self, engine):
        labels = [["<b>x</b>"] * 6, ["y"] * 6, ["z"] * 4, ["w"] * 4]
        html = HTMLExporter.render(engine.snapshot, labels=labels)
        assert "&lt;b&gt;x&lt;/b&gt;" in html
        assert "<b>x</b>" not in html

    def test_section_titles(self, engine):
        html = HTMLExporter.render(engine.snapshot, section_titles=["A", "B", "C", "D"])
        assert ">C</div>" in html

    def test_embeds_snapshot_json(self, engine):
        html = HTMLExporter.render(engine.snapshot)
        start = html.index('id="sg-snapshot">') + len('id="sg-snapshot">')
        end = html.index("</script>", start)
        assert json.loads(html[start:end])["contentSize"]["height"] == 1800

    def test_label_count_mismatch(self, engine):
        with pytest.raises(ValueError, match="item counts"):
            HTMLExporter.render(engine.snapshot, labels=[["a"]])

    def test_title_count_mismatch(self, engine):
        with pytest.raises(ValueError, match="section titles"):
            HTMLExporter.render(engine.snapshot, section_titles=["A"])
