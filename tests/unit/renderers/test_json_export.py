"""Tests for the grouped JSON export."""

from __future__ import annotations

import json

from jerseyorders.pipeline.runner import run
from jerseyorders.renderers.json_export import export_groups, render_json

MIXED_ORDER = "\n".join([
    "XL---Rahat---77---SHORT---NO---NO",
    "M---Himel---47---SHORT---NO---NO",
    "XL---Rasel---70---LONG---CUFF---YES",
    "Z---Sumon---90---SHORT---NO---NO",
    "M---Siam---28---SHORT---NO---NO",
    "XL---Jahid---22---SHORT---NO---NO",
])


class TestExportGroups:
    def test_keys_sizes_and_order(self):
        groups = export_groups(run(MIXED_ORDER))
        assert list(groups) == ["M", "XL"]
        assert [e["NAME"] for e in groups["M"]] == ["HIMEL", "SIAM"]
        assert [e["NAME"] for e in groups["XL"]] == ["RAHAT", "RASEL", "JAHID"]

    def test_invalid_rows_omitted(self):
        groups = export_groups(run(MIXED_ORDER))
        names = [e["NAME"] for entries in groups.values() for e in entries]
        assert "SUMON" not in names

    def test_record_shape(self):
        groups = export_groups(run(MIXED_ORDER))
        assert groups["XL"][1] == {
            "NAME": "RASEL", "NO": "70", "SLEEVE": "LONG", "RIB": "CUFF", "PANT": "YES",
        }

    def test_canonical_key_order(self):
        text = "\n".join(f"{s}---P---1---SHORT---NO---NO" for s in ["XL", "M", "2XL", "S"])
        assert list(export_groups(run(text))) == ["S", "M", "XL", "2XL"]


class TestRenderJson:
    def test_round_trips_to_groups(self):
        result = run(MIXED_ORDER)
        assert json.loads(render_json(result)) == export_groups(result)

    def test_byte_identical_on_rerun(self):
        assert render_json(run(MIXED_ORDER)) == render_json(run(MIXED_ORDER))

    def test_empty_when_no_valid_rows(self):
        assert render_json(run("Z---A---1---SHORT---NO---NO")) == "{}"
