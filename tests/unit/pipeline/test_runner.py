"""End-to-end tests for the pipeline entry point."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jerseyorders.models.order import OrderRow, ReasonCode
from jerseyorders.pipeline.runner import process_line, run
from jerseyorders.renderers.json_export import render_json


class TestProcessLine:
    def test_valid_row(self):
        row = process_line("M---Himel---47---SHORT---NO---NO", 3)
        assert row.valid is True
        assert row.reason is None
        assert (row.size, row.name, row.number) == ("M", "HIMEL", "47")
        assert row.line_number == 3

    def test_invalid_size_row(self):
        row = process_line("Z---Sumon---90---SHORT---NO---NO")
        assert row.valid is False
        assert row.reason == ReasonCode.SIZE

    def test_empty_name_is_not_structure(self):
        row = process_line("L------17---SHORT---NO---NO")
        assert row.valid is True
        assert row.name == ""

    def test_structure_row_keeps_present_fields(self):
        row = process_line("M---Siam---28")
        assert row.reason == ReasonCode.STRUCTURE
        assert (row.size, row.name, row.number, row.sleeve) == ("M", "SIAM", "28", "")


class TestRun:
    def test_rows_kept_in_input_order(self, team_result):
        assert [r.line_number for r in team_result.rows] == [2, 3, 4, 5, 6, 7, 8, 9]

    def test_counts(self, team_result):
        assert team_result.valid_count == 6
        assert team_result.invalid_count == 2
        assert [r.reason for r in team_result.invalid_rows] == [ReasonCode.SIZE, ReasonCode.STRUCTURE]

    def test_blank_text_gives_empty_result(self):
        result = run("\n   \n\n")
        assert result.is_empty
        assert result.tallies == {}

    def test_windows_line_endings(self):
        result = run("M---A---1---SHORT---NO---NO\r\nL---B---2---LONG---NO---YES\r\n")
        assert result.valid_count == 2
        assert result.rows[1].pant == "YES"

    def test_rerun_is_deterministic(self, team_order):
        first, second = run(team_order), run(team_order)
        assert first == second
        assert render_json(first) == render_json(second)

    def test_grouped_rows_follow_canonical_order(self):
        text = "\n".join(f"{s}---P{i}---{i}---SHORT---NO---NO" for i, s in enumerate(["XL", "M", "2XL", "S"]))
        grouped = run(text).grouped_valid_rows()
        assert list(grouped) == ["S", "M", "XL", "2XL"]


class TestOrderRowInvariant:
    def test_invalid_row_requires_reason(self):
        with pytest.raises(ValidationError):
            OrderRow(size="M", valid=False)

    def test_valid_row_rejects_reason(self):
        with pytest.raises(ValidationError):
            OrderRow(size="M", valid=True, reason=ReasonCode.SIZE)
