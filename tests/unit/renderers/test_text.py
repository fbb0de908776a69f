"""Tests for the plain-text digest."""

from __future__ import annotations

from jerseyorders.models.options import DisplayOptions
from jerseyorders.pipeline.runner import run
from jerseyorders.renderers.text import render_text


class TestHeader:
    def test_metadata_and_labels(self, team_result, options):
        lines = render_text(team_result, options).splitlines()
        assert lines[:6] == [
            "Party Name: Dhaka XI",
            "Jersey Type: POLO",
            "Fabrics: PP",
            "Sleeve: Long & Short",
            "RIB: Cuff & Yes",
            "PANT: Yes",
        ]

    def test_blank_party_name_placeholder(self, team_result):
        text = render_text(team_result, DisplayOptions())
        assert text.startswith("Party Name: _______________\n")


class TestSummary:
    def test_per_size_lines(self, team_result, options):
        text = render_text(team_result, options)
        assert "M: 1 pcs (LONG = 0, SHORT = 1) | RIB = 0 | PANT = 0\n" in text
        assert "L: 2 pcs (LONG = 1, SHORT = 1) | RIB = 1 | PANT = 1\n" in text
        assert "8 KIDS: 1 pcs (LONG = 1, SHORT = 0) | RIB = 1 | PANT = 0\n" in text

    def test_total_line(self, team_result, options):
        text = render_text(team_result, options)
        assert "\nTOTAL: 6 pcs (LONG = 2, SHORT = 4) | RIB = 2 | PANT = 1\n" in text

    def test_short_only_breakdown(self, options):
        text = render_text(run("M---A---1---SHORT---NO---NO\nM---B---2---SHORT---NO---NO"), options)
        assert "M: 2 pcs (SHORT = 2)\n" in text
        assert "TOTAL: 2 pcs (SHORT = 2)\n" in text


class TestDetails:
    def test_numbered_entries_per_size(self, team_result, options):
        text = render_text(team_result, options)
        assert "DETAILS:\n========\n\nM:\n  1. HIMEL [47]\n\nL:\n  1. SANJID [02]\n  2. [17]\n" in text
        assert "8 KIDS:\n  1. TUHIN [5]\n" in text

    def test_invalid_count_trailer(self, team_result, options):
        assert render_text(team_result, options).endswith("\nINVALID ROWS: 2\n")

    def test_no_trailer_without_invalid_rows(self, options):
        text = render_text(run("S---A---1---LONG---NO---NO"), options)
        assert "INVALID ROWS" not in text
