"""Tests for renderer dispatch."""

from __future__ import annotations

import pytest

from jerseyorders.core.exceptions import UnknownFormatError
from jerseyorders.core.protocols import IRenderer
from jerseyorders.renderers import RENDERERS, OutputFormat, get_renderer, render


class TestRegistry:
    def test_every_renderer_satisfies_protocol(self):
        for renderer in RENDERERS.values():
            assert isinstance(renderer, IRenderer)

    def test_media_types(self):
        assert get_renderer("html").media_type == "text/html"
        assert get_renderer("text").media_type == "text/plain"
        assert get_renderer("json").media_type == "application/json"

    def test_render_dispatches(self, team_result, options):
        assert render(team_result, OutputFormat.TEXT, options).startswith("Party Name: Dhaka XI")
        assert render(team_result, "json").startswith('{"M":')

    def test_unknown_format_raises(self, team_result):
        with pytest.raises(UnknownFormatError, match="pdf"):
            render(team_result, "pdf")
