"""Output renderers behind the IRenderer protocol."""

from __future__ import annotations

from enum import StrEnum

from jerseyorders.core.exceptions import UnknownFormatError
from jerseyorders.core.protocols import IRenderer
from jerseyorders.models.options import DisplayOptions
from jerseyorders.models.result import PipelineResult
from jerseyorders.renderers.html_sheet import HTMLRenderer
from jerseyorders.renderers.json_export import JSONRenderer
from jerseyorders.renderers.text import TextRenderer


class OutputFormat(StrEnum):
    HTML = "html"
    TEXT = "text"
    JSON = "json"


RENDERERS: dict[OutputFormat, IRenderer] = {
    OutputFormat.HTML: HTMLRenderer(),
    OutputFormat.TEXT: TextRenderer(),
    OutputFormat.JSON: JSONRenderer(),
}


def get_renderer(fmt: str) -> IRenderer:
    try:
        return RENDERERS[OutputFormat(fmt)]
    except ValueError as exc:
        raise UnknownFormatError(fmt) from exc


def render(result: PipelineResult, fmt: str, options: DisplayOptions | None = None) -> str:
    """Render ``result`` in the requested format."""
    if options is None:
        options = DisplayOptions()
    return get_renderer(fmt).render(result, options)
