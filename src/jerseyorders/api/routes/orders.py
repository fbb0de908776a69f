"""Order formatting and export endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from jerseyorders.core.config import AppSettings
from jerseyorders.core.exceptions import InputTooLargeError, NoOrderDataError, NoValidRowsError
from jerseyorders.models.options import DisplayOptions, Layout
from jerseyorders.models.order import OrderRow
from jerseyorders.models.result import PipelineResult
from jerseyorders.pipeline.runner import run
from jerseyorders.renderers import OutputFormat, render
from jerseyorders.renderers.json_export import export_groups

router = APIRouter(tags=["orders"])


class FormatRequest(BaseModel):
    """Order text plus the sheet metadata typed next to it."""

    text: str
    party_name: str = ""
    jersey_type: Optional[str] = None
    fabrics_type: Optional[str] = None
    show_index: Optional[bool] = None
    image_src: Optional[str] = None
    layout: Optional[Layout] = None


class FormatResponse(BaseModel):
    html: str
    text: str
    json_export: str
    valid_count: int
    invalid_count: int
    rows: list[OrderRow]


def _settings(request: Request) -> AppSettings:
    return request.app.state.settings


def _process(body: FormatRequest, settings: AppSettings) -> tuple[PipelineResult, DisplayOptions]:
    limit = settings.api.max_input_chars
    if len(body.text) > limit:
        raise InputTooLargeError(len(body.text), limit)
    result = run(body.text)
    options = DisplayOptions.from_settings(
        settings,
        party_name=body.party_name,
        jersey_type=body.jersey_type,
        fabrics_type=body.fabrics_type,
        show_index=body.show_index,
        image_src=body.image_src,
        layout=body.layout,
    )
    return result, options


@router.post("/format")
async def format_orders(body: FormatRequest, request: Request) -> FormatResponse:
    """Run the pipeline and return every rendering of the sheet."""
    result, options = _process(body, _settings(request))
    if result.is_empty:
        raise NoOrderDataError()
    return FormatResponse(
        html=render(result, OutputFormat.HTML, options),
        text=render(result, OutputFormat.TEXT, options),
        json_export=render(result, OutputFormat.JSON, options),
        valid_count=result.valid_count,
        invalid_count=result.invalid_count,
        rows=list(result.rows),
    )


@router.post("/export/json")
async def export_json(body: FormatRequest, request: Request) -> dict[str, list[dict[str, str]]]:
    result, _ = _process(body, _settings(request))
    if not result.valid_count:
        raise NoValidRowsError(result.invalid_count)
    return export_groups(result)


@router.post("/export/text", response_class=PlainTextResponse)
async def export_text(body: FormatRequest, request: Request) -> str:
    result, options = _process(body, _settings(request))
    if result.is_empty:
        raise NoOrderDataError()
    return render(result, OutputFormat.TEXT, options)
