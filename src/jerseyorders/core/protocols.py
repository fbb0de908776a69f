"""Protocol interfaces for pluggable formatter pieces.

Renderers are matched structurally, no inheritance required, easy to check
with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from jerseyorders.models.options import DisplayOptions
    from jerseyorders.models.result import PipelineResult


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

@runtime_checkable
class IRenderer(Protocol):
    """Turns a finished pipeline run into one output artifact."""

    media_type: str

    def render(self, result: PipelineResult, options: DisplayOptions) -> str: ...
