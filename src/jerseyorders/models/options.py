"""Display options supplied by the caller alongside the order text."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel

from jerseyorders.core.config import AppSettings

Layout = Literal["stacked", "split"]


class DisplayOptions(BaseModel):
    """Free-text sheet metadata and rendering switches."""

    party_name: str = ""
    jersey_type: str = "POLO"
    fabrics_type: str = "PP"
    show_index: bool = False
    image_src: Optional[str] = None
    layout: Layout = "stacked"
    party_placeholder: str = "_______________"

    model_config = {"frozen": True}

    @property
    def display_party_name(self) -> str:
        return self.party_name.strip() or self.party_placeholder

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None, **overrides: Any) -> DisplayOptions:
        """Fill blank jersey/fabric fields and switches from settings defaults."""
        if settings is None:
            settings = AppSettings()
        fmt = settings.formatter
        values: dict[str, Any] = {
            "jersey_type": fmt.default_jersey_type,
            "fabrics_type": fmt.default_fabrics_type,
            "show_index": fmt.show_index,
            "layout": fmt.default_layout,
            "party_placeholder": fmt.party_placeholder,
        }
        for key, val in overrides.items():
            if val is None or (isinstance(val, str) and not val.strip() and key != "party_name"):
                continue
            values[key] = val
        return cls(**values)
