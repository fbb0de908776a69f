"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class FormatterConfig(BaseSettings):
    """Defaults applied to order sheets when the clerk leaves a field blank."""

    model_config = {"env_prefix": "JERSEYORDERS_FORMAT_"}

    default_jersey_type: str = "POLO"
    default_fabrics_type: str = "PP"
    party_placeholder: str = "_______________"
    default_layout: Literal["stacked", "split"] = "stacked"
    show_index: bool = False


class ApiConfig(BaseSettings):
    """HTTP surface configuration."""

    model_config = {"env_prefix": "JERSEYORDERS_API_"}

    title: str = "Jersey Order Formatter"
    max_input_chars: int = 200_000


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "JERSEYORDERS_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    formatter: FormatterConfig = FormatterConfig()
    api: ApiConfig = ApiConfig()
