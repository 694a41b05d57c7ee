"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineConfig(BaseSettings):
    """Optional validation checks for the proration engine."""

    model_config = {"env_prefix": "PRORATA_ENGINE_"}

    check_fte_sum: bool = False  # flag periods whose splits add up to more than 1.0
    check_overlaps: bool = False  # flag periods whose date ranges intersect


class APIConfig(BaseSettings):
    """HTTP surface configuration."""

    model_config = {"env_prefix": "PRORATA_API_"}

    title: str = "Prorata TCC Calculator"
    version: str = "0.1.0"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PRORATA_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    engine: EngineConfig = Field(default_factory=EngineConfig)
    api: APIConfig = Field(default_factory=APIConfig)
