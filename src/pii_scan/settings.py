"""Scan settings via Pydantic Settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScanSettings(BaseSettings):
    """Matcher and report settings."""

    model_config = SettingsConfigDict(env_prefix="PII_SCAN_")

    confidence_threshold: float = Field(default=0.5, ge=0.0, lt=1.0)
    max_values: int = Field(default=50, ge=1)
    row_noun: str = "row"
    show_values: bool = False
    show_all: bool = False
    rules_file: Path | None = None
