"""Harness settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArithSettings(BaseSettings):
    """Bounds and population sizes for evaluation and the soundness harness."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ARITH_",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    max_steps: int = Field(default=10_000, ge=0)
    max_size: int = Field(default=6, ge=0)
    max_depth: int = Field(default=0, ge=0)
    random_samples: int = Field(default=500, ge=0)
    random_depth: int = Field(default=8, ge=1)
    seed: int | None = Field(default=None)
    max_counterexamples: int = Field(default=20, ge=1)


def load_settings(**overrides: Any) -> ArithSettings:
    """Load settings from the environment, then apply non-None overrides."""
    return ArithSettings(**{key: value for key, value in overrides.items() if value is not None})
