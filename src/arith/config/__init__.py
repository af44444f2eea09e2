"""Configuration package."""

from arith.config.settings import ArithSettings, load_settings

__all__ = [
    "ArithSettings",
    "load_settings",
]
