"""Command line interface for the soundness harness."""

from arith.cli.app import app

__all__ = ["app"]
