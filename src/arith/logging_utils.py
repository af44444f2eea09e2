"""Runtime logging helpers.

The package logs structured events under a few prefixes:

    eval.step / eval.stuck      per-step traces from Evaluator.run (arith.eval)
    harness.violation / .done   soundness harness results (arith.soundness)
    check.* / census.*          CLI commands (arith.cli)

Step traces are emitted once per rewrite, so arith.eval is held at INFO
unless ARITH_LOG_FILTER names it explicitly.
"""

from __future__ import annotations

import os
import sys
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

LogProfile = Literal["default", "cli"]
ModuleFilter = dict[str | None, str | int | bool]

_DEFAULT_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name} | {message}"
_DEFAULT_MODULE_LEVELS: ModuleFilter = {"arith.eval": "INFO"}
_CONFIGURED_PROFILE: LogProfile | None = None


def _parse_log_filter(raw: str | None = None) -> tuple[str, ModuleFilter]:
    """Parse an ARITH_LOG_FILTER value into a global level and module overrides.

    Format: "level" or "level,module1=level,module2=false"
    Examples:
        - "info" - global INFO level
        - "debug,arith.eval=debug" - everything, including per-step traces
        - "info,arith.soundness=false" - harness events disabled
    """
    if raw is None:
        raw = os.getenv("ARITH_LOG_FILTER", "info")
    global_level = "info"
    modules: ModuleFilter = {}
    for part in (p.strip() for p in raw.lower().split(",")):
        if not part:
            continue
        module, sep, level = part.partition("=")
        if not sep:
            global_level = part
            continue
        level = level.strip()
        modules[module.strip()] = False if level == "false" else level.upper()
    return global_level, modules


def module_levels(overrides: ModuleFilter) -> ModuleFilter:
    """Merge explicit module levels over the package defaults."""
    return {**_DEFAULT_MODULE_LEVELS, **overrides}


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Configure process-level logging once per profile.

    The "cli" profile renders messages through rich; "default" writes
    timestamped lines to stderr.
    """
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    global_level, overrides = _parse_log_filter()
    filters = module_levels(overrides)

    logger.remove()
    if profile == "cli":
        sink = RichHandler(console=get_console(), show_time=False, show_path=False, markup=False)
        logger.add(sink, level=global_level.upper(), format="{message}", filter=filters, diagnose=False)
    else:
        logger.add(sys.stderr, level=global_level.upper(), format=_DEFAULT_FORMAT, filter=filters, diagnose=False)

    _CONFIGURED_PROFILE = profile
