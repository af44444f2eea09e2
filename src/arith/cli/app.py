"""Typer CLI entrypoints for running the soundness harness."""

from __future__ import annotations

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from arith.config.settings import load_settings
from arith.core.ast import is_value
from arith.core.checker import typecheck
from arith.eval.errors import StepLimitExceeded
from arith.eval.machine import is_stuck, normalize
from arith.logging_utils import configure_logging
from arith.soundness.enumerate import terms_of_size
from arith.soundness.harness import HarnessReport, SoundnessHarness, population

app = typer.Typer(name="arith", help="Soundness harness for typed arithmetic expressions", add_completion=False)


def _report_table(report: HarnessReport) -> Table:
    table = Table(title=f"Checked {report.terms} terms")
    table.add_column("property")
    table.add_column("checked", justify="right")
    table.add_column("vacuous", justify="right")
    table.add_column("violations", justify="right")
    for name, stats in report.stats.items():
        style = "red" if stats.violations else "green"
        table.add_row(name, str(stats.checked), str(stats.vacuous), f"[{style}]{stats.violations}[/{style}]")
    return table


@app.command()
def check(
    max_size: Annotated[int | None, typer.Option("--max-size", help="Enumerate every term up to this size.")] = None,
    max_depth: Annotated[int | None, typer.Option("--max-depth", help="Also enumerate terms up to this depth.")] = None,
    samples: Annotated[int | None, typer.Option("--samples", help="Random terms of each kind.")] = None,
    random_depth: Annotated[int | None, typer.Option("--random-depth")] = None,
    seed: Annotated[int | None, typer.Option("--seed")] = None,
    max_steps: Annotated[int | None, typer.Option("--max-steps")] = None,
) -> None:
    """Check determinism, progress, preservation and soundness."""

    configure_logging(profile="cli")
    settings = load_settings(
        max_size=max_size,
        max_depth=max_depth,
        random_samples=samples,
        random_depth=random_depth,
        seed=seed,
        max_steps=max_steps,
    )
    logger.info("check.start max_size={} samples={}", settings.max_size, settings.random_samples)
    harness = SoundnessHarness.from_settings(settings)
    report = harness.run(population(settings))

    console = Console()
    console.print(_report_table(report))
    for counterexample in report.counterexamples:
        console.print(f"[red]counterexample[/red] {counterexample}")
    if not report.ok:
        raise typer.Exit(code=1)
    console.print("[green]All properties hold.[/green]")


@app.command()
def census(
    max_size: Annotated[int | None, typer.Option("--max-size")] = None,
    max_steps: Annotated[int | None, typer.Option("--max-steps")] = None,
) -> None:
    """Classify every term up to a size: values, well-typed, stuck."""

    configure_logging(profile="cli")
    settings = load_settings(max_size=max_size, max_steps=max_steps)

    table = Table(title=f"Terms up to size {settings.max_size}")
    for column in ("size", "terms", "values", "well-typed", "stuck", "gets stuck", "ill-typed, reaches value", "no normal form"):
        table.add_column(column, justify="right")

    for n in range(1, settings.max_size + 1):
        terms = terms_of_size(n)
        values = well_typed = stuck = gets_stuck = lucky = unfinished = 0
        for term in terms:
            values += is_value(term)
            stuck += is_stuck(term)
            typed = typecheck(term) is not None
            well_typed += typed
            try:
                reaches_value = is_value(normalize(term, settings.max_steps))
            except StepLimitExceeded as exc:
                logger.debug("census.unfinished term={} last={}", exc.term, exc.last)
                unfinished += 1
                continue
            gets_stuck += not reaches_value
            lucky += reaches_value and not typed
        table.add_row(*(str(x) for x in (n, len(terms), values, well_typed, stuck, gets_stuck, lucky, unfinished)))

    Console().print(table)


if __name__ == "__main__":
    app()
