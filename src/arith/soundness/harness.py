"""Run the metatheory checks over populations of terms."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterable, Iterator

from loguru import logger

from arith.config.settings import ArithSettings
from arith.core.ast import Term
from arith.core.checker import typecheck
from arith.core.types import BOOL, NAT
from arith.eval.machine import DEFAULT_MAX_STEPS, step
from arith.soundness.enumerate import terms_up_to_depth, terms_up_to_size
from arith.soundness.generate import random_term, random_well_typed
from arith.soundness.properties import (
    check_big_step_agreement,
    check_canonical_forms,
    check_consts_bound,
    check_determinism,
    check_preservation,
    check_progress,
    check_size_decreases,
    check_soundness,
    check_value_normal,
)


def _always(_term: Term) -> bool:
    return True


def _well_typed(term: Term) -> bool:
    return typecheck(term) is not None


def _steps(term: Term) -> bool:
    return step(term) is not None


@dataclass(frozen=True)
class Property:
    """A named check together with the premise that makes it non-vacuous."""

    name: str
    check: Callable[[Term], bool]
    premise: Callable[[Term], bool] = _always


@dataclass(frozen=True)
class Counterexample:
    """A term that violates a property."""

    property: str
    term: Term
    detail: str

    def __str__(self) -> str:
        return f"{self.property}: {self.term} ({self.detail})"


@dataclass
class PropertyStats:
    checked: int = 0
    vacuous: int = 0
    violations: int = 0


@dataclass
class HarnessReport:
    """Per-property tallies and the first counterexamples found."""

    terms: int = 0
    stats: dict[str, PropertyStats] = field(default_factory=dict)
    counterexamples: list[Counterexample] = field(default_factory=list)

    @property
    def violations(self) -> int:
        return sum(s.violations for s in self.stats.values())

    @property
    def ok(self) -> bool:
        return self.violations == 0


def standard_properties(max_steps: int = DEFAULT_MAX_STEPS) -> tuple[Property, ...]:
    return (
        Property("determinism", check_determinism),
        Property("value-normal", check_value_normal),
        Property("progress", check_progress, _well_typed),
        Property("preservation", check_preservation, lambda t: _well_typed(t) and _steps(t)),
        Property("soundness", partial(check_soundness, max_steps=max_steps), _well_typed),
        Property("canonical-forms", check_canonical_forms, _well_typed),
        Property("size-decreases", check_size_decreases, _steps),
        Property("consts-bound", check_consts_bound),
        Property("big-step", partial(check_big_step_agreement, max_steps=max_steps)),
    )


def describe(term: Term) -> str:
    """One-line classification of a term for counterexample reports."""
    following = step(term)
    ty = typecheck(term)
    return (
        f"type={ty if ty is not None else 'ill-typed'}, "
        f"step={following if following is not None else 'normal form'}"
    )


class SoundnessHarness:
    """Checks every property against each term of a population."""

    def __init__(
        self,
        properties: Iterable[Property] | None = None,
        max_steps: int = DEFAULT_MAX_STEPS,
        max_counterexamples: int = 20,
    ) -> None:
        self.properties = tuple(properties) if properties is not None else standard_properties(max_steps)
        self.max_counterexamples = max_counterexamples

    @classmethod
    def from_settings(cls, settings: ArithSettings) -> SoundnessHarness:
        return cls(
            max_steps=settings.max_steps,
            max_counterexamples=settings.max_counterexamples,
        )

    def check_term(self, term: Term, report: HarnessReport) -> None:
        report.terms += 1
        for prop in self.properties:
            stats = report.stats.setdefault(prop.name, PropertyStats())
            if not prop.premise(term):
                stats.vacuous += 1
                continue
            stats.checked += 1
            if prop.check(term):
                continue
            stats.violations += 1
            logger.warning("harness.violation property={} term={}", prop.name, term)
            if len(report.counterexamples) < self.max_counterexamples:
                report.counterexamples.append(Counterexample(prop.name, term, describe(term)))

    def run(self, terms: Iterable[Term]) -> HarnessReport:
        report = HarnessReport(stats={prop.name: PropertyStats() for prop in self.properties})
        for term in terms:
            self.check_term(term, report)
        logger.info("harness.done terms={} violations={}", report.terms, report.violations)
        return report


def population(settings: ArithSettings) -> Iterator[Term]:
    """Enumerated terms followed by random and random well-typed terms."""
    logger.info(
        "harness.population max_size={} max_depth={} random_samples={} seed={}",
        settings.max_size,
        settings.max_depth,
        settings.random_samples,
        settings.seed,
    )
    yield from terms_up_to_size(settings.max_size)
    if settings.max_depth:
        yield from terms_up_to_depth(settings.max_depth)

    rng = random.Random(settings.seed)
    for i in range(settings.random_samples):
        yield random_term(rng, settings.random_depth)
        yield random_well_typed(rng, BOOL if i % 2 else NAT, settings.random_depth)
