"""Small-step and big-step evaluation for typed arithmetic expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from loguru import logger

from arith.core.ast import (
    FALSE,
    TRUE,
    ZERO,
    FalseLit,
    If,
    IsZero,
    Pred,
    Succ,
    Term,
    TrueLit,
    Zero,
    is_numeric_value,
    is_value,
)
from arith.eval.errors import StepLimitExceeded

DEFAULT_MAX_STEPS = 10_000


def step(term: Term) -> Optional[Term]:
    """Rewrite a term by exactly one step of the small-step relation.

    Returns None when no rule applies, i.e. the term is a normal form.
    The cases are tried in order and their patterns never overlap, so the
    relation is a function.
    """
    match term:
        case If(TrueLit(), then_branch, _):
            return then_branch

        case If(FalseLit(), _, else_branch):
            return else_branch

        case If(cond, then_branch, else_branch):
            cond2 = step(cond)
            if cond2 is None:
                return None
            return If(cond2, then_branch, else_branch)

        case Succ(_) if is_numeric_value(term):
            return None

        case Succ(_):
            # E-Succ under a run of succs: step the innermost operand once
            # and rebuild, without one frame per level.
            wrappers = 0
            inner = term
            while isinstance(inner, Succ):
                inner = inner.inner
                wrappers += 1
            inner2 = step(inner)
            if inner2 is None:
                return None
            for _ in range(wrappers):
                inner2 = Succ(inner2)
            return inner2

        case Pred(Zero()):
            return ZERO

        case Pred(Succ(nv)) if is_numeric_value(nv):
            return nv

        case Pred(inner):
            inner2 = step(inner)
            if inner2 is None:
                return None
            return Pred(inner2)

        case IsZero(Zero()):
            return TRUE

        case IsZero(Succ(nv)) if is_numeric_value(nv):
            return FALSE

        case IsZero(inner):
            inner2 = step(inner)
            if inner2 is None:
                return None
            return IsZero(inner2)

        case _:
            return None


def is_normal_form(term: Term) -> bool:
    return step(term) is None


def is_stuck(term: Term) -> bool:
    """A stuck term is a normal form that is not a value."""
    return step(term) is None and not is_value(term)


def multistep(term: Term, max_steps: int = DEFAULT_MAX_STEPS) -> Iterator[Term]:
    """Yield the term and each successor until a normal form is reached.

    Raises:
        StepLimitExceeded: If more than max_steps steps would be taken
    """
    current = term
    yield current
    for _ in range(max_steps):
        following = step(current)
        if following is None:
            return
        current = following
        yield current
    if step(current) is not None:
        raise StepLimitExceeded(term, current, max_steps)


def normalize(term: Term, max_steps: int = DEFAULT_MAX_STEPS) -> Term:
    """Apply step until a normal form; the result may be a value or stuck.

    Raises:
        StepLimitExceeded: If no normal form is reached within max_steps
    """
    current = term
    for current in multistep(term, max_steps):
        pass
    return current


def big_step(term: Term) -> Optional[Term]:
    """Evaluate a term with the big-step semantics.

    Returns the value the term evaluates to, or None when no derivation
    exists (the small-step evaluation of the same term gets stuck).
    """
    if is_value(term):
        return term

    match term:
        case If(cond, then_branch, else_branch):
            match big_step(cond):
                case TrueLit():
                    return big_step(then_branch)
                case FalseLit():
                    return big_step(else_branch)
                case _:
                    return None

        case Succ(inner):
            value = big_step(inner)
            if value is not None and is_numeric_value(value):
                return Succ(value)
            return None

        case Pred(inner):
            match big_step(inner):
                case Zero():
                    return ZERO
                case Succ(nv):
                    return nv
                case _:
                    return None

        case IsZero(inner):
            match big_step(inner):
                case Zero():
                    return TRUE
                case Succ(_):
                    return FALSE
                case _:
                    return None

        case _:
            return None


@dataclass(frozen=True)
class Evaluation:
    """Outcome of driving a term to its normal form."""

    term: Term
    trace: tuple[Term, ...]

    @property
    def result(self) -> Term:
        return self.trace[-1]

    @property
    def steps(self) -> int:
        return len(self.trace) - 1

    @property
    def is_value(self) -> bool:
        return is_value(self.result)

    @property
    def is_stuck(self) -> bool:
        return not is_value(self.result)

    def __str__(self) -> str:
        status = "value" if self.is_value else "stuck"
        return f"{self.term} ->* {self.result} ({status}, {self.steps} steps)"


class Evaluator:
    """Small-step evaluator that records the trace of a reduction."""

    def __init__(self, max_steps: int = DEFAULT_MAX_STEPS) -> None:
        if max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        self.max_steps = max_steps

    def step(self, term: Term) -> Optional[Term]:
        return step(term)

    def run(self, term: Term) -> Evaluation:
        """Reduce a term to a normal form, keeping every intermediate term.

        Raises:
            StepLimitExceeded: If no normal form is reached within max_steps
        """
        trace: list[Term] = []
        for current in multistep(term, self.max_steps):
            logger.debug("eval.step n={} term={}", len(trace), current)
            trace.append(current)
        evaluation = Evaluation(term, tuple(trace))
        if evaluation.is_stuck:
            logger.debug("eval.stuck term={} steps={}", evaluation.result, evaluation.steps)
        return evaluation

    def normalize(self, term: Term) -> Term:
        return normalize(term, self.max_steps)
