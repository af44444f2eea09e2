"""Executable forms of the metatheory of typed arithmetic expressions.

Every check takes a term and returns True when the property holds for it.
A check whose premise does not apply to the term (e.g. progress for an
ill-typed term) holds vacuously.
"""

from __future__ import annotations

from typing import Iterable, Optional

from arith.core.ast import Term, consts, is_boolean_value, is_numeric_value, is_value, size
from arith.core.checker import typecheck
from arith.core.types import BOOL, NAT
from arith.eval.errors import StepLimitExceeded
from arith.eval.machine import DEFAULT_MAX_STEPS, big_step, normalize, step
from arith.soundness.reference import successors


def check_determinism(term: Term) -> bool:
    """step agrees with the rule relation, which has at most one successor."""
    found = successors(term)
    if len(found) > 1:
        return False
    stepped = step(term)
    if not found:
        return stepped is None
    return stepped == found[0] and step(term) == stepped


def check_value_normal(term: Term) -> bool:
    """Values never step."""
    return not is_value(term) or step(term) is None


def check_progress(term: Term) -> bool:
    """A well-typed term is a value or can take a step."""
    if typecheck(term) is None:
        return True
    return is_value(term) or step(term) is not None


def check_preservation(term: Term) -> bool:
    """Stepping a well-typed term keeps its type."""
    ty = typecheck(term)
    if ty is None:
        return True
    following = step(term)
    if following is None:
        return True
    return typecheck(following) == ty


def check_soundness(term: Term, max_steps: int = DEFAULT_MAX_STEPS) -> bool:
    """A well-typed term normalizes to a value of the same type."""
    ty = typecheck(term)
    if ty is None:
        return True
    try:
        result = normalize(term, max_steps)
    except StepLimitExceeded:
        return False
    return is_value(result) and typecheck(result) == ty


def check_canonical_forms(term: Term) -> bool:
    """Well-typed values of type Bool are booleans, of type Nat numerals."""
    if not is_value(term):
        return True
    ty = typecheck(term)
    if ty == BOOL:
        return is_boolean_value(term)
    if ty == NAT:
        return is_numeric_value(term)
    # Values are always well-typed.
    return False


def check_size_decreases(term: Term) -> bool:
    """Every step makes the term strictly smaller."""
    following = step(term)
    return following is None or size(following) < size(term)


def check_consts_bound(term: Term) -> bool:
    """A term has no more distinct constants than nodes."""
    return len(consts(term)) <= size(term)


def check_big_step_agreement(term: Term, max_steps: int = DEFAULT_MAX_STEPS) -> bool:
    """Big-step evaluation yields exactly the values small-step reaches."""
    try:
        result = normalize(term, max_steps)
    except StepLimitExceeded:
        return False
    evaluated = big_step(term)
    if is_value(result):
        return evaluated == result
    return evaluated is None


def subject_expansion_counterexample(terms: Iterable[Term]) -> Optional[tuple[Term, Term]]:
    """Find t -> t' where t' is well-typed but t is not.

    Preservation does not run backwards; the first such pair in the
    population is returned, or None if the population has none.
    """
    for term in terms:
        following = step(term)
        if following is None:
            continue
        if typecheck(following) is not None and typecheck(term) is None:
            return term, following
    return None
