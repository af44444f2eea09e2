"""Exhaustive enumeration of arithmetic terms.

Populations grow quickly: there are 3, 9, 27, 108, 567, 3159 and 17496
terms of sizes 1 to 7, and 59439 terms of depth at most 3.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import product
from typing import Iterator

from arith.core.ast import FALSE, TRUE, ZERO, If, IsZero, Pred, Succ, Term

CONSTANTS: tuple[Term, ...] = (TRUE, FALSE, ZERO)
UNARY = (Succ, Pred, IsZero)


@lru_cache(maxsize=None)
def terms_of_size(n: int) -> tuple[Term, ...]:
    """Every term with exactly n nodes, in a deterministic order."""
    if n < 1:
        return ()
    if n == 1:
        return CONSTANTS

    found: list[Term] = []
    for make in UNARY:
        found.extend(make(inner) for inner in terms_of_size(n - 1))
    for cond_size in range(1, n - 1):
        for then_size in range(1, n - cond_size - 1):
            else_size = n - 1 - cond_size - then_size
            found.extend(
                If(cond, then_branch, else_branch)
                for cond, then_branch, else_branch in product(
                    terms_of_size(cond_size), terms_of_size(then_size), terms_of_size(else_size)
                )
            )
    return tuple(found)


def terms_up_to_size(n: int) -> Iterator[Term]:
    """Every term with at most n nodes, smallest first."""
    for k in range(1, n + 1):
        yield from terms_of_size(k)


@lru_cache(maxsize=None)
def terms_up_to_depth(d: int) -> tuple[Term, ...]:
    """Every term of height at most d, in a deterministic order."""
    if d < 1:
        return ()
    if d == 1:
        return CONSTANTS

    smaller = terms_up_to_depth(d - 1)
    found: list[Term] = list(CONSTANTS)
    for make in UNARY:
        found.extend(make(inner) for inner in smaller)
    found.extend(If(c, t, e) for c, t, e in product(smaller, repeat=3))
    return tuple(found)
