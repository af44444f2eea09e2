"""Random term generation for the soundness harness."""

from __future__ import annotations

import random

from arith.core.ast import FALSE, TRUE, ZERO, If, IsZero, Pred, Succ, Term
from arith.core.types import BOOL, NAT, Type
from arith.soundness.enumerate import CONSTANTS


def random_term(rng: random.Random, depth: int, leaf_chance: float = 0.25) -> Term:
    """Build a random term of height at most depth.

    Shapes are chosen without regard to types, so most results are
    ill-typed; these are the terms that exercise stuck states.
    """
    if depth <= 1 or rng.random() < leaf_chance:
        return rng.choice(CONSTANTS)

    shape = rng.randrange(4)
    if shape == 0:
        return If(
            random_term(rng, depth - 1, leaf_chance),
            random_term(rng, depth - 1, leaf_chance),
            random_term(rng, depth - 1, leaf_chance),
        )
    make = (Succ, Pred, IsZero)[shape - 1]
    return make(random_term(rng, depth - 1, leaf_chance))


def random_well_typed(rng: random.Random, ty: Type, depth: int, leaf_chance: float = 0.25) -> Term:
    """Build a random term of the given type and height at most depth."""
    if ty not in (BOOL, NAT):
        raise ValueError(f"Unknown type: {ty}")

    if depth <= 1 or rng.random() < leaf_chance:
        if ty == BOOL:
            return rng.choice((TRUE, FALSE))
        return ZERO

    if rng.random() < 0.3:
        return If(
            random_well_typed(rng, BOOL, depth - 1, leaf_chance),
            random_well_typed(rng, ty, depth - 1, leaf_chance),
            random_well_typed(rng, ty, depth - 1, leaf_chance),
        )
    if ty == BOOL:
        return IsZero(random_well_typed(rng, NAT, depth - 1, leaf_chance))
    make = rng.choice((Succ, Pred))
    return make(random_well_typed(rng, NAT, depth - 1, leaf_chance))
