"""Relational reading of the evaluation rules.

Each inference rule is an independent function from a term to the
successors it derives. Collecting every rule's output gives the full
one-step relation, which `step` must agree with and which must never
relate a term to two different successors.
"""

from __future__ import annotations

from typing import Callable

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
)

Rule = Callable[[Term], list[Term]]


def _if_true(term: Term) -> list[Term]:
    match term:
        case If(TrueLit(), then_branch, _):
            return [then_branch]
    return []


def _if_false(term: Term) -> list[Term]:
    match term:
        case If(FalseLit(), _, else_branch):
            return [else_branch]
    return []


def _if(term: Term) -> list[Term]:
    match term:
        case If(cond, then_branch, else_branch):
            return [If(c, then_branch, else_branch) for c in successors(cond)]
    return []


def _succ(term: Term) -> list[Term]:
    match term:
        case Succ(inner) if not is_numeric_value(inner):
            return [Succ(t) for t in successors(inner)]
    return []


def _pred_zero(term: Term) -> list[Term]:
    match term:
        case Pred(Zero()):
            return [ZERO]
    return []


def _pred_succ(term: Term) -> list[Term]:
    match term:
        case Pred(Succ(inner)) if is_numeric_value(inner):
            return [inner]
    return []


def _pred(term: Term) -> list[Term]:
    match term:
        case Pred(inner):
            return [Pred(t) for t in successors(inner)]
    return []


def _iszero_zero(term: Term) -> list[Term]:
    match term:
        case IsZero(Zero()):
            return [TRUE]
    return []


def _iszero_succ(term: Term) -> list[Term]:
    match term:
        case IsZero(Succ(inner)) if is_numeric_value(inner):
            return [FALSE]
    return []


def _iszero(term: Term) -> list[Term]:
    match term:
        case IsZero(inner):
            return [IsZero(t) for t in successors(inner)]
    return []


RULES: tuple[tuple[str, Rule], ...] = (
    ("E-IfTrue", _if_true),
    ("E-IfFalse", _if_false),
    ("E-If", _if),
    ("E-Succ", _succ),
    ("E-PredZero", _pred_zero),
    ("E-PredSucc", _pred_succ),
    ("E-Pred", _pred),
    ("E-IszeroZero", _iszero_zero),
    ("E-IszeroSucc", _iszero_succ),
    ("E-Iszero", _iszero),
)


def derivations(term: Term) -> list[tuple[str, Term]]:
    """Every (rule name, successor) pair derivable for the term."""
    return [(name, result) for name, rule in RULES for result in rule(term)]


def successors(term: Term) -> list[Term]:
    """Every term the rules relate the given term to, in rule order."""
    return [result for _, result in derivations(term)]
