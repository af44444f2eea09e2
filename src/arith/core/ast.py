"""Core language AST for typed arithmetic expressions.

Terms are immutable trees; every operation over them builds new terms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union


class Term:
    """Base class for terms."""

    pass


@dataclass(frozen=True)
class TrueLit(Term):
    """Boolean constant: true"""

    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True)
class FalseLit(Term):
    """Boolean constant: false"""

    def __str__(self) -> str:
        return "false"


@dataclass(frozen=True)
class If(Term):
    """Conditional: if cond then then_branch else else_branch."""

    cond: Term
    then_branch: Term
    else_branch: Term

    def __str__(self) -> str:
        return (
            f"if {_branch_str(self.cond)} then {_branch_str(self.then_branch)}"
            f" else {_branch_str(self.else_branch)}"
        )


@dataclass(frozen=True)
class Zero(Term):
    """Numeric constant: 0"""

    def __str__(self) -> str:
        return "0"


@dataclass(frozen=True)
class Succ(Term):
    """Successor: succ t"""

    inner: Term

    def __str__(self) -> str:
        return f"succ {_operand_str(self.inner)}"


@dataclass(frozen=True)
class Pred(Term):
    """Predecessor: pred t"""

    inner: Term

    def __str__(self) -> str:
        return f"pred {_operand_str(self.inner)}"


@dataclass(frozen=True)
class IsZero(Term):
    """Zero test: iszero t"""

    inner: Term

    def __str__(self) -> str:
        return f"iszero {_operand_str(self.inner)}"


TRUE = TrueLit()
FALSE = FalseLit()
ZERO = Zero()


def _operand_str(term: Term) -> str:
    match term:
        case TrueLit() | FalseLit() | Zero():
            return str(term)
        case _:
            return f"({term})"


def _branch_str(term: Term) -> str:
    # Operator applications read unambiguously inside if; nested ifs do not.
    if isinstance(term, If):
        return f"({term})"
    return str(term)


# =============================================================================
# Value classification
# =============================================================================


def is_boolean_value(term: Term) -> bool:
    """True for exactly the literals `true` and `false`."""
    return isinstance(term, (TrueLit, FalseLit))


def is_numeric_value(term: Term) -> bool:
    """Zero is numeric; succ t is numeric iff t is numeric."""
    while isinstance(term, Succ):
        term = term.inner
    return isinstance(term, Zero)


def is_value(term: Term) -> bool:
    """A value is a boolean value or a numeric value."""
    return is_boolean_value(term) or is_numeric_value(term)


# =============================================================================
# Builders
# =============================================================================


def boolean(flag: bool) -> Term:
    """Build the boolean literal for a Python bool."""
    return TRUE if flag else FALSE


def nat(n: int) -> Term:
    """Build the unary numeral for n: succ (... (succ 0)).

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Numerals are natural numbers, got {n}")
    term: Term = ZERO
    for _ in range(n):
        term = Succ(term)
    return term


def as_int(term: Term) -> Optional[int]:
    """Return the number a numeric value represents, None for anything else."""
    count = 0
    while isinstance(term, Succ):
        term = term.inner
        count += 1
    if isinstance(term, Zero):
        return count
    return None


# =============================================================================
# Measures
# =============================================================================


def children(term: Term) -> tuple[Term, ...]:
    """Immediate subterms, left to right."""
    match term:
        case If(cond, then_branch, else_branch):
            return (cond, then_branch, else_branch)
        case Succ(inner) | Pred(inner) | IsZero(inner):
            return (inner,)
        case _:
            return ()


def subterms(term: Term) -> Iterator[Term]:
    """Walk the term in pre-order, starting with the term itself."""
    stack = [term]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))


def size(term: Term) -> int:
    """Number of nodes in the term."""
    return sum(1 for _ in subterms(term))


def depth(term: Term) -> int:
    """Height of the term; constants have depth 1."""
    deepest = 0
    stack = [(term, 1)]
    while stack:
        current, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((kid, level + 1) for kid in children(current))
    return deepest


def consts(term: Term) -> frozenset[Term]:
    """The set of constants (true, false, 0) occurring in the term."""
    return frozenset(t for t in subterms(term) if not children(t))


# Export the term union for type checking
TermRepr = Union[TrueLit, FalseLit, If, Zero, Succ, Pred, IsZero]
