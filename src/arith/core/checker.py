"""Syntax-directed type checker for typed arithmetic expressions."""

from typing import Optional, Union

from arith.core.ast import FalseLit, If, IsZero, Pred, Succ, Term, TrueLit, Zero
from arith.core.errors import (
    BranchTypeMismatch,
    ConditionNotBool,
    OperandNotNat,
    TypeError,
    TypeMismatch,
)
from arith.core.types import BOOL, NAT, Type


class TypeChecker:
    """Type checker for booleans, naturals and conditionals.

    One rule per term shape; every subterm is visited once, so inference
    always terminates with a type or a TypeError.
    """

    def infer(self, term: Term) -> Type:
        """Synthesize the type of a term.

        Args:
            term: Term to infer type for

        Returns:
            The inferred type

        Raises:
            ConditionNotBool: If a conditional's guard is not Bool
            BranchTypeMismatch: If a conditional's arms disagree
            OperandNotNat: If succ/pred/iszero is applied to a non-Nat
        """
        match term:
            case TrueLit() | FalseLit():
                return BOOL

            case Zero():
                return NAT

            case If(cond, then_branch, else_branch):
                cond_type = self.infer(cond)
                if cond_type != BOOL:
                    raise ConditionNotBool(term, cond, cond_type)
                then_type = self.infer(then_branch)
                else_type = self.infer(else_branch)
                if then_type != else_type:
                    raise BranchTypeMismatch(term, then_type, else_type)
                return then_type

            case Succ(_) | Pred(_) | IsZero(_):
                return self._infer_operators(term)

            case _:
                raise ValueError(f"Not an arithmetic term: {term!r}")

    def check(self, term: Term, expected: Type) -> None:
        """Check term against an expected type.

        Raises:
            TypeMismatch: If the term has some other type
        """
        actual = self.infer(term)
        if actual != expected:
            raise TypeMismatch(term, expected, actual)

    def _infer_operators(self, term: Term) -> Type:
        """Type a run of succ/pred/iszero nodes with a loop, innermost first.

        A numeral is as deep as the number it denotes, so the chain is
        peeled iteratively instead of recursing once per node.
        """
        chain: list[Term] = []
        while isinstance(term, (Succ, Pred, IsZero)):
            chain.append(term)
            term = term.inner
        ty = self.infer(term)
        for op in reversed(chain):
            if ty != NAT:
                raise OperandNotNat(op, op.inner, ty)
            ty = BOOL if isinstance(op, IsZero) else NAT
        return ty


_checker = TypeChecker()


def type_of(term: Term) -> Type:
    """Infer the type of a term, raising a TypeError if it is ill-typed."""
    return _checker.infer(term)


def type_or_error(term: Term) -> Union[Type, TypeError]:
    """Infer the type of a term, returning the TypeError instead of raising it.

    The returned error carries the offending node, like the one type_of raises.
    """
    try:
        return _checker.infer(term)
    except TypeError as exc:
        return exc


def typecheck(term: Term) -> Optional[Type]:
    """Infer the type of a term, or None if it is ill-typed.

    Use type_or_error (or type_of) when the diagnostic is needed.
    """
    result = type_or_error(term)
    return None if isinstance(result, TypeError) else result


def is_well_typed(term: Term) -> bool:
    return typecheck(term) is not None
