"""Error types for the arithmetic type checker."""

from arith.core.ast import Term
from arith.core.types import Type


class TypeError(Exception):
    """Base class for type errors.

    Every type error carries the node whose typing rule failed.
    """

    term: Term

    def __init__(self, message: str, term: Term):
        super().__init__(message)
        self.term = term


class ConditionNotBool(TypeError):
    """The guard of a conditional is not a boolean."""

    def __init__(self, term: Term, condition: Term, actual: Type):
        self.condition = condition
        self.actual = actual
        super().__init__(f"Condition {condition} has type {actual}, expected Bool", term)


class BranchTypeMismatch(TypeError):
    """The two arms of a conditional have different types."""

    def __init__(self, term: Term, then_type: Type, else_type: Type):
        self.then_type = then_type
        self.else_type = else_type
        super().__init__(
            f"Branches of conditional disagree: then is {then_type}, else is {else_type}",
            term,
        )


class OperandNotNat(TypeError):
    """The operand of succ, pred or iszero is not a natural number."""

    def __init__(self, term: Term, operand: Term, actual: Type):
        self.operand = operand
        self.actual = actual
        super().__init__(f"Operand {operand} has type {actual}, expected Nat", term)


class TypeMismatch(TypeError):
    """Expected type does not match actual type."""

    def __init__(self, term: Term, expected: Type, actual: Type):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected type {expected}, but got {actual}", term)
