"""Typed arithmetic expressions: evaluation, typing and their soundness."""

from arith.core import (
    BOOL,
    FALSE,
    NAT,
    TRUE,
    ZERO,
    If,
    IsZero,
    Pred,
    Succ,
    Term,
    Type,
    TypeChecker,
    is_value,
    nat,
    type_of,
    type_or_error,
    typecheck,
)
from arith.eval import Evaluator, StepLimitExceeded, big_step, is_stuck, multistep, normalize, step

__all__ = [
    "BOOL",
    "NAT",
    "TRUE",
    "FALSE",
    "ZERO",
    "If",
    "IsZero",
    "Pred",
    "Succ",
    "Term",
    "Type",
    "TypeChecker",
    "is_value",
    "nat",
    "type_of",
    "typecheck",
    "type_or_error",
    "Evaluator",
    "StepLimitExceeded",
    "big_step",
    "is_stuck",
    "multistep",
    "normalize",
    "step",
]
