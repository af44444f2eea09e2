"""Core language: AST, types, and type checker."""

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
    as_int,
    boolean,
    consts,
    depth,
    is_boolean_value,
    is_numeric_value,
    is_value,
    nat,
    size,
    subterms,
)
from arith.core.checker import TypeChecker, is_well_typed, type_of, type_or_error, typecheck
from arith.core.errors import (
    BranchTypeMismatch,
    ConditionNotBool,
    OperandNotNat,
    TypeError,
    TypeMismatch,
)
from arith.core.types import BOOL, NAT, BoolType, NatType, Type

__all__ = [
    # AST
    "Term",
    "TrueLit",
    "FalseLit",
    "If",
    "Zero",
    "Succ",
    "Pred",
    "IsZero",
    "TRUE",
    "FALSE",
    "ZERO",
    "boolean",
    "nat",
    "as_int",
    # Values
    "is_boolean_value",
    "is_numeric_value",
    "is_value",
    # Measures
    "size",
    "depth",
    "consts",
    "subterms",
    # Types
    "Type",
    "BoolType",
    "NatType",
    "BOOL",
    "NAT",
    # Errors
    "TypeError",
    "ConditionNotBool",
    "BranchTypeMismatch",
    "OperandNotNat",
    "TypeMismatch",
    # Type Checker
    "TypeChecker",
    "type_of",
    "typecheck",
    "type_or_error",
    "is_well_typed",
]
