"""Type representations for typed arithmetic expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class Type:
    """Base class for types."""

    pass


@dataclass(frozen=True)
class BoolType(Type):
    """The type of boolean terms."""

    def __str__(self) -> str:
        return "Bool"


@dataclass(frozen=True)
class NatType(Type):
    """The type of natural-number terms."""

    def __str__(self) -> str:
        return "Nat"


BOOL = BoolType()
NAT = NatType()


# Export the type union for type checking
TypeRepr = Union[BoolType, NatType]
