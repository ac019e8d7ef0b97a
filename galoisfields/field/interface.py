"""The field contract shared by every field kind.

A field is anything exposing ``order``, ``characteristic``, ``degree``,
``is_binary`` and the element operations below.  Elements are plain
ints in ``[0, order)``.  Two kinds exist:

  PrimeField            – GF(p), modular arithmetic
  BinaryExtensionField  – GF(2^n), log / exp tables

Only binary fields provide ``log``, ``exp``, ``to_alpha_power`` and
``from_alpha_power``; callers check ``is_binary`` first.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class FieldLike(Protocol):
    """Capability interface implemented by every field kind."""

    @property
    def order(self) -> int: ...

    @property
    def characteristic(self) -> int: ...

    @property
    def degree(self) -> int: ...

    @property
    def is_binary(self) -> bool: ...

    def add(self, a: int, b: int) -> int: ...

    def subtract(self, a: int, b: int) -> int: ...

    def multiply(self, a: int, b: int) -> int: ...

    def divide(self, a: int, b: int) -> int: ...

    def inverse(self, element: int) -> int: ...

    def power(self, element: int, exponent: int) -> int: ...

    def is_valid_element(self, element: int) -> bool: ...


class FieldInfo(BaseModel):
    """Summary of a field, e.g. ``GF(2^8)``."""

    order: int
    characteristic: int
    degree: int
    notation: str
    binary: bool = False


def describe(field: FieldLike) -> FieldInfo:
    """Build a ``FieldInfo`` for *field*."""
    return FieldInfo(
        order=field.order,
        characteristic=field.characteristic,
        degree=field.degree,
        notation=f"GF({field.characteristic}^{field.degree})",
        binary=field.is_binary,
    )
