"""Main entry point for working with Galois fields.

    gf256 = GaloisField(256)   # GF(2^8), QR codes
    gf7 = GaloisField(7)       # prime field
    gf256.multiply(123, 45)

The facade satisfies the field contract itself, so polynomials may be
built directly over a ``GaloisField``.
"""

from __future__ import annotations

from typing import Optional

from galoisfields.errors import NotBinaryFieldError
from galoisfields.field import factory
from galoisfields.field.interface import FieldInfo, describe
from galoisfields.field.primitive import PrimitivePolynomials


class GaloisField:
    """GF(order), backed by the implementation chosen by the factory."""

    __slots__ = ("_field",)

    def __init__(self, order: int, polynomials: Optional[PrimitivePolynomials] = None) -> None:
        object.__setattr__(self, "_field", factory.create(order, polynomials))

    def __setattr__(self, name, value):
        raise AttributeError("GaloisField instances are read-only")

    def __repr__(self) -> str:
        return f"GaloisField({self.order})"

    @property
    def implementation(self) -> factory.Field:
        return self._field

    @property
    def order(self) -> int:
        return self._field.order

    @property
    def characteristic(self) -> int:
        return self._field.characteristic

    @property
    def degree(self) -> int:
        return self._field.degree

    @property
    def is_binary(self) -> bool:
        return self._field.is_binary

    def info(self) -> FieldInfo:
        return describe(self)

    def add(self, a: int, b: int) -> int:
        return self._field.add(a, b)

    def subtract(self, a: int, b: int) -> int:
        return self._field.subtract(a, b)

    def multiply(self, a: int, b: int) -> int:
        return self._field.multiply(a, b)

    def divide(self, a: int, b: int) -> int:
        return self._field.divide(a, b)

    def inverse(self, element: int) -> int:
        return self._field.inverse(element)

    def power(self, element: int, exponent: int) -> int:
        return self._field.power(element, exponent)

    def is_valid_element(self, element: int) -> bool:
        return self._field.is_valid_element(element)

    # ---- GF(2^n) only ----

    def log(self, element: int) -> int:
        return self._binary("log").log(element)

    def exp(self, power: int) -> int:
        return self._binary("exp").exp(power)

    def to_alpha_power(self, element: int) -> str:
        return self._binary("to_alpha_power").to_alpha_power(element)

    def from_alpha_power(self, text: str) -> int:
        return self._binary("from_alpha_power").from_alpha_power(text)

    def _binary(self, method: str):
        if not self._field.is_binary:
            raise NotBinaryFieldError(
                f"{method}() is only available for binary extension fields GF(2^n)"
            )
        return self._field
