"""Polynomials over a Galois field.

Two flavours share the arithmetic in ``galoisfields.poly.core``:

  ImmutablePolynomial – every operation returns a new polynomial
  Polynomial          – operations overwrite the receiver and return it,
                        so ``p.mul(q).scalar_mul(3)`` chains in place

Coefficients are given highest degree first: ``[a_n, ..., a_0]``.
Leading zeros are always stripped; the zero polynomial has no
coefficients and degree -1.  Operands must be bound to the *same* field
instance.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from galoisfields.field.interface import FieldLike
from galoisfields.poly import core

P = TypeVar("P", bound="PolynomialBase")


class PolynomialBase:
    """Read-only accessors common to both flavours."""

    __slots__ = ("_field", "_coefficients")

    def __init__(self, field: FieldLike, coefficients: Sequence[int] = ()) -> None:
        self._field = field
        self._coefficients = self._store(core.validated(field, coefficients))

    @staticmethod
    def _store(coeffs: List[int]):
        return coeffs

    # ---- constructors ----

    @classmethod
    def from_coefficients(cls, field: FieldLike, coefficients: Sequence[int]):
        return cls(field, coefficients)

    @classmethod
    def zero(cls, field: FieldLike):
        return cls(field, ())

    @classmethod
    def one(cls, field: FieldLike):
        return cls(field, (1,))

    @classmethod
    def constant(cls, field: FieldLike, value: int):
        return cls(field, (value,))

    @classmethod
    def monomial(cls, field: FieldLike, degree: int, coefficient: int = 1):
        """coefficient * x^degree"""
        if degree < 0:
            raise ValueError("Degree must be >= 0")
        return cls(field, [coefficient] + [0] * degree)

    # ---- read-only ----

    @property
    def field(self) -> FieldLike:
        return self._field

    def degree(self) -> int:
        return core.degree(self._coefficients)

    def is_zero(self) -> bool:
        return not self._coefficients

    def leading_coefficient(self) -> int:
        return self._coefficients[0] if self._coefficients else 0

    def coefficient_at(self, degree: int) -> int:
        return core.coefficient_at(self._coefficients, degree)

    def evaluate(self, x: int) -> int:
        return core.evaluate(self._field, self._coefficients, x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolynomialBase):
            return NotImplemented
        return list(self._coefficients) == list(other._coefficients)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._coefficients)})"

    # ---- shared computations (coefficient lists) ----

    def _add(self, other: "PolynomialBase") -> List[int]:
        core.assert_same_field(self._field, other._field)
        return core.add(self._field, self._coefficients, other._coefficients)

    def _sub(self, other: "PolynomialBase") -> List[int]:
        core.assert_same_field(self._field, other._field)
        return core.sub(self._field, self._coefficients, other._coefficients)

    def _mul(self, other: "PolynomialBase") -> List[int]:
        core.assert_same_field(self._field, other._field)
        return core.mul(self._field, self._coefficients, other._coefficients)

    def _scalar_mul(self, scalar: int) -> List[int]:
        return core.scalar_mul(self._field, self._coefficients, scalar)

    def _divmod(self, divisor: "PolynomialBase") -> Tuple[List[int], List[int]]:
        core.assert_same_field(self._field, divisor._field)
        return core.divmod_coefficients(self._field, self._coefficients, divisor._coefficients)


class ImmutablePolynomial(PolynomialBase):
    """Value-semantics polynomial; safe to share between threads."""

    __slots__ = ()

    @staticmethod
    def _store(coeffs: List[int]) -> Tuple[int, ...]:
        return tuple(coeffs)

    def __setattr__(self, name, value):
        if hasattr(self, "_coefficients"):
            raise AttributeError("ImmutablePolynomial is read-only")
        object.__setattr__(self, name, value)

    def __hash__(self) -> int:
        return hash(self._coefficients)

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._coefficients

    def copy(self) -> "ImmutablePolynomial":
        return self

    def add(self, other: PolynomialBase) -> "ImmutablePolynomial":
        return ImmutablePolynomial(self._field, self._add(other))

    def sub(self, other: PolynomialBase) -> "ImmutablePolynomial":
        return ImmutablePolynomial(self._field, self._sub(other))

    def mul(self, other: PolynomialBase) -> "ImmutablePolynomial":
        return ImmutablePolynomial(self._field, self._mul(other))

    def scalar_mul(self, scalar: int) -> "ImmutablePolynomial":
        return ImmutablePolynomial(self._field, self._scalar_mul(scalar))

    def divmod(self, divisor: PolynomialBase) -> Tuple["ImmutablePolynomial", "ImmutablePolynomial"]:
        q, r = self._divmod(divisor)
        return ImmutablePolynomial(self._field, q), ImmutablePolynomial(self._field, r)

    def div(self, divisor: PolynomialBase) -> "ImmutablePolynomial":
        return self.divmod(divisor)[0]

    def mod(self, divisor: PolynomialBase) -> "ImmutablePolynomial":
        return self.divmod(divisor)[1]

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __floordiv__ = div
    __mod__ = mod
    __divmod__ = divmod


class Polynomial(PolynomialBase):
    """Mutable polynomial; arithmetic modifies ``self`` and returns it.

    Not safe for concurrent mutation.
    """

    __slots__ = ()
    __hash__ = None  # type: ignore[assignment]

    @property
    def coefficients(self) -> List[int]:
        return list(self._coefficients)

    def copy(self) -> "Polynomial":
        return Polynomial(self._field, self._coefficients)

    def add(self, other: PolynomialBase) -> "Polynomial":
        self._coefficients = self._add(other)
        return self

    def sub(self, other: PolynomialBase) -> "Polynomial":
        self._coefficients = self._sub(other)
        return self

    def mul(self, other: PolynomialBase) -> "Polynomial":
        self._coefficients = self._mul(other)
        return self

    def scalar_mul(self, scalar: int) -> "Polynomial":
        self._coefficients = self._scalar_mul(scalar)
        return self

    def divmod(self, divisor: PolynomialBase) -> Tuple["Polynomial", "Polynomial"]:
        """Turn ``self`` into the remainder; return ``(quotient, self)``."""
        q, r = self._divmod(divisor)
        self._coefficients = r
        return Polynomial(self._field, q), self

    def div(self, divisor: PolynomialBase) -> "Polynomial":
        self._coefficients = self._divmod(divisor)[0]
        return self

    def mod(self, divisor: PolynomialBase) -> "Polynomial":
        self._coefficients = self._divmod(divisor)[1]
        return self

    def set_coefficients(self, coefficients: Sequence[int]) -> "Polynomial":
        self._coefficients = core.validated(self._field, coefficients)
        return self

    def set_coefficient_at(self, degree: int, value: int) -> "Polynomial":
        """Set the coefficient of x^degree, growing the polynomial if needed."""
        if degree < 0:
            raise ValueError("Degree must be >= 0")
        core.check_elements(self._field, (value,))
        coeffs = list(self._coefficients)
        if degree > len(coeffs) - 1:
            coeffs = [0] * (degree + 1 - len(coeffs)) + coeffs
        coeffs[len(coeffs) - 1 - degree] = value
        self._coefficients = core.normalize(coeffs)
        return self

    __iadd__ = add
    __isub__ = sub
    __imul__ = mul
