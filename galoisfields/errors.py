"""Exceptions raised by the field and polynomial engine."""

from __future__ import annotations


class InvalidFieldOrderError(ValueError):
    """Raised when a requested order cannot be the size of a finite field."""

    @classmethod
    def not_prime_power(cls, order: int) -> "InvalidFieldOrderError":
        return cls(
            f"Field order {order} is not a prime power. "
            "GF(q) only exists when q = p^n for prime p."
        )

    @classmethod
    def too_small(cls, order: int) -> "InvalidFieldOrderError":
        return cls(f"Field order {order} is too small. Minimum order is 2.")

    @classmethod
    def too_large(cls, order: int, limit: int) -> "InvalidFieldOrderError":
        return cls(f"Field order {order} is too large. Maximum order is {limit}.")


class UnsupportedFieldError(ValueError):
    """Raised when a valid prime-power order cannot be constructed."""


class FieldDivisionByZeroError(ZeroDivisionError):
    """Raised on division by, or inversion of, the zero element."""


class PolynomialDivisionByZeroError(ZeroDivisionError):
    """Raised when dividing by the zero polynomial."""


class FieldMismatchError(ValueError):
    """Raised when polynomials over different field instances are combined."""


class AlphaPowerFormatError(ValueError):
    """Raised when an alpha-power string cannot be parsed."""


class NotBinaryFieldError(TypeError):
    """Raised when a GF(2^n)-only operation is used on another field."""


class InvalidElementError(ValueError):
    """Raised when a value outside ``[0, order)`` is used as a field element."""

    @classmethod
    def outside(cls, element: int, order: int) -> "InvalidElementError":
        return cls(f"{element} is not an element of GF({order})")
