"""Coefficient arithmetic shared by both polynomial types.

Coefficients are lists ordered from the highest degree down to the
constant term: ``[a_n, ..., a_1, a_0]``.  The zero polynomial is ``[]``.
Every function returns a fresh, normalized list and leaves its inputs
untouched.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from galoisfields.errors import (
    FieldMismatchError,
    InvalidElementError,
    PolynomialDivisionByZeroError,
)
from galoisfields.field.interface import FieldLike

Coefficients = List[int]


def normalize(coeffs: Sequence[int]) -> Coefficients:
    """Strip leading zero coefficients."""
    start = 0
    while start < len(coeffs) and coeffs[start] == 0:
        start += 1
    return list(coeffs[start:])


def check_elements(field: FieldLike, values: Sequence[int]) -> None:
    for v in values:
        if not field.is_valid_element(v):
            raise InvalidElementError.outside(v, field.order)


def validated(field: FieldLike, coeffs: Sequence[int]) -> Coefficients:
    """Normalized copy of *coeffs*; every entry must be an element of *field*."""
    check_elements(field, coeffs)
    return normalize(coeffs)


def degree(coeffs: Sequence[int]) -> int:
    return len(coeffs) - 1


def coefficient_at(coeffs: Sequence[int], deg: int) -> int:
    """Coefficient of x^deg, 0 outside ``[0, degree]``."""
    if deg < 0 or deg > len(coeffs) - 1:
        return 0
    return coeffs[len(coeffs) - 1 - deg]


def assert_same_field(field: FieldLike, other: FieldLike) -> None:
    if field is not other:
        raise FieldMismatchError("Cannot operate on polynomials over different fields")


def evaluate(field: FieldLike, coeffs: Sequence[int], x: int) -> int:
    """Horner: ((a_n * x + a_(n-1)) * x + ...) * x + a_0."""
    result = 0
    for c in coeffs:
        result = field.add(field.multiply(result, x), c)
    return result


def add(field: FieldLike, a: Sequence[int], b: Sequence[int]) -> Coefficients:
    top = max(degree(a), degree(b))
    return normalize([
        field.add(coefficient_at(a, d), coefficient_at(b, d))
        for d in range(top, -1, -1)
    ])


def sub(field: FieldLike, a: Sequence[int], b: Sequence[int]) -> Coefficients:
    top = max(degree(a), degree(b))
    return normalize([
        field.subtract(coefficient_at(a, d), coefficient_at(b, d))
        for d in range(top, -1, -1)
    ])


def mul(field: FieldLike, a: Sequence[int], b: Sequence[int]) -> Coefficients:
    if not a or not b:
        return []
    result = [0] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        for j, bj in enumerate(b):
            result[i + j] = field.add(result[i + j], field.multiply(ai, bj))
    return normalize(result)


def scalar_mul(field: FieldLike, a: Sequence[int], scalar: int) -> Coefficients:
    if scalar == 0:
        return []
    return normalize([field.multiply(c, scalar) for c in a])


def divmod_coefficients(
    field: FieldLike,
    dividend: Sequence[int],
    divisor: Sequence[int],
) -> Tuple[Coefficients, Coefficients]:
    """Polynomial long division; returns ``(quotient, remainder)``."""
    divisor = normalize(divisor)
    if not divisor:
        raise PolynomialDivisionByZeroError("Division by zero polynomial")

    remainder = normalize(dividend)
    divisor_degree = degree(divisor)
    if degree(remainder) < divisor_degree:
        return [], remainder

    quotient_size = degree(remainder) - divisor_degree + 1
    quotient = [0] * quotient_size
    lead = divisor[0]

    while remainder and degree(remainder) >= divisor_degree:
        term = field.divide(remainder[0], lead)
        diff = degree(remainder) - divisor_degree
        quotient[quotient_size - 1 - diff] = term
        # subtract term * x^diff * divisor, aligned at the leading coefficient
        for i, d in enumerate(divisor):
            remainder[i] = field.subtract(remainder[i], field.multiply(term, d))
        remainder = normalize(remainder)

    return normalize(quotient), remainder
