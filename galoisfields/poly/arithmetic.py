"""Higher-level polynomial algorithms over a Galois field.

All results are ``ImmutablePolynomial`` instances bound to the field
the service was created with.  Inputs of either flavour are accepted
and never modified.
"""

from __future__ import annotations

from typing import List, Sequence

from galoisfields.field.interface import FieldLike
from galoisfields.poly import core
from galoisfields.poly.polynomial import ImmutablePolynomial, PolynomialBase


class PolynomialArithmetic:
    """GCD, interpolation, multi-point evaluation and derivative."""

    def __init__(self, field: FieldLike) -> None:
        self.field = field

    def _own(self, p: PolynomialBase) -> ImmutablePolynomial:
        """Immutable copy of *p*, which must belong to this field."""
        core.assert_same_field(self.field, p.field)
        return ImmutablePolynomial(self.field, p.coefficients)

    def gcd(self, a: PolynomialBase, b: PolynomialBase) -> ImmutablePolynomial:
        """Monic greatest common divisor (zero only if both inputs are zero)."""
        a = self._own(a)
        b = self._own(b)
        while not b.is_zero():
            a, b = b, a.mod(b)
        if not a.is_zero() and a.leading_coefficient() != 1:
            a = a.scalar_mul(self.field.inverse(a.leading_coefficient()))
        return a

    def are_coprime(self, a: PolynomialBase, b: PolynomialBase) -> bool:
        return self.gcd(a, b).degree() == 0

    def multi_evaluate(self, polynomial: PolynomialBase, points: Sequence[int]) -> List[int]:
        """Evaluate at each point; results keep the order of *points*."""
        return [polynomial.evaluate(x) for x in points]

    def interpolate(self, xs: Sequence[int], ys: Sequence[int]) -> ImmutablePolynomial:
        """Lagrange interpolation through the points ``(xs[i], ys[i])``.

        Returns the unique polynomial of degree < len(xs) taking value
        ``ys[i]`` at ``xs[i]``.  The x-coordinates must be distinct.
        """
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have the same length")
        n = len(xs)
        if n == 0:
            return ImmutablePolynomial.zero(self.field)
        if len(set(xs)) != n:
            raise ValueError("xs must contain unique values")

        f = self.field
        result = ImmutablePolynomial.zero(f)
        for i in range(n):
            if ys[i] == 0:
                continue
            basis = ImmutablePolynomial.one(f)
            denominator = 1
            for j in range(n):
                if j == i:
                    continue
                # basis *= (x - x_j)
                basis = basis.mul(ImmutablePolynomial(f, [1, f.subtract(0, xs[j])]))
                # denominator *= (x_i - x_j)
                denominator = f.multiply(denominator, f.subtract(xs[i], xs[j]))
            scale = f.divide(ys[i], denominator)
            result = result.add(basis.scalar_mul(scale))
        return result

    def derivative(self, polynomial: PolynomialBase) -> ImmutablePolynomial:
        """Formal derivative: d/dx x^i = (i mod p) * x^(i-1).

        In characteristic 2 every even-degree term vanishes.
        """
        p = self._own(polynomial)
        if p.degree() <= 0:
            return ImmutablePolynomial.zero(self.field)

        f = self.field
        characteristic = f.characteristic
        coefficients = []
        for i in range(p.degree(), 0, -1):
            coeff = p.coefficient_at(i)
            # (i mod p) * coeff as repeated field addition
            derived = 0
            for _ in range(i % characteristic):
                derived = f.add(derived, coeff)
            coefficients.append(derived)
        return ImmutablePolynomial(f, coefficients)
