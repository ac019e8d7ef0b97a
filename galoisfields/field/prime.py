"""Prime-field arithmetic GF(p).

All values are Python ints in ``[0, p)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from galoisfields.errors import FieldDivisionByZeroError


@dataclass(frozen=True, eq=False)
class PrimeField:
    """GF(p) for a prime *p*.

    Instances are frozen and compare by identity: two ``PrimeField(7)``
    objects are distinct fields as far as polynomials are concerned.
    """

    prime: int

    @property
    def order(self) -> int:
        return self.prime

    @property
    def characteristic(self) -> int:
        return self.prime

    @property
    def degree(self) -> int:
        return 1

    @property
    def is_binary(self) -> bool:
        return False

    def add(self, a: int, b: int) -> int:
        """Field addition."""
        return (a + b) % self.prime

    def subtract(self, a: int, b: int) -> int:
        """Field subtraction."""
        return (a - b) % self.prime

    def multiply(self, a: int, b: int) -> int:
        """Field multiplication."""
        return (a * b) % self.prime

    def divide(self, a: int, b: int) -> int:
        if b == 0:
            raise FieldDivisionByZeroError("Division by zero in Galois field")
        return self.multiply(a, self.inverse(b))

    def inverse(self, element: int) -> int:
        """Multiplicative inverse via the extended Euclidean algorithm."""
        if element == 0:
            raise FieldDivisionByZeroError("Zero has no multiplicative inverse")
        return _mod_inverse(element, self.prime)

    def power(self, element: int, exponent: int) -> int:
        """Square-and-multiply; a negative exponent inverts the base first."""
        if exponent < 0:
            element = self.inverse(element)
            exponent = -exponent

        result = 1 % self.prime
        base = element % self.prime
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % self.prime
            base = (base * base) % self.prime
            exponent >>= 1
        return result

    def is_valid_element(self, element: int) -> bool:
        return 0 <= element < self.prime


def _mod_inverse(a: int, m: int) -> int:
    """Return x in [1, m) with a*x ≡ 1 (mod m)."""
    if m == 1:
        return 0
    a %= m
    lm, hm = 1, 0
    low, high = a, m
    while low > 1:
        r = high // low
        lm, hm = hm - lm * r, lm
        low, high = high - low * r, low
    if lm < 0:
        lm += m
    return lm
