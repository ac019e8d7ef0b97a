"""Primitive polynomials used to construct extension fields GF(p^n).

For GF(2^n) a polynomial is stored as an int whose bit k is set iff the
coefficient of x^k is 1, e.g. x^8 + x^4 + x^3 + x^2 + 1 = 0x11D.
For odd p a polynomial is a coefficient list ``[a_n, ..., a_1, a_0]``.

The table is passed to field constructors explicitly, so a test can
substitute its own ``PrimitivePolynomials`` without touching globals.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple, Union

from galoisfields.errors import UnsupportedFieldError

PolynomialSpec = Union[int, List[int]]

GF2_POLYNOMIALS: Dict[int, int] = {
    2: 0x7,        # x^2 + x + 1
    3: 0xB,        # x^3 + x + 1
    4: 0x13,       # x^4 + x + 1
    5: 0x25,       # x^5 + x^2 + 1
    6: 0x43,       # x^6 + x + 1
    7: 0x89,       # x^7 + x^3 + 1
    8: 0x11D,      # x^8 + x^4 + x^3 + x^2 + 1 (QR codes)
    9: 0x211,      # x^9 + x^4 + 1
    10: 0x409,     # x^10 + x^3 + 1
    11: 0x805,     # x^11 + x^2 + 1
    12: 0x1053,    # x^12 + x^6 + x^4 + x + 1
    13: 0x201B,    # x^13 + x^4 + x^3 + x + 1
    14: 0x4443,    # x^14 + x^10 + x^6 + x + 1
    15: 0x8003,    # x^15 + x + 1
    16: 0x1002D,   # x^16 + x^5 + x^3 + x^2 + 1
}

GF3_POLYNOMIALS: Dict[int, List[int]] = {
    2: [1, 0, 2],
    3: [1, 2, 0, 1],
    4: [1, 0, 0, 2, 2],
    5: [1, 0, 2, 0, 0, 1],
}

GF5_POLYNOMIALS: Dict[int, List[int]] = {
    2: [1, 0, 2],
    3: [1, 0, 1, 2],
}

GF7_POLYNOMIALS: Dict[int, List[int]] = {
    2: [1, 0, 3],
    3: [1, 0, 1, 4],
}


class PrimitivePolynomials:
    """Lookup keyed by ``(prime, exponent)``."""

    def __init__(self, tables: Optional[Mapping[int, Mapping[int, PolynomialSpec]]] = None) -> None:
        if tables is None:
            tables = {
                2: GF2_POLYNOMIALS,
                3: GF3_POLYNOMIALS,
                5: GF5_POLYNOMIALS,
                7: GF7_POLYNOMIALS,
            }
        # prime -> exponent -> polynomial
        self._tables: Dict[int, Dict[int, PolynomialSpec]] = {
            prime: dict(entries) for prime, entries in tables.items()
        }

    def has(self, prime: int, exponent: int) -> bool:
        return exponent in self._tables.get(prime, {})

    def get(self, prime: int, exponent: int) -> Optional[PolynomialSpec]:
        """Return the polynomial for GF(prime^exponent), or None if unavailable."""
        poly = self._tables.get(prime, {}).get(exponent)
        if isinstance(poly, list):
            return list(poly)
        return poly

    def require(self, prime: int, exponent: int) -> PolynomialSpec:
        """Like ``get`` but raise ``UnsupportedFieldError`` when missing."""
        poly = self.get(prime, exponent)
        if poly is None:
            raise UnsupportedFieldError(
                f"No primitive polynomial available for GF({prime}^{exponent})"
            )
        return poly

    def degrees(self, prime: int) -> Tuple[int, ...]:
        """Registered exponents for *prime*, ascending."""
        return tuple(sorted(self._tables.get(prime, {})))


DEFAULT_POLYNOMIALS = PrimitivePolynomials()
