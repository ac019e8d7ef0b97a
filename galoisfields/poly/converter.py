"""Binary codeword strings <-> polynomials over GF(2^n).

The codeword width is the field degree (8 bits for GF(256), 4 for
GF(16), ...).  The first codeword is the highest-degree coefficient,
as in QR / Reed-Solomon:

    codewords [c0, c1, ..., cn]  ->  c0*x^n + c1*x^(n-1) + ... + cn

Leading zero codewords do not survive a round trip because polynomials
are normalized: '0000000010110101' -> 181 -> '10110101'.
"""

from __future__ import annotations

from galoisfields.errors import NotBinaryFieldError
from galoisfields.field.interface import FieldLike
from galoisfields.poly import core
from galoisfields.poly.polynomial import ImmutablePolynomial, PolynomialBase


class PolynomialConverter:
    """Codeword conversion for one binary extension field."""

    def __init__(self, field: FieldLike) -> None:
        if not field.is_binary:
            raise NotBinaryFieldError(
                "PolynomialConverter requires a binary extension field GF(2^n)"
            )
        self.field = field
        self.width = field.degree

    def from_binary_string(self, binary: str) -> ImmutablePolynomial:
        """Build a polynomial from e.g. '1011010100110010' (181x + 50 in GF(256))."""
        length = len(binary)
        if length % self.width != 0:
            raise ValueError(
                f"Bit string length ({length}) is not a multiple of codeword "
                f"width ({self.width}, derived from field degree)"
            )
        if binary.strip("01"):
            raise ValueError("Bit string may only contain '0' and '1'")
        coefficients = [
            int(binary[i:i + self.width], 2)
            for i in range(0, length, self.width)
        ]
        return ImmutablePolynomial(self.field, coefficients)

    def to_binary_string(self, polynomial: PolynomialBase) -> str:
        """Each coefficient zero-padded to the codeword width, highest degree first."""
        core.assert_same_field(self.field, polynomial.field)
        return "".join(
            format(polynomial.coefficient_at(d), f"0{self.width}b")
            for d in range(polynomial.degree(), -1, -1)
        )

    def from_bytes(self, data: bytes) -> ImmutablePolynomial:
        """One byte per codeword; GF(2^8) only."""
        self._require_byte_width()
        return ImmutablePolynomial(self.field, list(data))

    def to_bytes(self, polynomial: PolynomialBase) -> bytes:
        self._require_byte_width()
        core.assert_same_field(self.field, polynomial.field)
        return bytes(
            polynomial.coefficient_at(d) for d in range(polynomial.degree(), -1, -1)
        )

    def _require_byte_width(self) -> None:
        if self.width != 8:
            raise ValueError(f"Byte conversion needs 8-bit codewords, field has {self.width}")
