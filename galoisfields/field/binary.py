"""Binary extension fields GF(2^n).

Elements are ints whose bits are the coefficients of a polynomial over
GF(2) reduced modulo a primitive polynomial of degree n.  Because the
polynomial is primitive, α = x generates the multiplicative group, so
every nonzero element is α^i for a unique i in [0, 2^n - 1) and

    a * b = α^(log a + log b)      a / b = α^(log a - log b)

Both tables are built once in the constructor and stored as tuples.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field as dc_field
from typing import Optional, Tuple

from galoisfields.config import ALPHA_ASCII_SYMBOL, ALPHA_SYMBOL
from galoisfields.errors import (
    AlphaPowerFormatError,
    FieldDivisionByZeroError,
    InvalidElementError,
    UnsupportedFieldError,
)
from galoisfields.field.primitive import DEFAULT_POLYNOMIALS, PrimitivePolynomials

logger = logging.getLogger(__name__)

_ALPHA_RE = re.compile(
    rf"^(?:{re.escape(ALPHA_SYMBOL)}|{re.escape(ALPHA_ASCII_SYMBOL)})\^([+-]?\d+)$"
)


@dataclass(frozen=True, eq=False)
class BinaryExtensionField:
    """GF(2^degree) backed by discrete-log / exponential tables."""

    degree: int
    polynomials: PrimitivePolynomials = dc_field(default=DEFAULT_POLYNOMIALS, repr=False)

    primitive_polynomial: int = dc_field(init=False)
    # exp_table[i] = α^i for i in [0, order-1]; exp_table[order-1] == 1
    exp_table: Tuple[int, ...] = dc_field(init=False, repr=False)
    # log_table[α^i] = i; index 0 is None (0 is not a power of α)
    log_table: Tuple[Optional[int], ...] = dc_field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.degree < 1:
            raise UnsupportedFieldError(f"GF(2^{self.degree}) is not a field")
        poly = self.polynomials.require(2, self.degree)
        if not isinstance(poly, int):
            raise UnsupportedFieldError(
                "Binary extension fields require integer primitive polynomials"
            )
        object.__setattr__(self, "primitive_polynomial", poly)
        exp, log = _build_tables(self.order, poly)
        object.__setattr__(self, "exp_table", exp)
        object.__setattr__(self, "log_table", log)
        logger.debug("built GF(2^%d) tables with polynomial %#x", self.degree, poly)

    # ---- field contract ----

    @property
    def order(self) -> int:
        return 1 << self.degree

    @property
    def characteristic(self) -> int:
        return 2

    @property
    def is_binary(self) -> bool:
        return True

    def add(self, a: int, b: int) -> int:
        """Addition is XOR."""
        self._check(a, b)
        return a ^ b

    def subtract(self, a: int, b: int) -> int:
        """Same as addition in characteristic 2."""
        self._check(a, b)
        return a ^ b

    def multiply(self, a: int, b: int) -> int:
        self._check(a, b)
        if a == 0 or b == 0:
            return 0
        return self.exp_table[(self.log_table[a] + self.log_table[b]) % (self.order - 1)]

    def divide(self, a: int, b: int) -> int:
        self._check(a, b)
        if b == 0:
            raise FieldDivisionByZeroError("Division by zero in Galois field")
        if a == 0:
            return 0
        diff = self.log_table[a] - self.log_table[b]
        if diff < 0:
            diff += self.order - 1
        return self.exp_table[diff]

    def inverse(self, element: int) -> int:
        """α^i -> α^(order-1-i)."""
        self._check(element)
        if element == 0:
            raise FieldDivisionByZeroError("Zero has no multiplicative inverse")
        return self.exp_table[(self.order - 1) - self.log_table[element]]

    def power(self, element: int, exponent: int) -> int:
        self._check(element)
        if element == 0:
            return 1 if exponent == 0 else 0
        if exponent == 0:
            return 1
        if exponent < 0:
            element = self.inverse(element)
            exponent = -exponent
        return self.exp_table[(self.log_table[element] * exponent) % (self.order - 1)]

    def is_valid_element(self, element: int) -> bool:
        return 0 <= element < self.order

    def _check(self, *elements: int) -> None:
        # log_table is indexed directly
        for e in elements:
            if not 0 <= e < self.order:
                raise InvalidElementError.outside(e, self.order)

    # ---- GF(2^n) only ----

    def log(self, element: int) -> int:
        """Return n such that α^n == element."""
        if element == 0:
            raise ValueError("Logarithm of 0 is undefined")
        if not self.is_valid_element(element):
            raise ValueError(f"{element} is not an element of GF(2^{self.degree})")
        return self.log_table[element]

    def exp(self, power: int) -> int:
        """Return α^power; any int is accepted and reduced mod order-1."""
        return self.exp_table[power % (self.order - 1)]

    def to_alpha_power(self, element: int) -> str:
        """``0`` -> "0", otherwise "α^<log element>" (so 1 -> "α^0")."""
        if not self.is_valid_element(element):
            raise ValueError(f"{element} is not an element of GF(2^{self.degree})")
        if element == 0:
            return "0"
        return f"{ALPHA_SYMBOL}^{self.log_table[element]}"

    def from_alpha_power(self, text: str) -> int:
        """Parse "0", "1" or "α^k" (also "a^k"); k may be any integer."""
        text = text.strip()
        if text == "0":
            return 0
        if text == "1":
            return 1
        match = _ALPHA_RE.match(text)
        if match is None:
            raise AlphaPowerFormatError(f"Invalid alpha power format: {text!r}")
        return self.exp(int(match.group(1)))


def _build_tables(order: int, primitive_polynomial: int) -> Tuple[Tuple[int, ...], Tuple[Optional[int], ...]]:
    exp = [0] * order
    log: list = [None] * order
    cursor = 1
    for rank in range(order - 1):
        exp[rank] = cursor
        log[cursor] = rank
        cursor <<= 1  # multiply by α
        if cursor & order:
            cursor ^= primitive_polynomial
    # α^(order-1) == α^0 == 1
    exp[order - 1] = exp[0]
    return tuple(exp), tuple(log)
