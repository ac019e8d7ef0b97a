"""Field factory: order -> field instance.

    create(7)    -> PrimeField(7)
    create(256)  -> BinaryExtensionField(8)
    create(9)    -> UnsupportedFieldError (GF(3^2) is not constructed)
    create(6)    -> InvalidFieldOrderError
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from galoisfields.config import MIN_ORDER
from galoisfields.errors import InvalidFieldOrderError, UnsupportedFieldError
from galoisfields.field.binary import BinaryExtensionField
from galoisfields.field.prime import PrimeField
from galoisfields.field.primitive import DEFAULT_POLYNOMIALS, PrimitivePolynomials

logger = logging.getLogger(__name__)

Field = Union[PrimeField, BinaryExtensionField]


def create(order: int, polynomials: Optional[PrimitivePolynomials] = None) -> Field:
    """Create GF(*order*).

    Raises ``InvalidFieldOrderError`` when *order* is below 2 or not a
    prime power, and ``UnsupportedFieldError`` for prime powers that
    cannot be built (GF(p^n) with p > 2, or GF(2^n) without a
    registered primitive polynomial).
    """
    if polynomials is None:
        polynomials = DEFAULT_POLYNOMIALS
    if order < MIN_ORDER:
        raise InvalidFieldOrderError.too_small(order)

    prime, exponent = _factorize(order)
    if exponent == 0:
        raise InvalidFieldOrderError.not_prime_power(order)
    logger.debug("order %d = %d^%d", order, prime, exponent)

    if exponent == 1:
        return PrimeField(prime)

    if prime == 2:
        if not polynomials.has(2, exponent):
            degrees = polynomials.degrees(2)
            message = f"GF(2^{exponent}) is not currently supported."
            if degrees:
                message += f" Maximum supported degree is {max(degrees)}."
            raise UnsupportedFieldError(message)
        return BinaryExtensionField(exponent, polynomials)

    raise UnsupportedFieldError(f"GF({prime}^{exponent}) is not currently supported.")


def is_valid_order(order: int) -> bool:
    """True iff *order* is a prime power >= 2."""
    return get_prime_and_exponent(order) is not None


def get_prime_and_exponent(order: int) -> Optional[Tuple[int, int]]:
    """Return ``(p, n)`` with ``order == p**n``, or None."""
    if order < MIN_ORDER:
        return None
    prime, exponent = _factorize(order)
    return (prime, exponent) if exponent > 0 else None


def _factorize(order: int) -> Tuple[int, int]:
    """Trial division; ``(0, 0)`` when *order* is not a prime power."""
    candidate = 2
    while candidate * candidate <= order:
        if order % candidate == 0:
            exponent = 0
            rest = order
            while rest % candidate == 0:
                rest //= candidate
                exponent += 1
            if rest != 1:
                return 0, 0
            return candidate, exponent
        candidate += 1
    # no factor up to sqrt(order): order is prime
    return order, 1
