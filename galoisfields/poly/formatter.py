"""Human-readable polynomial text.

    to_string([5, 3, 7])        -> "5x^2 + 3x + 7"
    to_string([1, 0, 1])        -> "x^2 + 1"
    to_alpha_string([2, 4, 1])  -> "α^1x^2 + α^2x + α^0"   (GF(2^n) only)
"""

from __future__ import annotations

from typing import Callable, List

from galoisfields.errors import NotBinaryFieldError
from galoisfields.poly.polynomial import PolynomialBase


def to_string(p: PolynomialBase) -> str:
    return _render(p, str)


def to_alpha_string(p: PolynomialBase) -> str:
    if p.is_zero():
        return "0"
    if not p.field.is_binary:
        raise NotBinaryFieldError("to_alpha_string() requires a binary extension field GF(2^n)")
    return _render(p, p.field.to_alpha_power)


def _render(p: PolynomialBase, coeff_text: Callable[[int], str]) -> str:
    if p.is_zero():
        return "0"
    terms: List[str] = []
    for degree in range(p.degree(), -1, -1):
        coeff = p.coefficient_at(degree)
        if coeff == 0:
            continue
        terms.append(_format_term(coeff_text(coeff), degree))
    return " + ".join(terms)


def _format_term(coeff: str, degree: int) -> str:
    if degree == 0:
        return coeff
    x = "x" if degree == 1 else f"x^{degree}"
    return x if coeff == "1" else f"{coeff}{x}"
