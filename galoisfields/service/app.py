"""FastAPI application exposing field and polynomial arithmetic.

Endpoints (all JSON):

  GET  /fields/{order}                  – field summary
  POST /fields/{order}/element          – element arithmetic
  POST /fields/{order}/alpha            – int <-> "α^k" (GF(2^n) only)
  POST /fields/{order}/poly/{op}        – evaluate | divmod | gcd |
                                          derivative | interpolate | format
  POST /fields/{order}/codeword/{op}    – encode | decode (GF(2^n) only)

Polynomials travel as coefficient lists, highest degree first.  Domain
errors (bad order, division by zero, malformed input) become 400s.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from galoisfields.config import MAX_CACHED_FIELDS, MAX_ORDER
from galoisfields.errors import (
    AlphaPowerFormatError,
    FieldDivisionByZeroError,
    FieldMismatchError,
    InvalidElementError,
    InvalidFieldOrderError,
    NotBinaryFieldError,
    PolynomialDivisionByZeroError,
    UnsupportedFieldError,
)
from galoisfields.field.interface import FieldInfo
from galoisfields.galois_field import GaloisField
from galoisfields.poly import formatter
from galoisfields.poly.arithmetic import PolynomialArithmetic
from galoisfields.poly.converter import PolynomialConverter
from galoisfields.poly.polynomial import ImmutablePolynomial

logger = logging.getLogger(__name__)

_DOMAIN_ERRORS = (
    AlphaPowerFormatError,
    FieldDivisionByZeroError,
    FieldMismatchError,
    InvalidElementError,
    InvalidFieldOrderError,
    NotBinaryFieldError,
    PolynomialDivisionByZeroError,
    UnsupportedFieldError,
    ValueError,
)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


class FieldRegistry:
    """Up to *capacity* ``GaloisField`` instances keyed by order, built on first use.

    Sharing the instance keeps every polynomial of a given order bound
    to the same field, and builds the GF(2^n) tables only once.  Orders
    above *max_order* are refused before any factorization; when full,
    the least recently built field is dropped.
    """

    def __init__(self, max_order: int = MAX_ORDER, capacity: int = MAX_CACHED_FIELDS) -> None:
        self.max_order = max_order
        self.capacity = capacity
        self._fields: Dict[int, GaloisField] = {}
        self._lock = threading.Lock()

    def get(self, order: int) -> GaloisField:
        if order > self.max_order:
            raise InvalidFieldOrderError.too_large(order, self.max_order)
        with self._lock:
            gf = self._fields.get(order)
            if gf is None:
                gf = GaloisField(order)
                if len(self._fields) >= self.capacity:
                    evicted = next(iter(self._fields))
                    del self._fields[evicted]
                    logger.debug("evicted GF(%d)", evicted)
                self._fields[order] = gf
                logger.debug("registered %r", gf)
            return gf

    def orders(self) -> List[int]:
        with self._lock:
            return sorted(self._fields)


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class ElementRequest(BaseModel):
    op: str  # "add" | "sub" | "mul" | "div" | "inv" | "pow"
    a: int
    b: int = 0


class ElementResponse(BaseModel):
    result: int


class AlphaRequest(BaseModel):
    element: Optional[int] = None
    alpha: Optional[str] = None


class AlphaResponse(BaseModel):
    element: int
    alpha: str
    log: Optional[int] = None


class PolyRequest(BaseModel):
    coefficients: List[int] = []
    other: List[int] = []
    points: List[int] = []
    xs: List[int] = []
    ys: List[int] = []
    alpha: bool = False


class PolyResponse(BaseModel):
    coefficients: List[int] = []
    quotient: Optional[List[int]] = None
    remainder: Optional[List[int]] = None
    values: Optional[List[int]] = None
    text: Optional[str] = None


class CodewordRequest(BaseModel):
    coefficients: List[int] = []
    bits: str = ""


class CodewordResponse(BaseModel):
    coefficients: List[int]
    bits: str


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------


def create_app(registry: Optional[FieldRegistry] = None) -> FastAPI:
    """Build a service app bound to *registry* (a fresh one by default)."""
    if registry is None:
        registry = FieldRegistry()

    app = FastAPI(title="Galois Fields")
    logger.debug("service created, %d field(s) preloaded", len(registry.orders()))

    def _field(order: int) -> GaloisField:
        try:
            return registry.get(order)
        except (InvalidFieldOrderError, UnsupportedFieldError) as exc:
            raise HTTPException(400, str(exc))

    def _check_elements(gf: GaloisField, values: List[int]) -> None:
        for v in values:
            if not gf.is_valid_element(v):
                raise HTTPException(400, f"{v} is not an element of GF({gf.order})")

    @app.get("/fields/{order}", response_model=FieldInfo)
    def field_info(order: int):
        return _field(order).info()

    @app.post("/fields/{order}/element", response_model=ElementResponse)
    def element(order: int, req: ElementRequest):
        gf = _field(order)
        operands = [req.a] if req.op == "pow" else [req.a, req.b]
        _check_elements(gf, operands)
        ops = {
            "add": lambda: gf.add(req.a, req.b),
            "sub": lambda: gf.subtract(req.a, req.b),
            "mul": lambda: gf.multiply(req.a, req.b),
            "div": lambda: gf.divide(req.a, req.b),
            "inv": lambda: gf.inverse(req.a),
            "pow": lambda: gf.power(req.a, req.b),
        }
        if req.op not in ops:
            raise HTTPException(400, f"Unknown element operation '{req.op}'")
        try:
            return ElementResponse(result=ops[req.op]())
        except _DOMAIN_ERRORS as exc:
            raise HTTPException(400, str(exc))

    @app.post("/fields/{order}/alpha", response_model=AlphaResponse)
    def alpha(order: int, req: AlphaRequest):
        gf = _field(order)
        try:
            if req.alpha is not None:
                value = gf.from_alpha_power(req.alpha)
            elif req.element is not None:
                value = req.element
            else:
                raise HTTPException(400, "Provide 'element' or 'alpha'")
            text = gf.to_alpha_power(value)
            log = gf.log(value) if value != 0 else None
        except _DOMAIN_ERRORS as exc:
            raise HTTPException(400, str(exc))
        return AlphaResponse(element=value, alpha=text, log=log)

    @app.post("/fields/{order}/poly/{op}", response_model=PolyResponse)
    def poly(order: int, op: str, req: PolyRequest):
        gf = _field(order)
        _check_elements(gf, req.coefficients + req.other + req.points + req.xs + req.ys)
        arith = PolynomialArithmetic(gf)
        p = ImmutablePolynomial(gf, req.coefficients)
        q = ImmutablePolynomial(gf, req.other)
        try:
            if op == "evaluate":
                return PolyResponse(
                    coefficients=list(p.coefficients),
                    values=arith.multi_evaluate(p, req.points),
                )
            if op == "divmod":
                quotient, remainder = p.divmod(q)
                return PolyResponse(
                    coefficients=list(p.coefficients),
                    quotient=list(quotient.coefficients),
                    remainder=list(remainder.coefficients),
                )
            if op == "gcd":
                return PolyResponse(coefficients=list(arith.gcd(p, q).coefficients))
            if op == "derivative":
                return PolyResponse(coefficients=list(arith.derivative(p).coefficients))
            if op == "interpolate":
                result = arith.interpolate(req.xs, req.ys)
                return PolyResponse(coefficients=list(result.coefficients))
            if op == "format":
                text = formatter.to_alpha_string(p) if req.alpha else formatter.to_string(p)
                return PolyResponse(coefficients=list(p.coefficients), text=text)
        except _DOMAIN_ERRORS as exc:
            raise HTTPException(400, str(exc))
        raise HTTPException(404, f"Unknown polynomial operation '{op}'")

    @app.post("/fields/{order}/codeword/{op}", response_model=CodewordResponse)
    def codeword(order: int, op: str, req: CodewordRequest):
        gf = _field(order)
        try:
            converter = PolynomialConverter(gf)
            if op == "encode":
                _check_elements(gf, req.coefficients)
                p = ImmutablePolynomial(gf, req.coefficients)
            elif op == "decode":
                p = converter.from_binary_string(req.bits)
            else:
                raise HTTPException(404, f"Unknown codeword operation '{op}'")
            return CodewordResponse(
                coefficients=list(p.coefficients),
                bits=converter.to_binary_string(p),
            )
        except _DOMAIN_ERRORS as exc:
            raise HTTPException(400, str(exc))

    return app


app = create_app()
