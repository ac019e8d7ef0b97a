#!/usr/bin/env python3
"""Galois field service demo.

Usage (with the service running, e.g. ``uvicorn galoisfields.service.app:app``):
    python -m galoisfields.demo.run_demo

The script:
1. Fetches the description of GF(256) and GF(7).
2. Multiplies, divides and inverts elements.
3. Shows the alpha-power form of a few GF(256) elements.
4. Divides two polynomials and checks q*d + r == n locally.
5. Recovers a polynomial from its evaluations (Lagrange interpolation).
6. Encodes a polynomial as 8-bit codewords and decodes it back.
7. Shows the error returned for an invalid order.
"""

from __future__ import annotations

import logging
import sys

import httpx

from galoisfields.config import DEFAULT_ORDER, SERVICE_URL
from galoisfields.galois_field import GaloisField
from galoisfields.poly.polynomial import ImmutablePolynomial

logger = logging.getLogger("galoisfields.demo")


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main(base_url: str = SERVICE_URL, order: int = DEFAULT_ORDER) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    client = httpx.Client(base_url=base_url, timeout=15.0)
    logger.info("using service at %s", base_url)

    # ---- 1. Field info ----
    banner("1) Field info")
    for q in (order, 7):
        resp = client.get(f"/fields/{q}")
        resp.raise_for_status()
        info = resp.json()
        print(f"   GF({q}) = {info['notation']}  binary={info['binary']}")

    # ---- 2. Element arithmetic ----
    banner(f"2) Element arithmetic in GF({order})")
    for op, a, b in [("mul", 2, 3), ("mul", 53, 45), ("div", 6, 3), ("inv", 123, 0), ("pow", 2, 255)]:
        resp = client.post(f"/fields/{order}/element", json={"op": op, "a": a, "b": b})
        resp.raise_for_status()
        print(f"   {op}({a}, {b}) = {resp.json()['result']}")

    resp = client.post(f"/fields/{order}/element", json={"op": "div", "a": 5, "b": 0})
    print(f"   div(5, 0) → HTTP {resp.status_code}: {resp.json()['detail']}")

    # ---- 3. Alpha powers ----
    banner("3) Alpha-power notation")
    for element in (0, 1, 2, 3, 255):
        resp = client.post(f"/fields/{order}/alpha", json={"element": element})
        resp.raise_for_status()
        print(f"   {element:3d} = {resp.json()['alpha']}")
    resp = client.post(f"/fields/{order}/alpha", json={"alpha": "α^-1"})
    resp.raise_for_status()
    print(f"   α^-1 = {resp.json()['element']}")

    # ---- 4. Polynomial division ----
    banner("4) Polynomial long division")
    n, d = [1, 5, 3, 7], [1, 2]
    resp = client.post(f"/fields/{order}/poly/divmod", json={"coefficients": n, "other": d})
    resp.raise_for_status()
    body = resp.json()
    print(f"   quotient  = {body['quotient']}")
    print(f"   remainder = {body['remainder']}")
    gf = GaloisField(order)
    check = (
        ImmutablePolynomial(gf, body["quotient"]) * ImmutablePolynomial(gf, d)
        + ImmutablePolynomial(gf, body["remainder"])
    )
    mark = "✓" if check == ImmutablePolynomial(gf, n) else "✗"
    print(f"   q*d + r == n  {mark}")

    # ---- 5. Interpolation ----
    banner("5) Lagrange interpolation")
    xs = [1, 2, 3, 4]
    resp = client.post(f"/fields/{order}/poly/evaluate", json={"coefficients": n, "points": xs})
    resp.raise_for_status()
    ys = resp.json()["values"]
    print(f"   p({xs}) = {ys}")
    resp = client.post(f"/fields/{order}/poly/interpolate", json={"xs": xs, "ys": ys})
    resp.raise_for_status()
    recovered = resp.json()["coefficients"]
    mark = "✓" if recovered == n else "✗"
    print(f"   recovered {recovered} {mark}")

    # ---- 6. Codewords ----
    banner("6) Codeword conversion")
    resp = client.post(f"/fields/{order}/codeword/encode", json={"coefficients": [181, 50]})
    resp.raise_for_status()
    bits = resp.json()["bits"]
    print(f"   [181, 50] → {bits}")
    resp = client.post(f"/fields/{order}/codeword/decode", json={"bits": bits})
    resp.raise_for_status()
    print(f"   {bits} → {resp.json()['coefficients']}")

    # ---- 7. Invalid order ----
    banner("7) Invalid order")
    resp = client.get("/fields/6")
    print(f"   GF(6) → HTTP {resp.status_code}: {resp.json()['detail']}")

    banner("DEMO COMPLETE")
    client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
