"""Global configuration for galoisfields."""

import os

# ---------- Field orders ----------
# GF(q) exists only for q = p^n; the smallest field is GF(2).
MIN_ORDER = 2

# Order used by the demo and by the service when none is given.
DEFAULT_ORDER = int(os.environ.get("GALOISFIELDS_DEFAULT_ORDER", "256"))

# ---------- Alpha-power notation ----------
ALPHA_SYMBOL = "α"
ALPHA_ASCII_SYMBOL = "a"  # accepted on input only

# ---------- Service ----------
# Base URL of a running service (used by the demo client).
SERVICE_URL = os.environ.get("GALOISFIELDS_SERVICE_URL", "http://localhost:8000")

# Largest order the service will construct; factorization is O(sqrt(order)).
MAX_ORDER = int(os.environ.get("GALOISFIELDS_MAX_ORDER", str(2**31)))

# Fields kept by the service registry; the oldest is dropped beyond this.
MAX_CACHED_FIELDS = int(os.environ.get("GALOISFIELDS_MAX_CACHED_FIELDS", "64"))
