"""Put-call parity checks for European prices."""

from __future__ import annotations

import numpy as np


def parity_forward_value(
    *, S: float, K: float, T: float, r: float = 0.0, q: float = 0.0
) -> float:
    """Right-hand side of put-call parity, ``S e^{-qT} - K e^{-rT}``."""
    return float(S * np.exp(-q * T) - K * np.exp(-r * T))


def put_call_parity_residual(
    *,
    call: float,
    put: float,
    S: float,
    K: float,
    T: float,
    r: float = 0.0,
    q: float = 0.0,
) -> float:
    """Residual ``(C - P) - (S e^{-qT} - K e^{-rT})``.

    Should be ~0 for European prices under consistent inputs; for lattice
    prices it shrinks with the number of steps.
    """
    return (call - put) - parity_forward_value(S=S, K=K, T=T, r=r, q=q)
