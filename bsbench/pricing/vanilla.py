# bsbench/pricing/vanilla.py
from __future__ import annotations

from math import erf, exp, log10, sqrt

import numpy as np
import scipy.special as sc
from numba import njit

__all__ = ["cndf", "cndf_array", "bs_put"]

# error_model="numpy": x/0 gives inf/nan instead of ZeroDivisionError
_JIT = dict(nogil=True, error_model="numpy")


@njit(**_JIT)
def cndf(x: float) -> float:
    """Standard normal CDF (via error function)."""
    return 0.5 + 0.5 * erf(x / sqrt(2.0))


def cndf_array(x: np.ndarray) -> np.ndarray:
    """Vectorized standard normal CDF over an array."""
    x = np.asarray(x, dtype=float)
    return 0.5 + 0.5 * sc.erf(x / np.sqrt(2.0))


@njit(**_JIT)
def bs_put(sptprice: float, strike: float, rate: float, volatility: float, time: float) -> float:
    """
    Black–Scholes European put, no dividends.

    The moneyness term is taken in base 10, as the benchmark has always
    done. strike, time or volatility of zero give inf/nan, not an error.
    """
    logterm = log10(sptprice / strike)
    powterm = 0.5 * volatility * volatility
    den = volatility * sqrt(time)
    d1 = (((rate + powterm) * time) + logterm) / den
    d2 = d1 - den
    future_value = strike * exp(-rate * time)
    call = sptprice * cndf(d1) - future_value * cndf(d2)
    return call - future_value + sptprice
