# bsbench/models/strategies.py
"""
Three ways of pricing the same batch of European puts.

  - serial   : whole-array NumPy expressions (vectorized).
  - devec    : explicit index loop, compiled, one thread.
  - parallel : the same loop, index range split statically over a thread pool.

All strategies take (sptprice, strike, rate, volatility, time); any of them may be
a scalar and is broadcast against the others. The result is a fresh float64 array.
"""
from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Tuple

import numpy as np
from numba import njit

from ..pricing.vanilla import bs_put, cndf_array

__all__ = [
    "blackscholes_serial",
    "blackscholes_devec",
    "blackscholes_parallel",
    "partition_range",
    "STRATEGIES",
    "get_strategy",
]


def _as_batch(sptprice, strike, rate, volatility, time) -> Tuple[np.ndarray, ...]:
    """
    Coerce the five inputs to read-only 1-D float64 views of equal length.

    Scalars become stride-0 views, so nothing the size of the batch is
    allocated for them and every strategy times only its own pricing work.
    """
    fields = [np.atleast_1d(np.asarray(x, dtype=np.float64))
              for x in (sptprice, strike, rate, volatility, time)]
    if any(f.ndim != 1 for f in fields):
        raise ValueError("inputs must be scalars or 1-D arrays")
    shape = np.broadcast_shapes(*(f.shape for f in fields))
    return tuple(np.broadcast_to(f, shape) for f in fields)


# ---------------- vectorized ----------------
def blackscholes_serial(sptprice, strike, rate, volatility, time) -> np.ndarray:
    S, K, r, v, T = _as_batch(sptprice, strike, rate, volatility, time)
    with np.errstate(all="ignore"):  # degenerate inputs propagate as inf/nan
        logterm = np.log10(S / K)
        powterm = 0.5 * v * v
        den = v * np.sqrt(T)
        d1 = (((r + powterm) * T) + logterm) / den
        d2 = d1 - den
        future_value = K * np.exp(-r * T)
        call = S * cndf_array(d1) - future_value * cndf_array(d2)
        put = call - future_value + S
    return put


# ---------------- devectorized ----------------
@njit(nogil=True, error_model="numpy")
def _put_kernel(sptprice, strike, rate, volatility, time, out, start, stop):
    for i in range(start, stop):
        out[i] = bs_put(sptprice[i], strike[i], rate[i], volatility[i], time[i])


def blackscholes_devec(sptprice, strike, rate, volatility, time) -> np.ndarray:
    batch = _as_batch(sptprice, strike, rate, volatility, time)
    n = batch[1].shape[0]
    put = np.empty(n, dtype=np.float64)
    _put_kernel(*batch, put, 0, n)
    return put


# ---------------- parallel ----------------
def partition_range(n: int, n_workers: int) -> List[Tuple[int, int]]:
    """
    Split [0, n) into n_workers contiguous chunks whose sizes differ by at most one.
    Empty chunks are dropped.
    """
    if n_workers < 1:
        raise ValueError(f"n_workers must be >= 1, got {n_workers}")
    bounds = [(n * k) // n_workers for k in range(n_workers + 1)]
    return [(lo, hi) for lo, hi in zip(bounds[:-1], bounds[1:]) if hi > lo]


def blackscholes_parallel(sptprice, strike, rate, volatility, time,
                          n_workers: int | None = None) -> np.ndarray:
    """
    Devectorized loop over a fixed thread pool.

    Each worker owns one slice of the output; the kernel releases the GIL, so
    no locking is needed and the pool shutdown is the only barrier.
    """
    n_workers = int(n_workers) if n_workers is not None else (os.cpu_count() or 1)
    batch = _as_batch(sptprice, strike, rate, volatility, time)
    n = batch[1].shape[0]
    put = np.empty(n, dtype=np.float64)
    chunks = partition_range(n, n_workers)
    if not chunks:
        return put

    with ThreadPoolExecutor(max_workers=n_workers) as pool:
        futures = [pool.submit(_put_kernel, *batch, put, lo, hi) for lo, hi in chunks]
        for f in futures:
            f.result()
    return put


STRATEGIES: Dict[str, Callable[..., np.ndarray]] = {
    "serial":   blackscholes_serial,
    "devec":    blackscholes_devec,
    "parallel": blackscholes_parallel,
}


def get_strategy(name: str) -> Callable[..., np.ndarray]:
    key = name.lower()
    if key not in STRATEGIES:
        raise ValueError(f"Strategy '{name}' not supported.")
    return STRATEGIES[key]
