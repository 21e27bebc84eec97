# bsbench/models/params.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace

import numpy as np


# Fixed inputs of the benchmark run. Strikes are generated, everything else is
# broadcast over the batch.
@dataclass(frozen=True)
class BenchmarkParams:
    sptprice: float = 42.0
    rate: float = 0.5
    volatility: float = 0.2
    time: float = 0.5
    base_strike: float = 40.0
    iterations: int = 10**6
    n_workers: int | None = None   # None -> os.cpu_count()

    def strikes(self) -> np.ndarray:
        """strike[i] = base_strike + i / N for i = 1..N."""
        n = self.iterations
        return self.base_strike + np.arange(1, n + 1, dtype=float) / n


DEFAULTS = BenchmarkParams()

# zero-everything batch used to prime each strategy
PRIMING = dict(sptprice=0.0, strike=np.empty(0), rate=0.0, volatility=0.0, time=0.0)


def param_assign(base: BenchmarkParams = DEFAULTS, **overrides) -> BenchmarkParams:
    """
    Return a copy of `base` with `overrides` applied.
    None values are ignored so argparse namespaces can be passed straight in.
    """
    known = {f.name for f in fields(BenchmarkParams)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown benchmark parameter(s): {sorted(unknown)}")

    kw = {k: v for k, v in overrides.items() if v is not None}
    if "iterations" in kw:
        kw["iterations"] = int(kw["iterations"])
        if kw["iterations"] < 0:
            raise ValueError(f"iterations must be >= 0, got {kw['iterations']}")
    if "n_workers" in kw:
        kw["n_workers"] = int(kw["n_workers"])
        if kw["n_workers"] < 1:
            raise ValueError(f"n_workers must be >= 1, got {kw['n_workers']}")
    return replace(base, **kw)
