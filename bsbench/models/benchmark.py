# bsbench/models/benchmark.py
from __future__ import annotations

import time as _time
from typing import Dict, List

import numpy as np

from .params import DEFAULTS, PRIMING, BenchmarkParams
from .strategies import STRATEGIES, get_strategy
from ..utils.analytics import StrategyTiming, max_rel_discrepancy


class BlackScholesBenchmark:
    """
    Times each pricing strategy on the same strike batch.

    Conventions:
      - Strikes are built once from the params and shared by every strategy.
      - Only the parallel strategy receives n_workers.
      - Outputs of the last run are kept in `self.results` for cross-checks.
    """

    def __init__(self, params: BenchmarkParams = DEFAULTS, verbose: bool = False):
        self.params = params
        self.verbose = bool(verbose)
        self.strike = params.strikes()
        self.results: Dict[str, np.ndarray] = {}

    def _call(self, name: str, **batch) -> np.ndarray:
        fn = get_strategy(name)
        if name == "parallel":
            return fn(**batch, n_workers=self.params.n_workers)
        return fn(**batch)

    def prime(self) -> float:
        """Run every strategy once on an empty batch; returns the wall time (JIT compile included)."""
        t0 = _time.perf_counter()
        for name in STRATEGIES:
            self._call(name, **PRIMING)
        elapsed = _time.perf_counter() - t0
        if self.verbose:
            print(f"[Prime] all strategies in {elapsed:.4f}s")
        return elapsed

    def run_strategy(self, name: str) -> StrategyTiming:
        p = self.params
        t0 = _time.perf_counter()
        put = self._call(name, sptprice=p.sptprice, strike=self.strike, rate=p.rate,
                         volatility=p.volatility, time=p.time)
        elapsed = _time.perf_counter() - t0
        self.results[name] = put
        timing = StrategyTiming(name, p.iterations, float(put.sum()), elapsed)
        if self.verbose:
            print(f"[Time] {name} = {elapsed:.6f}s  checksum {timing.checksum:.6f}")
        return timing

    def run(self) -> List[StrategyTiming]:
        return [self.run_strategy(name) for name in STRATEGIES]

    def cross_check(self, reference: str = "serial") -> float:
        """Max relative disagreement of the other strategies against `reference`."""
        ref = self.results[reference]
        others = [v for k, v in self.results.items() if k != reference]
        return max_rel_discrepancy(ref, *others)
