# scripts/thread_sweep.py
# Parallel strategy timed against worker count on the fixed benchmark batch.
from __future__ import annotations
from pathlib import Path
import os, sys
import numpy as np
import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from bsbench.models.benchmark import BlackScholesBenchmark
from bsbench.models.params import param_assign

def worker_counts() -> list[int]:
    cpus = os.cpu_count() or 1
    counts = sorted({1, 2, 4, 8, cpus})
    return [c for c in counts if c <= cpus]

def main():
    rows = []
    reference = None
    for n in worker_counts():
        bench = BlackScholesBenchmark(param_assign(n_workers=n))
        bench.prime()
        t = bench.run_strategy("parallel")
        put = bench.results["parallel"]
        if reference is None:
            reference = put
        rows.append(dict(workers=n, elapsed_s=t.elapsed, opts_per_s=t.rate,
                         checksum=t.checksum, identical=bool(np.array_equal(put, reference))))

    res = pd.DataFrame(rows)
    res["speedup"] = res["elapsed_s"].iloc[0] / res["elapsed_s"]
    print(res.to_string(index=False))

if __name__ == "__main__":
    main()
