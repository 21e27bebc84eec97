# bsbench/driver.py
from __future__ import annotations

import argparse

from .models.benchmark import BlackScholesBenchmark
from .models.params import param_assign
from .utils.analytics import plot_throughput, summarise_timings

LABELS = {"serial": "Serial", "devec": "Devec", "parallel": "Parallel"}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bsbench",
        description="Black–Scholes put pricing: vectorized vs devectorized vs threaded.",
    )
    ap.add_argument("--iterations", type=int, default=None, help="Batch size (default 10**6)")
    ap.add_argument("--workers", type=int, default=None, help="Threads for the parallel strategy (default: CPU count)")
    ap.add_argument("--quiet", action="store_true", help="Only print the summary table")
    ap.add_argument("--plot", type=str, default=None, help="Save a throughput bar chart to this path")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    params = param_assign(iterations=args.iterations, n_workers=args.workers)
    bench = BlackScholesBenchmark(params)

    primed = bench.prime()
    if not args.quiet:
        print("SELFPRIMED ", primed)

    timings = []
    for name in LABELS:
        t = bench.run_strategy(name)
        timings.append(t)
        if not args.quiet:
            print(f"{LABELS[name]} checksum: ", t.checksum)

    if not args.quiet:
        for t in timings:
            print(f"Time taken for {t.strategy} = {t.elapsed}")
        for t in timings:
            print(f"{LABELS[t.strategy]} rate = ", t.rate, " opts/sec")

    res = summarise_timings(timings)
    print()
    print(res.to_string(index=False))
    print(f"\nMax relative discrepancy vs serial: {bench.cross_check():.3e}")

    if args.plot:
        plot_throughput(res, path=args.plot)
        print(f"\nSaved -> {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
