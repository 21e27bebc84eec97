"""Helpers to read benchmark timings like a performance report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


@dataclass(frozen=True)
class StrategyTiming:
    """One timed run of a pricing strategy over a batch."""

    strategy: str
    iterations: int
    checksum: float
    elapsed: float

    @property
    def rate(self) -> float:
        """Options priced per second."""
        return self.iterations / self.elapsed if self.elapsed > 0 else float("inf")

    def to_dict(self) -> Dict[str, float]:
        return {
            "strategy": self.strategy,
            "iterations": self.iterations,
            "checksum": self.checksum,
            "elapsed_s": self.elapsed,
            "opts_per_s": self.rate,
        }


def summarise_timings(timings: Iterable[StrategyTiming]) -> pd.DataFrame:
    """
    Tabulate timings, one row per strategy.

    `speedup` is relative to the first row (the vectorized run in the driver).
    """
    df = pd.DataFrame([t.to_dict() for t in timings])
    if df.empty:
        return df
    df["speedup"] = df["elapsed_s"].iloc[0] / df["elapsed_s"]
    return df


def rel_error(true, est):
    eps = 1e-12
    denom = np.maximum(np.abs(true), eps)
    return np.abs(est - true) / denom


def max_rel_discrepancy(reference: np.ndarray, *others: np.ndarray) -> float:
    """Largest elementwise relative error of `others` against `reference` (0.0 on empty input)."""
    ref = np.asarray(reference, dtype=float)
    worst = 0.0
    for arr in others:
        if ref.size == 0:
            continue
        worst = max(worst, float(np.max(rel_error(ref, np.asarray(arr, dtype=float)))))
    return worst


def plot_throughput(df: pd.DataFrame, path=None, title="Black–Scholes put throughput by strategy"):
    """
    Bar chart of opts/sec per strategy. Saves to `path` when given, otherwise shows.
    Expects the frame returned by summarise_timings.
    """
    colors = ['#3498db', '#2ecc71', '#e74c3c']

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(df["strategy"], df["opts_per_s"], color=colors[:len(df)], alpha=0.8)
    ax.set_ylabel("Options / second")
    ax.set_title(title)
    ax.set_yscale("log")
    ax.grid(True, which="both", linestyle="--", alpha=0.5)
    fig.tight_layout()
    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    else:
        plt.show()
    return fig
