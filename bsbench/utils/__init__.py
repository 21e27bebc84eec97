from .analytics import (
    StrategyTiming,
    max_rel_discrepancy,
    plot_throughput,
    rel_error,
    summarise_timings,
)

__all__ = [
    "StrategyTiming",
    "max_rel_discrepancy",
    "plot_throughput",
    "rel_error",
    "summarise_timings",
]
