from .models import (
    BlackScholesBenchmark,
    BenchmarkParams,
    blackscholes_devec,
    blackscholes_parallel,
    blackscholes_serial,
    get_strategy,
)
from .pricing import bs_put, cndf, cndf_array
from .utils import StrategyTiming, summarise_timings

__all__ = [
    "BlackScholesBenchmark",
    "BenchmarkParams",
    "blackscholes_serial",
    "blackscholes_devec",
    "blackscholes_parallel",
    "get_strategy",
    "bs_put",
    "cndf",
    "cndf_array",
    "StrategyTiming",
    "summarise_timings",
]
