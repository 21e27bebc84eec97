from .benchmark import BlackScholesBenchmark
from .params import DEFAULTS, BenchmarkParams, param_assign
from .strategies import (
    STRATEGIES,
    blackscholes_devec,
    blackscholes_parallel,
    blackscholes_serial,
    get_strategy,
    partition_range,
)

__all__ = [
    "BlackScholesBenchmark",
    "BenchmarkParams",
    "DEFAULTS",
    "param_assign",
    "STRATEGIES",
    "blackscholes_serial",
    "blackscholes_devec",
    "blackscholes_parallel",
    "get_strategy",
    "partition_range",
]
