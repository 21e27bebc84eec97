import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from bsbench.driver import main
from bsbench.models import BlackScholesBenchmark, DEFAULTS, param_assign
from bsbench.utils import StrategyTiming, max_rel_discrepancy, plot_throughput, summarise_timings


def test_default_params():
    assert (DEFAULTS.sptprice, DEFAULTS.rate, DEFAULTS.volatility, DEFAULTS.time) == (42.0, 0.5, 0.2, 0.5)
    assert DEFAULTS.iterations == 10**6
    K = param_assign(iterations=4).strikes()
    assert np.allclose(K, [40.25, 40.5, 40.75, 41.0])


def test_param_assign_overrides_and_rejects():
    p = param_assign(iterations=10, n_workers=None)
    assert p.iterations == 10 and p.n_workers is None
    assert DEFAULTS.iterations == 10**6
    with pytest.raises(ValueError):
        param_assign(spot=1.0)
    with pytest.raises(ValueError):
        param_assign(iterations=-1)
    with pytest.raises(ValueError):
        param_assign(n_workers=0)


def test_benchmark_runs_every_strategy():
    bench = BlackScholesBenchmark(param_assign(iterations=2000, n_workers=2))
    assert bench.prime() >= 0.0
    timings = bench.run()
    assert [t.strategy for t in timings] == ["serial", "devec", "parallel"]
    for t in timings:
        assert t.iterations == 2000
        assert t.checksum == pytest.approx(timings[0].checksum, rel=1e-9)
    assert bench.cross_check() < 1e-9

    df = summarise_timings(timings)
    assert list(df["strategy"]) == ["serial", "devec", "parallel"]
    assert df["speedup"].iloc[0] == pytest.approx(1.0)


def test_timing_rate():
    t = StrategyTiming("devec", 1000, 1.0, 0.5)
    assert t.rate == 2000.0
    assert StrategyTiming("devec", 0, 0.0, 0.0).rate == float("inf")


def test_max_rel_discrepancy():
    a = np.array([1.0, 2.0, 4.0])
    assert max_rel_discrepancy(a, a.copy()) == 0.0
    assert max_rel_discrepancy(a, a * (1 + 1e-6)) == pytest.approx(1e-6)
    assert max_rel_discrepancy(np.empty(0), np.empty(0)) == 0.0


def test_plot_throughput(tmp_path):
    timings = [StrategyTiming("serial", 10, 1.0, 0.1), StrategyTiming("devec", 10, 1.0, 0.2)]
    out = tmp_path / "rate.png"
    plot_throughput(summarise_timings(timings), path=out)
    assert out.exists()


def test_driver_prints_checksums_and_rates(capsys):
    assert main(["--iterations", "1000", "--workers", "2"]) == 0
    out = capsys.readouterr().out
    assert "SELFPRIMED" in out
    for label in ("Serial", "Devec", "Parallel"):
        assert f"{label} checksum:" in out
        assert f"{label} rate =" in out
    assert "Time taken for devec" in out
    assert "Max relative discrepancy" in out


def test_driver_quiet(capsys):
    main(["--iterations", "10", "--quiet"])
    out = capsys.readouterr().out
    assert "SELFPRIMED" not in out
    assert "opts_per_s" in out
