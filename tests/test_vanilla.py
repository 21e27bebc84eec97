import math

import numpy as np
import pytest

from bsbench.pricing import bs_put, cndf, cndf_array


def test_cndf_center_and_symmetry():
    assert cndf(0.0) == 0.5
    for x in (0.1, 0.5, 1.0, 2.5):
        assert cndf(x) + cndf(-x) == pytest.approx(1.0, abs=1e-15)
    assert cndf(10.0) == pytest.approx(1.0)
    assert cndf(-10.0) == pytest.approx(0.0, abs=1e-15)


def test_cndf_array_matches_scalar():
    x = np.linspace(-4.0, 4.0, 33)
    expected = np.array([cndf(v) for v in x])
    assert np.allclose(cndf_array(x), expected, rtol=1e-14, atol=1e-15)


def test_bs_put_closed_form():
    S, K, r, v, T = 42.0, 41.0, 0.5, 0.2, 0.5
    den = v * math.sqrt(T)
    d1 = ((r + 0.5 * v * v) * T + math.log10(S / K)) / den
    d2 = d1 - den
    N = lambda x: 0.5 + 0.5 * math.erf(x / math.sqrt(2.0))
    fv = K * math.exp(-r * T)
    expected = S * N(d1) - fv * N(d2) - fv + S
    assert bs_put(S, K, r, v, T) == pytest.approx(expected, rel=1e-12)


def test_bs_put_degenerate_inputs_do_not_raise():
    # 0/0 moneyness -> nan all the way through
    assert np.isnan(bs_put(0.0, 0.0, 0.5, 0.2, 0.5))
    # zero strike -> infinite moneyness, still a number
    assert np.isfinite(bs_put(42.0, 0.0, 0.5, 0.2, 0.5))
    # zero time and zero vol: d1 blows up to +inf, put collapses to S - K
    assert bs_put(42.0, 41.0, 0.5, 0.0, 0.0) == pytest.approx(42.0 - 41.0 - 41.0 + 42.0)
