import math

import numpy as np
import pytest
from scipy import stats

from corrstat.descriptive import rank_average


def test_ties_share_mean_rank():
    np.testing.assert_array_equal(rank_average([10, 20, 20, 30]), [1.0, 2.5, 2.5, 4.0])


def test_all_equal():
    np.testing.assert_array_equal(rank_average([4, 4, 4]), [2.0, 2.0, 2.0])


def test_empty():
    assert rank_average([]).shape == (0,)


def test_rerank_distinct_is_idempotent():
    r = rank_average([3.3, -1.0, 2.0, 10.0])
    np.testing.assert_array_equal(r, [3.0, 1.0, 2.0, 4.0])
    np.testing.assert_array_equal(rank_average(r), r)


def test_matches_scipy(rng):
    data = rng.integers(0, 10, size=100)
    np.testing.assert_allclose(rank_average(data), stats.rankdata(data, method="average"))


def test_nan_gets_nan_rank():
    r = rank_average([2.0, float("nan"), 1.0])
    assert r[0] == 2.0
    assert math.isnan(r[1])
    assert r[2] == 1.0


def test_input_untouched():
    data = np.array([3.0, 1.0, 2.0])
    rank_average(data)
    np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])
