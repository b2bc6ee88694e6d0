import math

import numpy as np
import pytest

from corrstat import configure
from corrstat.descriptive import median, median_absolute_dev


def test_median_odd():
    assert median([1, 2, 3, 4, 5]) == 3


def test_median_even_is_mean_of_middle_pair():
    assert median([1, 2, 3, 4]) == 2.5
    assert median([4, 1, 3, 2]) == 2.5


def test_median_single_and_pair():
    assert median([7.5]) == 7.5
    assert median([2, 1]) == 1.5


def test_median_empty_is_nan():
    assert math.isnan(median([]))


@pytest.mark.parametrize("data", [
    [float("nan"), 1.0, 2.0],
    [1.0, 2.0, float("nan")],
    [3.0, float("nan"), 1.0, 2.0],
    [float("nan")] * 4,
])
def test_median_nan_propagates(data):
    assert math.isnan(median(data))


def test_median_all_duplicates():
    assert median([5.0] * 2001) == 5.0
    assert median([1.0] * 500 + [2.0] * 500) == 1.5


def test_median_does_not_mutate_input():
    data = [9, 3, 7, 1, 5, 2]
    arr = np.array(data, dtype=float)
    median(data)
    median(arr)
    assert data == [9, 3, 7, 1, 5, 2]
    np.testing.assert_array_equal(arr, [9, 3, 7, 1, 5, 2])


@pytest.mark.parametrize("size", [1, 2, 3, 10, 11, 256, 1001])
def test_median_matches_numpy(size, rng):
    data = rng.normal(size=size)
    assert median(data) == pytest.approx(float(np.median(data)))


def test_median_with_ties_matches_numpy(rng):
    data = rng.integers(0, 5, size=300)
    assert median(data) == pytest.approx(float(np.median(data)))


def test_median_order_independent(rng):
    data = rng.normal(size=99)
    assert median(rng.permutation(data)) == median(data)


def test_median_explicit_rng_is_deterministic():
    data = list(np.random.default_rng(7).normal(size=64))
    a = median(data, rng=np.random.default_rng(11))
    b = median(data, rng=np.random.default_rng(11))
    assert a == b


def test_median_with_unseeded_config():
    configure(seed=None)
    assert median([3, 1, 2]) == 2


def test_median_absolute_dev():
    assert median_absolute_dev([1, 2, 3, 4, 100]) == 1
    assert median_absolute_dev([1, 1, 2, 2, 4, 6, 9]) == 1


def test_median_absolute_dev_nan():
    assert math.isnan(median_absolute_dev([1.0, float("nan"), 3.0]))
    assert math.isnan(median_absolute_dev([]))
