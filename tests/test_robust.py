import math

import numpy as np
import pytest

from corrstat import LengthMismatchError, configure
from corrstat.correlation import bicor, bicor_by, bicor_of_pairs, bicor_profile, pearson

PAIRS = [(32.1, 1.2), (3.1, 0.4), (2.932, 3.85)]


def test_reference_value():
    assert bicor_of_pairs(PAIRS) == pytest.approx(-0.9303913046, abs=1e-9)


def test_by_variant():
    assert bicor_by(lambda p: (p[0], p[1]), PAIRS) == pytest.approx(-0.9303913046, abs=1e-9)


def test_self_correlation(rng):
    x = rng.normal(size=50)
    assert bicor(x, x) == pytest.approx(1.0)
    assert bicor(x, -x) == pytest.approx(-1.0)


def test_symmetric(rng):
    x = rng.normal(size=40)
    y = x + rng.normal(size=40)
    assert bicor(x, y) == pytest.approx(bicor(y, x))


def test_outlier_is_downweighted():
    x = np.arange(20.0)
    y = np.arange(20.0)
    y[-1] = 1000.0
    robust = bicor(x, y)
    assert robust > 0.9
    assert robust > pearson(x, y)


def test_zero_mad_is_nan():
    assert math.isnan(bicor([1.0, 1.0, 1.0, 5.0], [1.0, 2.0, 3.0, 4.0]))


def test_nan_input_is_nan():
    assert math.isnan(bicor([1.0, float("nan"), 3.0, 4.0], [1.0, 2.0, 3.0, 4.0]))


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        bicor([1, 2, 3], [1, 2])


def test_profile_fields():
    p = bicor_profile([1.0, 2.0, 3.0, 4.0, 100.0])
    assert p.median == 3.0
    assert p.mad == 1.0
    # 100 is 97 MADs out, far beyond the cut-off
    assert p.weights[-1] == 0.0
    assert p.weights[2] == 1.0
    assert float(np.sum(p.normalized ** 2)) == pytest.approx(1.0)


def test_tuning_constant_from_config():
    x = [1.0, 2.0, 3.0, 4.0, 8.0]
    assert bicor_profile(x).weights[-1] > 0.0
    configure(bicor_tuning_constant=2.0)
    # |8 - 3| / (2 * 1) >= 1
    assert bicor_profile(x).weights[-1] == 0.0
    assert bicor_profile(x, tuning_constant=9.0).weights[-1] > 0.0
