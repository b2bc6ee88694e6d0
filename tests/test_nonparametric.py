import math

import numpy as np
import pytest
from scipy import stats

from corrstat import LengthMismatchError
from corrstat.correlation import (
    kendall,
    kendall_by,
    kendall_of_pairs,
    kendall_tally,
    kendall_tau_a,
    kendall_tau_b,
    kendall_tau_c,
    pearson,
    rank_average,
    spearman,
    spearman_by,
    spearman_of_pairs,
)

X_DISTINCT = [5.05, 6.75, 3.21, 2.66]
Y_DISTINCT = [1.65, 26.5, -0.64, 6.95]


class TestSpearman:
    def test_equals_pearson_of_ranks(self, rng):
        x = rng.integers(0, 6, size=40)
        y = rng.normal(size=40)
        assert spearman(x, y) == pearson(rank_average(x), rank_average(y))

    def test_matches_scipy(self, rng):
        x = rng.normal(size=60)
        y = x ** 3 + rng.normal(size=60)
        assert spearman(x, y) == pytest.approx(stats.spearmanr(x, y)[0])

    def test_monotone_transform_is_one(self):
        x = [0.1, 0.5, 0.9, 2.0, 3.5]
        assert spearman(x, np.exp(x)) == pytest.approx(1.0)

    def test_pairs_and_by(self):
        pairs = list(zip(X_DISTINCT, Y_DISTINCT))
        expected = spearman(X_DISTINCT, Y_DISTINCT)
        assert spearman_of_pairs(pairs) == expected
        assert spearman_by(lambda p: (p[1], p[0]), pairs) == pytest.approx(expected)

    def test_nan_input(self):
        assert math.isnan(spearman([1.0, float("nan"), 3.0], [1.0, 2.0, 3.0]))

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            spearman([1, 2], [1, 2, 3])


class TestKendallTally:
    def test_tally_with_ties(self, tied_pair):
        t = kendall_tally(np.asarray(tied_pair[0], float), np.asarray(tied_pair[1], float))
        assert (t.n0, t.n1, t.n2, t.n3, t.swaps) == (36, 9, 4, 3, 0)
        assert t.pq == 26.0

    def test_tally_counts_inversions(self):
        t = kendall_tally(np.asarray(X_DISTINCT), np.asarray(Y_DISTINCT))
        assert t.swaps == 2
        assert t.pq == 2.0

    def test_reversed_order(self):
        t = kendall_tally(np.arange(6.0), np.arange(6.0)[::-1])
        assert t.swaps == 15
        assert t.pq == -15.0

    def test_empty(self):
        t = kendall_tally(np.empty(0), np.empty(0))
        assert t.n0 == 0
        assert math.isnan(t.pq)


class TestKendallTau:
    def test_reference_without_ties(self):
        assert kendall_tau_a(X_DISTINCT, Y_DISTINCT) == pytest.approx(0.3333333333, abs=1e-9)
        assert kendall_tau_b(X_DISTINCT, Y_DISTINCT) == pytest.approx(0.3333333333, abs=1e-9)

    def test_reference_with_ties(self, tied_pair):
        x, y = tied_pair
        assert kendall_tau_a(x, y) == pytest.approx(0.7222222222, abs=1e-9)
        assert kendall_tau_b(x, y) == pytest.approx(0.8845379627, abs=1e-9)
        assert kendall_tau_c(x, y) == pytest.approx(0.962962963, abs=1e-9)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_matches_scipy_with_ties(self, seed):
        r = np.random.default_rng(seed)
        x = r.integers(0, 8, size=150).astype(float)
        y = (x + r.integers(0, 5, size=150)).astype(float)
        assert kendall_tau_b(x, y) == pytest.approx(stats.kendalltau(x, y, variant="b")[0])
        assert kendall_tau_c(x, y) == pytest.approx(stats.kendalltau(x, y, variant="c")[0])

    def test_matches_brute_force_tau_a(self, rng):
        x = rng.integers(0, 5, size=30)
        y = rng.integers(0, 5, size=30)
        s = 0
        for i in range(30):
            for j in range(i + 1, 30):
                s += np.sign(x[i] - x[j]) * np.sign(y[i] - y[j])
        assert kendall_tau_a(x, y) == pytest.approx(s / (30 * 29 / 2))

    def test_perfect_agreement_and_reversal(self):
        x = [1, 2, 3, 4, 5]
        assert kendall_tau_a(x, x) == 1.0
        assert kendall_tau_b(x, x[::-1]) == -1.0

    def test_tau_b_constant_is_nan(self):
        assert math.isnan(kendall_tau_b([2, 2, 2, 2], [1, 2, 3, 4]))
        assert math.isnan(kendall_tau_b([1, 2, 3, 4], [5, 5, 5, 5]))

    @pytest.mark.parametrize("fn", [kendall_tau_a, kendall_tau_b, kendall_tau_c])
    def test_nan_input_is_nan(self, fn):
        assert math.isnan(fn([1.0, float("nan"), 3.0], [1.0, 2.0, 3.0]))

    def test_empty_is_nan(self):
        assert math.isnan(kendall_tau_a([], []))
        assert math.isnan(kendall_tau_b([], []))
        assert math.isnan(kendall_tau_c([], []))

    @pytest.mark.parametrize("fn", [kendall_tau_a, kendall_tau_b, kendall_tau_c])
    def test_length_mismatch(self, fn):
        with pytest.raises(LengthMismatchError):
            fn([1, 2, 3], [1, 2])

    def test_input_untouched(self):
        x = np.array(X_DISTINCT)
        y = np.array(Y_DISTINCT)
        kendall_tau_b(x, y)
        np.testing.assert_array_equal(x, X_DISTINCT)
        np.testing.assert_array_equal(y, Y_DISTINCT)

    def test_kendall_aliases(self, tied_pair):
        x, y = tied_pair
        expected = kendall_tau_b(x, y)
        assert kendall(x, y) == expected
        assert kendall_of_pairs(zip(x, y)) == expected
        assert kendall_by(lambda p: p, list(zip(x, y))) == expected
