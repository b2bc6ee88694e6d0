"""
Rank-based correlation: Spearman and Kendall tau A/B/C.

Kendall's tau is computed in O(n log n) with Knight's (1966) algorithm:

1. order the observations by ``(x, y)``;
2. merge-sort that order by ``y`` alone, counting the exchanges
   (``swaps``) the merges perform; each is a discordant pair the
   ``x`` ordering did not already separate;
3. tally tied pairs in ``x`` (``n1``), in ``y`` (``n2``) and in both
   (``n3``) from runs of equal keys in the relevant ordering.

From these, the concordant-minus-discordant count is

.. math::

    S = (n_0 - n_1 - n_2 + n_3) - 2\\,\\text{swaps}, \\qquad
    n_0 = n(n-1)/2

References
----------
Knight, W. R. (1966). "A computer method for calculating Kendall's tau
with ungrouped data." JASA, 61(314), 436–439.

Example
-------
>>> from corrstat.correlation import kendall_tau_a, kendall_tau_b
>>> x = [1, 1, 1, 2, 2, 2, 3, 3, 3]
>>> y = [2, 2, 4, 4, 6, 6, 8, 8, 10]
>>> round(kendall_tau_a(x, y), 10)
0.7222222222
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

import numpy as np

from ..core.validation import as_paired, ieee_div, unzip_pairs
from ..descriptive.rank import rank_average
from ..utils.logging import get_logger
from .linear import pearson

logger = get_logger("corrstat.correlation.nonparametric")

_NAN = float("nan")


# ═══════════════════════════════════════════════════════════════════════════
#  Spearman
# ═══════════════════════════════════════════════════════════════════════════

def spearman(seq1: Iterable, seq2: Iterable) -> float:
    """Spearman rank correlation: Pearson correlation of the average ranks."""
    x, y = as_paired(seq1, seq2)
    return pearson(rank_average(x), rank_average(y))


def spearman_of_pairs(pairs: Iterable[Tuple[float, float]]) -> float:
    return spearman(*unzip_pairs(pairs))


def spearman_by(f: Callable, seq: Iterable) -> float:
    return spearman_of_pairs(f(item) for item in seq)


# ═══════════════════════════════════════════════════════════════════════════
#  Kendall: tie tally and merge-sort inversion count
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TieTally:
    """Pair counts from which every tau variant is derived.

    Attributes
    ----------
    n : int       number of observations
    n0 : int      n(n-1)/2
    n1 : int      pairs tied in x
    n2 : int      pairs tied in y
    n3 : int      pairs tied in both x and y
    swaps : int   merge-sort exchanges needed to order by y
    """

    n: int
    n0: int
    n1: int
    n2: int
    n3: int
    swaps: int

    @property
    def pq(self) -> float:
        """Concordant minus discordant pairs; NaN for an empty sample."""
        if self.n == 0:
            return _NAN
        return float(self.n0 - self.n1 - self.n2 + self.n3) - 2.0 * self.swaps


def _merge_sort(perm: List[int], y: List[float], offset: int, length: int,
                buf: List[int]) -> int:
    """Sort ``perm[offset:offset+length]`` by ``y`` in place; return swaps."""
    if length < 2:
        return 0
    if length == 2:
        if y[perm[offset]] <= y[perm[offset + 1]]:
            return 0
        perm[offset], perm[offset + 1] = perm[offset + 1], perm[offset]
        return 1

    left_len = length // 2
    right_len = length - left_len
    mid = offset + left_len
    swaps = (_merge_sort(perm, y, offset, left_len, buf)
             + _merge_sort(perm, y, mid, right_len, buf))

    # halves already in order
    if y[perm[mid - 1]] < y[perm[mid]]:
        return swaps

    r = l = 0
    for i in range(length):
        if l >= right_len or (r < left_len and y[perm[offset + r]] <= y[perm[mid + l]]):
            buf[i] = perm[offset + r]
            r += 1
        else:
            buf[i] = perm[mid + l]
            l += 1
            swaps += left_len - r
    perm[offset:offset + length] = buf[:length]
    return swaps


def _tally_ties(perm: List[int], differs: Callable[[int, int], bool]) -> int:
    """Sum of t(t-1)/2 over maximal runs of ``perm`` with no break in *differs*."""
    n = len(perm)
    k = 0
    total = 0
    for i in range(1, n):
        if differs(perm[k], perm[i]):
            t = i - k
            total += t * (t - 1) // 2
            k = i
    t = n - k
    return total + t * (t - 1) // 2


def kendall_tally(x: np.ndarray, y: np.ndarray) -> TieTally:
    """Compute the :class:`TieTally` of two equal-length samples."""
    n = min(x.shape[0], y.shape[0])
    if n == 0:
        return TieTally(0, 0, 0, 0, 0, 0)

    xs = x[:n].tolist()
    ys = y[:n].tolist()
    perm = np.lexsort((y[:n], x[:n])).tolist()

    n3 = _tally_ties(perm, lambda a, b: xs[a] != xs[b] or ys[a] != ys[b])
    n1 = _tally_ties(perm, lambda a, b: xs[a] != xs[b])
    swaps = _merge_sort(perm, ys, 0, n, [0] * n)
    n2 = _tally_ties(perm, lambda a, b: ys[a] != ys[b])
    n0 = n * (n - 1) // 2
    return TieTally(n=n, n0=n0, n1=n1, n2=n2, n3=n3, swaps=swaps)


# ═══════════════════════════════════════════════════════════════════════════
#  Tau policies
# ═══════════════════════════════════════════════════════════════════════════

def _tau_a(x: np.ndarray, y: np.ndarray, t: TieTally) -> float:
    return ieee_div(t.pq, t.n0)


def _tau_b(x: np.ndarray, y: np.ndarray, t: TieTally) -> float:
    if t.n0 == t.n1 or t.n0 == t.n2:
        logger.debug("tau-b undefined: one sample is constant.")
        return _NAN
    return t.pq / math.sqrt(float(t.n0 - t.n1) * float(t.n0 - t.n2))


def _tau_c(x: np.ndarray, y: np.ndarray, t: TieTally) -> float:
    n = x.shape[0]
    if n == 0:
        return _NAN
    m = float(min(np.unique(x).shape[0], np.unique(y).shape[0]))
    d = float(n * n) * (m - 1.0) / m
    return ieee_div(2.0 * t.pq, d)


def _kendall_tau(tau: Callable, seq1: Iterable, seq2: Iterable) -> float:
    x, y = as_paired(seq1, seq2)
    if np.isnan(x).any() or np.isnan(y).any():
        logger.debug("NaN in Kendall input; tau is NaN.")
        return _NAN
    return tau(x, y, kendall_tally(x, y))


def kendall_tau_a(seq1: Iterable, seq2: Iterable) -> float:
    """Kendall tau-a: ``S / n0``, no tie adjustment."""
    return _kendall_tau(_tau_a, seq1, seq2)


def kendall_tau_b(seq1: Iterable, seq2: Iterable) -> float:
    """Kendall tau-b: ``S / sqrt((n0 - n1)(n0 - n2))``.

    NaN when either sample is constant.
    """
    return _kendall_tau(_tau_b, seq1, seq2)


def kendall_tau_c(seq1: Iterable, seq2: Iterable) -> float:
    """Stuart's tau-c: ``2S / (n^2 (m-1)/m)``, m = fewer distinct values."""
    return _kendall_tau(_tau_c, seq1, seq2)


def kendall(seq1: Iterable, seq2: Iterable) -> float:
    """Kendall correlation (tau-b)."""
    return kendall_tau_b(seq1, seq2)


def kendall_of_pairs(pairs: Iterable[Tuple[float, float]]) -> float:
    return kendall(*unzip_pairs(pairs))


def kendall_by(f: Callable, seq: Iterable) -> float:
    return kendall_of_pairs(f(item) for item in seq)
