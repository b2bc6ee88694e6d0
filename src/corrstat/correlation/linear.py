"""
Linear correlation between paired samples.

Functions
---------
pearson, pearson_of_pairs, pearson_by
    Product-moment correlation from a single streaming co-moment pass.
pearson_weighted, pearson_weighted_of_triples, pearson_weighted_by
    Weighted product-moment correlation.
correlation_of, auto_correlation, auto_covariance, normalized_xcorr, xcorr
    Apply a pairwise measure to a sample and a lagged copy of another.

Example
-------
>>> from corrstat.correlation import pearson
>>> r = pearson(x, y)        # in [-1, 1], NaN if either is constant
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Tuple

import numpy as np

from ..core.exceptions import InvalidArgumentError
from ..core.validation import as_paired, as_sample, as_weighted, ieee_div, unzip_pairs
from ..descriptive.accumulators import cov

_NAN = float("nan")


# ═══════════════════════════════════════════════════════════════════════════
#  Pearson
# ═══════════════════════════════════════════════════════════════════════════

def _co_moments(x: np.ndarray, y: np.ndarray) -> Tuple[int, float, float, float]:
    """Welford-style pass accumulating M2(x), M2(y) and the co-moment C(x, y).

    Returns
    -------
    n, m2x, m2y, cxy
    """
    n = 0
    mx = my = 0.0
    m2x = m2y = cxy = 0.0
    for a, b in zip(x.tolist(), y.tolist()):
        n += 1
        dx = a - mx
        mx += dx / n
        dy = b - my
        my += dy / n
        m2x += dx * (a - mx)
        m2y += dy * (b - my)
        cxy += dx * (b - my)
    return n, m2x, m2y, cxy


def _clamp(r: float) -> float:
    if r >= 1.0:
        return 1.0
    if r <= -1.0:
        return -1.0
    return r


def pearson(seq1: Iterable, seq2: Iterable) -> float:
    """Pearson product-moment correlation.

    Raises
    ------
    LengthMismatchError
        If the samples do not have the same length.

    Returns
    -------
    float
        In [-1, 1].  NaN for empty input or when either sample is
        constant.
    """
    x, y = as_paired(seq1, seq2)
    n, m2x, m2y, cxy = _co_moments(x, y)
    if n == 0:
        return _NAN
    r = ieee_div(cxy, math.sqrt(m2x) * math.sqrt(m2y))
    return r if math.isnan(r) else _clamp(r)


def pearson_of_pairs(pairs: Iterable[Tuple[float, float]]) -> float:
    return pearson(*unzip_pairs(pairs))


def pearson_by(f: Callable, seq: Iterable) -> float:
    """Pearson correlation of the pairs ``f(item) -> (x, y)``."""
    return pearson_of_pairs(f(item) for item in seq)


def _weighted_cov(a: np.ndarray, b: np.ndarray, w: np.ndarray, w_sum: float) -> float:
    ma = ieee_div(np.sum(a * w), w_sum)
    mb = ieee_div(np.sum(b * w), w_sum)
    return ieee_div(np.sum(w * (a - ma) * (b - mb)), w_sum)


def pearson_weighted(seq1: Iterable, seq2: Iterable, weights: Iterable) -> float:
    """Weighted Pearson correlation.

    .. math::

        r_w = \\frac{\\mathrm{cov}_w(x, y)}
                    {\\sqrt{\\mathrm{cov}_w(x, x)\\,\\mathrm{cov}_w(y, y)}}

    Raises
    ------
    LengthMismatchError
        If samples and weights do not all have the same length.
    """
    x, y, w = as_weighted(seq1, seq2, weights)
    w_sum = float(np.sum(w))
    with np.errstate(invalid="ignore"):
        num = _weighted_cov(x, y, w, w_sum)
        # separate roots: the product of two large variances overflows
        den = float(np.sqrt(_weighted_cov(x, x, w, w_sum)) * np.sqrt(_weighted_cov(y, y, w, w_sum)))
    return ieee_div(num, den)


def pearson_weighted_of_triples(triples: Iterable[Tuple[float, float, float]]) -> float:
    """Weighted Pearson over ``(x, y, weight)`` triples."""
    return pearson_weighted(*unzip_pairs(triples, width=3))


def pearson_weighted_by(f: Callable, seq: Iterable) -> float:
    return pearson_weighted_of_triples(f(item) for item in seq)


# ═══════════════════════════════════════════════════════════════════════════
#  Lagged measures
# ═══════════════════════════════════════════════════════════════════════════

def correlation_of(
        corr_fn: Callable[[np.ndarray, np.ndarray], float],
        lag: int,
        v1: Iterable,
        v2: Iterable,
) -> float:
    """Apply *corr_fn* to ``v1[:n-lag]`` and ``v2[lag:]``.

    Raises
    ------
    LengthMismatchError
        If *v1* and *v2* differ in length.
    InvalidArgumentError
        If *lag* is negative or not smaller than the sample length.
    """
    x, y = as_paired(v1, v2)
    n = x.shape[0]
    if lag < 0 or lag >= n:
        raise InvalidArgumentError(
            f"lag must satisfy 0 <= lag < {n}, got {lag}."
        )
    return corr_fn(x[: n - lag], y[lag:])


def auto_correlation(lag: int, v: Iterable) -> float:
    """Pearson correlation of a sample with itself shifted by *lag*."""
    x = as_sample(v)
    return correlation_of(pearson, lag, x, x)


def auto_covariance(lag: int, v: Iterable) -> float:
    """Sample covariance of a sample with itself shifted by *lag*."""
    x = as_sample(v)
    return correlation_of(cov, lag, x, x)


def normalized_xcorr(lag: int, v1: Iterable, v2: Iterable) -> float:
    """Pearson correlation between *v1* and *v2* shifted by *lag*."""
    return correlation_of(pearson, lag, v1, v2)


def xcorr(lag: int, v1: Iterable, v2: Iterable) -> float:
    """Unnormalised cross-correlation (dot product) at *lag*."""
    return correlation_of(lambda a, b: float(np.dot(a, b)), lag, v1, v2)
