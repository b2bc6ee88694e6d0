"""
Streaming descriptive statistics.

Every estimator here consumes its input exactly once, left to right, so
generators work as well as lists or arrays.  Mean and dispersion use
Welford's update, which keeps the running sum of squared deviations (M2)
instead of raw power sums:

.. math::

    \\delta = v - \\bar{x}_{n-1}, \\quad
    \\bar{x}_n = \\bar{x}_{n-1} + \\delta / n, \\quad
    M_{2,n} = M_{2,n-1} + \\delta (v - \\bar{x}_n)

Undefined results (empty input, a single observation for a variance) are
NaN, never an exception.

Example
-------
>>> from corrstat import descriptive as ds
>>> ds.var([1, 2, 3, 4, 5])
2.5
>>> ds.var_population([1, 2, 3, 4, 5])
2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

import numpy as np

from ..core.exceptions import InvalidArgumentError, LengthMismatchError
from ..core.validation import as_paired, ieee_div, unzip_pairs

_NAN = float("nan")
_MISSING = object()


# ═══════════════════════════════════════════════════════════════════════════
#  Welford core
# ═══════════════════════════════════════════════════════════════════════════

def _welford(values: Iterable) -> Tuple[int, float, float]:
    """Single pass over *values*.

    Returns
    -------
    n : int
    mean : float
    m2 : float   sum of squared deviations from the mean
    """
    n = 0
    mean = 0.0
    m2 = 0.0
    for v in values:
        v = float(v)
        n += 1
        delta = v - mean
        mean += delta / n
        m2 += delta * (v - mean)
    return n, mean, m2


def _sample_var(n: int, m2: float) -> float:
    return m2 / (n - 1) if n > 1 else _NAN


def _population_var(n: int, m2: float) -> float:
    return m2 / n if n > 1 else _NAN


# ═══════════════════════════════════════════════════════════════════════════
#  Means
# ═══════════════════════════════════════════════════════════════════════════

def mean(seq: Iterable) -> float:
    """Arithmetic mean; NaN for an empty sample."""
    n, m, _ = _welford(seq)
    return m if n > 0 else _NAN


def mean_by(f: Callable, seq: Iterable) -> float:
    """Arithmetic mean of ``f(x)`` over *seq*."""
    return mean(f(x) for x in seq)


def weighted_mean(weights: Iterable, seq: Iterable) -> float:
    """Weighted mean ``sum(w*x) / sum(w)``.

    Raises
    ------
    LengthMismatchError
        If *weights* and *seq* do not have the same length.
    """
    weights = list(weights)
    seq = list(seq)
    if len(weights) != len(seq):
        raise LengthMismatchError(len(weights), len(seq), what="weights and items")
    if not seq:
        return _NAN
    acc = 0.0
    w_acc = 0.0
    for w, x in zip(weights, seq):
        acc += float(x) * float(w)
        w_acc += float(w)
    return ieee_div(acc, w_acc)


def mean_harmonic(seq: Iterable) -> float:
    """Harmonic mean ``n / sum(1/x)``."""
    n = 0
    acc = 0.0
    for x in seq:
        n += 1
        acc += ieee_div(1.0, x)
    return ieee_div(n, acc) if n > 0 else _NAN


def mean_harmonic_by(f: Callable, seq: Iterable) -> float:
    return mean_harmonic(f(x) for x in seq)


def mean_geometric(seq: Iterable) -> float:
    """Geometric mean ``exp(mean(log x))``.  Non-positive entries give NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        m = mean(np.log(np.float64(x)) for x in seq)
    return math.exp(m) if not math.isnan(m) else _NAN


def mean_geometric_by(f: Callable, seq: Iterable) -> float:
    return mean_geometric(f(x) for x in seq)


def mean_quadratic(seq: Iterable) -> float:
    """Root mean square."""
    m = mean(float(x) * float(x) for x in seq)
    return math.sqrt(m) if not math.isnan(m) else _NAN


def mean_quadratic_by(f: Callable, seq: Iterable) -> float:
    return mean_quadratic(f(x) for x in seq)


def _check_proportion(proportion: float) -> None:
    if not 0.0 <= proportion < 0.5:
        raise InvalidArgumentError(
            f"Trimming proportion must lie in [0, 0.5), got {proportion}."
        )


def mean_truncated(proportion: float, seq: Iterable) -> float:
    """Trimmed mean.

    Sorts ascending, drops ``floor(n * proportion)`` values from each end
    and averages the remainder.
    """
    _check_proportion(proportion)
    data = sorted(float(x) for x in seq)
    n = len(data)
    if n == 0:
        return _NAN
    k = int(math.floor(n * proportion))
    return mean(data[k:n - k])


def mean_truncated_by(f: Callable, proportion: float, seq: Iterable) -> float:
    """Trimmed mean of ``f(x)``; trimming is applied to the mapped values."""
    return mean_truncated(proportion, [f(x) for x in seq])


# ═══════════════════════════════════════════════════════════════════════════
#  Dispersion
# ═══════════════════════════════════════════════════════════════════════════

def var(seq: Iterable) -> float:
    """Sample variance (denominator N-1); NaN for fewer than two values."""
    n, _, m2 = _welford(seq)
    return _sample_var(n, m2)


def var_by(f: Callable, seq: Iterable) -> float:
    return var(f(x) for x in seq)


def var_population(seq: Iterable) -> float:
    """Population variance (denominator N); NaN for fewer than two values."""
    n, _, m2 = _welford(seq)
    return _population_var(n, m2)


def var_population_by(f: Callable, seq: Iterable) -> float:
    return var_population(f(x) for x in seq)


def stdev(seq: Iterable) -> float:
    """Sample standard deviation."""
    return math.sqrt(var(seq))


def stdev_by(f: Callable, seq: Iterable) -> float:
    return math.sqrt(var_by(f, seq))


def stdev_population(seq: Iterable) -> float:
    """Population standard deviation."""
    return math.sqrt(var_population(seq))


def stdev_population_by(f: Callable, seq: Iterable) -> float:
    return math.sqrt(var_population_by(f, seq))


def sem(seq: Iterable) -> float:
    """Standard error of the mean ``stdev / sqrt(n)``."""
    data = list(seq)
    return ieee_div(stdev(data), math.sqrt(len(data)))


def _cv(values: Iterable, population: bool) -> float:
    n, m, m2 = _welford(values)
    v = _population_var(n, m2) if population else _sample_var(n, m2)
    return ieee_div(math.sqrt(v), m)


def cv(seq: Iterable) -> float:
    """Coefficient of variation ``stdev / mean`` (sample)."""
    return _cv(seq, population=False)


def cv_by(f: Callable, seq: Iterable) -> float:
    return _cv((f(x) for x in seq), population=False)


def cv_population(seq: Iterable) -> float:
    """Coefficient of variation ``stdev_population / mean``."""
    return _cv(seq, population=True)


def cv_population_by(f: Callable, seq: Iterable) -> float:
    return _cv((f(x) for x in seq), population=True)


# ═══════════════════════════════════════════════════════════════════════════
#  Covariance
# ═══════════════════════════════════════════════════════════════════════════

def _co_sums(x: np.ndarray, y: np.ndarray) -> Tuple[int, float]:
    """Return ``(n, sum(xy) - sum(x)sum(y)/n)``."""
    n = x.shape[0]
    centred = float(np.sum(x * y)) - ieee_div(float(np.sum(x)) * float(np.sum(y)), n)
    return n, centred


def cov(seq1: Iterable, seq2: Iterable) -> float:
    """Sample covariance (denominator N-1).

    Raises
    ------
    LengthMismatchError
        If the samples do not have the same length.
    """
    n, centred = _co_sums(*as_paired(seq1, seq2))
    return ieee_div(centred, n - 1)


def cov_of_pairs(pairs: Iterable[Tuple[float, float]]) -> float:
    return cov(*unzip_pairs(pairs))


def cov_by(f: Callable, seq: Iterable) -> float:
    """Sample covariance of the pairs ``f(item) -> (x, y)``."""
    return cov_of_pairs(f(item) for item in seq)


def cov_population(seq1: Iterable, seq2: Iterable) -> float:
    """Population covariance (denominator N)."""
    n, centred = _co_sums(*as_paired(seq1, seq2))
    return ieee_div(centred, n)


def cov_population_of_pairs(pairs: Iterable[Tuple[float, float]]) -> float:
    return cov_population(*unzip_pairs(pairs))


def cov_population_by(f: Callable, seq: Iterable) -> float:
    return cov_population_of_pairs(f(item) for item in seq)


# ═══════════════════════════════════════════════════════════════════════════
#  Range and summary statistics
# ═══════════════════════════════════════════════════════════════════════════

def value_range(seq: Iterable) -> Optional[Tuple[float, float]]:
    """``(min, max)`` in one pass, or ``None`` for an empty sample.

    A NaN anywhere in the sample gives ``(nan, nan)``.
    """
    it = iter(seq)
    first = next(it, _MISSING)
    if first is _MISSING:
        return None
    lo = hi = first
    for v in it:
        if v != v:
            return v, v
        if v < lo:
            lo = v
        if v > hi:
            hi = v
    return lo, hi


def value_range_by(f: Callable, seq: Iterable):
    """Items whose keys ``f(item)`` are minimal and maximal."""
    it = iter(seq)
    first = next(it, _MISSING)
    if first is _MISSING:
        return None
    lo_key = hi_key = f(first)
    lo_item = hi_item = first
    for item in it:
        key = f(item)
        if key < lo_key:
            lo_key, lo_item = key, item
        if key > hi_key:
            hi_key, hi_item = key, item
    return lo_item, hi_item


@dataclass(frozen=True)
class SummaryStats:
    """Sufficient statistics of a sample.

    Attributes
    ----------
    count : int
    mean : float
    m2 : float
        Sum of squared deviations from the mean.
    minimum, maximum : float
    """

    count: int
    mean: float
    m2: float
    minimum: float
    maximum: float

    @property
    def var(self) -> float:
        return _sample_var(self.count, self.m2)

    @property
    def var_population(self) -> float:
        return _population_var(self.count, self.m2)

    @property
    def stdev(self) -> float:
        return math.sqrt(self.var)

    @property
    def stdev_population(self) -> float:
        return math.sqrt(self.var_population)


def summary_stats(seq: Iterable) -> SummaryStats:
    """Count, mean, M2, min and max from a single Welford pass."""
    n = 0
    m = 0.0
    m2 = 0.0
    lo = hi = _NAN
    for v in seq:
        v = float(v)
        n += 1
        if n == 1 or v != v:
            lo = hi = v
        else:
            lo = min(lo, v)
            hi = max(hi, v)
        delta = v - m
        m += delta / n
        m2 += delta * (v - m)
    if n == 0:
        return SummaryStats(0, _NAN, _NAN, _NAN, _NAN)
    return SummaryStats(n, m, m2, lo, hi)


# ═══════════════════════════════════════════════════════════════════════════
#  Replicates and pooled dispersion
# ═══════════════════════════════════════════════════════════════════════════

def _chunks(rep: int, seq: Iterable):
    data = list(seq)
    if not isinstance(rep, int) or rep < 1:
        raise InvalidArgumentError(f"Replicate count must be a positive int, got {rep!r}.")
    if len(data) % rep != 0:
        raise InvalidArgumentError(
            f"Sample length {len(data)} is not a multiple of the replicate count {rep}."
        )
    return [data[i:i + rep] for i in range(0, len(data), rep)]


def mean_of_replicates(rep: int, seq: Iterable) -> np.ndarray:
    """Mean of each consecutive block of *rep* technical replicates."""
    return np.array([mean(c) for c in _chunks(rep, seq)])


def stdev_of_replicates(rep: int, seq: Iterable) -> np.ndarray:
    return np.array([stdev(c) for c in _chunks(rep, seq)])


def cv_of_replicates(rep: int, seq: Iterable) -> np.ndarray:
    return np.array([cv(c) for c in _chunks(rep, seq)])


def _pool(sizes: Sequence[int], variances: Sequence[float], offset: int) -> float:
    sizes = list(sizes)
    variances = list(variances)
    if len(sizes) != len(variances):
        raise LengthMismatchError(len(sizes), len(variances), what="sizes and variances")
    num = 0.0
    den = 0.0
    for size, v in zip(sizes, variances):
        dof = size - offset
        num += float(v) * dof
        den += dof
    return ieee_div(num, den)


def pooled_var_of(sizes: Sequence[int], variances: Sequence[float]) -> float:
    """Pooled sample variance from group sizes and sample variances.

    ``sum((n_i - 1) s_i^2) / sum(n_i - 1)``
    """
    return _pool(sizes, variances, offset=1)


def pooled_var(samples: Iterable[Iterable]) -> float:
    """Pooled sample variance of several groups."""
    groups = [list(s) for s in samples]
    return pooled_var_of([len(g) for g in groups], [var(g) for g in groups])


def pooled_var_population_of(sizes: Sequence[int], variances: Sequence[float]) -> float:
    """Pooled population variance ``sum(n_i sigma_i^2) / sum(n_i)``."""
    return _pool(sizes, variances, offset=0)


def pooled_var_population(samples: Iterable[Iterable]) -> float:
    groups = [list(s) for s in samples]
    return pooled_var_population_of(
        [len(g) for g in groups], [var_population(g) for g in groups]
    )


def pooled_stdev_of(sizes: Sequence[int], variances: Sequence[float]) -> float:
    return math.sqrt(pooled_var_of(sizes, variances))


def pooled_stdev(samples: Iterable[Iterable]) -> float:
    return math.sqrt(pooled_var(samples))


def pooled_stdev_population_of(sizes: Sequence[int], variances: Sequence[float]) -> float:
    return math.sqrt(pooled_var_population_of(sizes, variances))


def pooled_stdev_population(samples: Iterable[Iterable]) -> float:
    return math.sqrt(pooled_var_population(samples))
