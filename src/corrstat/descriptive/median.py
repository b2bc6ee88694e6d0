"""
Order statistics by randomized quickselect.

``median`` copies its input into a private working list and partitions it
in place around random pivots until the middle order statistic lands in
position.  A three-way (less / equal / greater) partition keeps runs of
duplicate values from degrading the selection to quadratic time.

NaN never compares equal, less or greater, so a partition that meets a
NaN cannot make progress.  Every first partition scans the whole working
list, so any NaN in the input is found there and the result is NaN.

Example
-------
>>> from corrstat.descriptive import median, median_absolute_dev
>>> median([1, 2, 3, 4, 5])
3.0
>>> median([1, 2, 3, 4])
2.5
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..core.config import get_config
from ..utils.logging import get_logger

logger = get_logger("corrstat.descriptive.median")

_NAN = float("nan")


def _default_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(get_config().seed)


def _partition(
        items: List[float], left: int, right: int, rng: np.random.Generator
) -> Optional[Tuple[int, int]]:
    """Three-way partition of ``items[left:right+1]`` around a random pivot.

    Returns
    -------
    (lt, gt) : bounds of the block equal to the pivot, or ``None`` when a
    NaN was met.
    """
    pivot = items[left + int(rng.integers(right - left + 1))]
    if pivot != pivot:
        return None

    lt, i, gt = left, left, right
    while i <= gt:
        v = items[i]
        if v != v:
            return None
        if v < pivot:
            items[lt], items[i] = items[i], items[lt]
            lt += 1
            i += 1
        elif v > pivot:
            items[i], items[gt] = items[gt], items[i]
            gt -= 1
        else:
            i += 1
    return lt, gt


def _quickselect(
        items: List[float], k: int, left: int, right: int, rng: np.random.Generator
) -> float:
    """k-th smallest (0-based) element of ``items[left:right+1]``."""
    while True:
        bounds = _partition(items, left, right, rng)
        if bounds is None:
            logger.debug("NaN encountered during partitioning; median is NaN.")
            return _NAN
        lt, gt = bounds
        if k < lt:
            right = lt - 1
        elif k > gt:
            left = gt + 1
        else:
            return items[k]


def median(seq: Iterable, rng: Optional[np.random.Generator] = None) -> float:
    """Median via quickselect.

    Parameters
    ----------
    seq : iterable of float
        The sample.  Not modified.
    rng : np.random.Generator, optional
        Pivot source.  Defaults to a generator seeded from
        ``get_config().seed``.

    Returns
    -------
    float
        Middle order statistic for odd lengths, mean of the two middle
        order statistics for even lengths.  NaN for an empty sample or
        when the sample contains NaN.
    """
    items = [float(v) for v in seq]
    n = len(items)
    if n == 0:
        return _NAN

    rng = _default_rng(rng)
    mid = n // 2
    upper = _quickselect(items, mid, 0, n - 1, rng)
    if n % 2 == 1 or upper != upper:
        return upper

    # items[:mid] now holds the mid smallest values
    lower = _quickselect(items, mid - 1, 0, mid - 1, rng)
    return (lower + upper) / 2.0


def median_absolute_dev(seq: Iterable, rng: Optional[np.random.Generator] = None) -> float:
    """Median of the absolute deviations from the median."""
    data = [float(v) for v in seq]
    rng = _default_rng(rng)
    center = median(data, rng=rng)
    return median([abs(v - center) for v in data], rng=rng)
