"""
Average-rank transform.

Ties share the mean of the 1-based positions they occupy in sorted order,
so ``[10, 20, 20, 30]`` ranks as ``[1, 2.5, 2.5, 4]``.  NaN observations
are left out of the ordering and receive rank NaN.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..core.validation import as_sample


def rank_average(seq: Iterable) -> np.ndarray:
    """Average ranks (1-based, float64) of *seq*.

    Returns
    -------
    ranks : np.ndarray, shape (n,)
    """
    x = as_sample(seq)
    ranks = np.full(x.shape[0], np.nan)

    valid = np.flatnonzero(~np.isnan(x))
    order = valid[np.argsort(x[valid], kind="stable")]
    ordered = x[order]

    m = order.shape[0]
    a = 0
    while a < m:
        b = a
        while b + 1 < m and ordered[b + 1] == ordered[a]:
            b += 1
        ranks[order[a:b + 1]] = ((a + 1) + (b + 1)) / 2.0
        a = b + 1
    return ranks
