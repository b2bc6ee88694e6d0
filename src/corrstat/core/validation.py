"""
Input coercion and validation shared by every kernel.

All functions return fresh float64 views or copies; nothing here mutates
the caller's object.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from .exceptions import InvalidArgumentError, LengthMismatchError


def as_sample(values: Iterable) -> np.ndarray:
    """Coerce any iterable of real numbers into a 1-D float64 array.

    Raises
    ------
    InvalidArgumentError
        If the input is not one-dimensional.
    """
    if not isinstance(values, np.ndarray):
        values = list(values)
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"sample must be 1-D, got ndim={arr.ndim}.")
    return arr


def as_paired(seq1: Iterable, seq2: Iterable) -> Tuple[np.ndarray, np.ndarray]:
    """Coerce two samples and enforce equal length."""
    x = as_sample(seq1)
    y = as_sample(seq2)
    if x.shape[0] != y.shape[0]:
        raise LengthMismatchError(x.shape[0], y.shape[0])
    return x, y


def as_weighted(
        seq1: Iterable, seq2: Iterable, weights: Iterable
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Coerce two samples plus weights and enforce equal length."""
    x = as_sample(seq1)
    y = as_sample(seq2)
    w = as_sample(weights)
    if not (x.shape[0] == y.shape[0] == w.shape[0]):
        raise LengthMismatchError(x.shape[0], y.shape[0], w.shape[0])
    return x, y, w


def unzip_pairs(pairs: Iterable, width: int = 2) -> Tuple[np.ndarray, ...]:
    """Split an iterable of tuples into ``width`` float64 columns."""
    rows = [tuple(p) for p in pairs]
    if not rows:
        return tuple(np.empty(0) for _ in range(width))
    if any(len(r) != width for r in rows):
        raise InvalidArgumentError(f"Every item must be a {width}-tuple.")
    arr = np.asarray(rows, dtype=np.float64)
    return tuple(arr[:, k] for k in range(width))


def as_matrix(m) -> np.ndarray:
    """Coerce into a 2-D float64 array."""
    arr = np.asarray(m, dtype=np.float64)
    if arr.ndim != 2:
        raise InvalidArgumentError(f"matrix must be 2-D, got ndim={arr.ndim}.")
    return arr


def ieee_div(num: float, den: float) -> float:
    """Floating-point division that yields inf/NaN instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))
