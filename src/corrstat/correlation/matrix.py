"""
Correlation matrices over the rows or columns of a 2-D array.

Only the upper triangle is evaluated; each value is mirrored into the
lower triangle and the diagonal is fixed at 1.  Every cell depends on its
two input vectors alone, so the result does not depend on evaluation
order.

Functions
---------
row_wise_correlation_matrix, column_wise_correlation_matrix
    Any symmetric pairwise measure.
row_wise_pearson, column_wise_pearson
row_wise_bicor, column_wise_bicor
    Profile each vector once, then combine pairs.
rv2
    Modified RV coefficient between two matrices sharing their rows.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from ..core.exceptions import LengthMismatchError
from ..core.validation import as_matrix, ieee_div
from ..utils.logging import get_logger
from .linear import pearson
from .robust import bicor_profile

logger = get_logger("corrstat.correlation.matrix")

CorrFn = Callable[[np.ndarray, np.ndarray], float]


def row_wise_correlation_matrix(corr_fn: CorrFn, matrix) -> np.ndarray:
    """Symmetric (n, n) matrix of ``corr_fn(row_i, row_j)``.

    Parameters
    ----------
    corr_fn : callable
        Symmetric pairwise measure taking two 1-D arrays.
    matrix : array-like, shape (n, m)

    Returns
    -------
    np.ndarray, shape (n, n)
        Unit diagonal; ``M[i, j] == M[j, i]``.
    """
    m = as_matrix(matrix)
    n = m.shape[0]
    logger.debug(f"Row-wise {getattr(corr_fn, '__name__', 'correlation')} over {n} vectors of length {m.shape[1]}.")

    result = np.eye(n)
    for i in range(n):
        for j in range(i + 1, n):
            r = corr_fn(m[i], m[j])
            result[i, j] = r
            result[j, i] = r
    return result


def column_wise_correlation_matrix(corr_fn: CorrFn, matrix) -> np.ndarray:
    """Like :func:`row_wise_correlation_matrix`, over columns."""
    return row_wise_correlation_matrix(corr_fn, as_matrix(matrix).T)


def row_wise_pearson(matrix) -> np.ndarray:
    return row_wise_correlation_matrix(pearson, matrix)


def column_wise_pearson(matrix) -> np.ndarray:
    return column_wise_correlation_matrix(pearson, matrix)


def row_wise_bicor(matrix) -> np.ndarray:
    """Bicor matrix over rows.

    Median, MAD, weights and normalisation factor of each row are computed
    exactly once before the pairwise loop.
    """
    m = as_matrix(matrix)
    n = m.shape[0]
    logger.debug(f"Row-wise bicor over {n} vectors of length {m.shape[1]}.")

    profiles = [bicor_profile(row) for row in m]

    result = np.eye(n)
    for i in range(n):
        for j in range(i + 1, n):
            r = profiles[i].correlate(profiles[j])
            result[i, j] = r
            result[j, i] = r
    return result


def column_wise_bicor(matrix) -> np.ndarray:
    return row_wise_bicor(as_matrix(matrix).T)


def rv2(x, y) -> float:
    r"""Modified RV coefficient (Smilde et al., 2009).

    .. math::

        RV_2 = \frac{\mathrm{tr}(\tilde{X}\tilde{Y})}
                    {\lVert\tilde{X}\rVert_F \, \lVert\tilde{Y}\rVert_F},
        \qquad \tilde{X} = XX^\top - \mathrm{diag}(XX^\top)

    Parameters
    ----------
    x : array-like, shape (n, p)
    y : array-like, shape (n, q)

    Raises
    ------
    LengthMismatchError
        If *x* and *y* do not have the same number of rows.
    """
    xm = as_matrix(x)
    ym = as_matrix(y)
    if xm.shape[0] != ym.shape[0]:
        raise LengthMismatchError(xm.shape[0], ym.shape[0], what="matrix row counts")

    xxt = xm @ xm.T
    yyt = ym @ ym.T
    np.fill_diagonal(xxt, 0.0)
    np.fill_diagonal(yyt, 0.0)

    # both symmetric: trace(A @ B) == sum(A * B)
    num = float(np.sum(xxt * yyt))
    deno1 = float(np.sqrt(np.sum(xxt ** 2)))
    deno2 = float(np.sqrt(np.sum(yyt ** 2)))
    return ieee_div(num, deno1 * deno2)
