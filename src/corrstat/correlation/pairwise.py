"""
Pairwise correlation structure of a data matrix.

This module provides the ``Pairwise`` class, which treats either the rows
or the columns of a 2-D array as samples and builds their correlation
matrices under several measures.

Classes
-------
Pairwise
    Pearson, Spearman, Kendall tau-b and bicor matrices, each computed on
    first access and cached.

Example
-------
>>> from corrstat.correlation import Pairwise
>>> pw = Pairwise(m, axis="columns", names=["a", "b", "c"])
>>> pw.pearson             # N×N Pearson matrix
>>> pw.bicor               # N×N robust matrix
>>> print(pw.summary())
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np

from ..core.exceptions import InvalidArgumentError
from ..core.validation import as_matrix
from .matrix import row_wise_bicor, row_wise_correlation_matrix
from .linear import pearson
from .nonparametric import kendall_tau_b, spearman
from .result import Result

_AXES = ("rows", "columns")


class Pairwise:
    """Correlation matrices between the rows (or columns) of *matrix*.

    Parameters
    ----------
    matrix : array-like, shape (n, m)
    axis : ``"rows"`` | ``"columns"``
        Which vectors are the samples.  Default ``"rows"``.
    names : list[str], optional
        Labels for the *N* samples.

    Attributes (all lazily computed on first access)
    -------------------------------------------------
    pearson : Result
    spearman : Result
    kendall : Result      tau-b
    bicor : Result
    """

    def __init__(
            self,
            matrix,
            axis: str = "rows",
            names: Optional[Sequence[str]] = None,
    ):
        if axis not in _AXES:
            raise InvalidArgumentError(f"axis must be one of {_AXES}, got '{axis}'.")
        m = as_matrix(matrix)
        self._vectors = m if axis == "rows" else m.T
        self._axis = axis
        self._N, self._L = self._vectors.shape
        if names is not None and len(names) != self._N:
            raise InvalidArgumentError(
                f"Got {len(names)} names for {self._N} {axis}."
            )
        self._names = list(names) if names is not None else None

        # lazy cache
        self._cache: Dict[str, Result] = {}

    def _result(self, metric: str, values: np.ndarray) -> Result:
        return Result(
            metric=metric,
            values=values,
            names=self._names,
            extra={"axis": self._axis},
        )

    def _pairwise(self, metric: str, corr_fn) -> Result:
        if metric not in self._cache:
            values = row_wise_correlation_matrix(corr_fn, self._vectors)
            self._cache[metric] = self._result(metric, values)
        return self._cache[metric]

    # ── properties (lazy) ──────────────────────────────────────────────

    @property
    def pearson(self) -> Result:
        """N×N Pearson correlation matrix."""
        return self._pairwise("pearson", pearson)

    @property
    def spearman(self) -> Result:
        """N×N Spearman rank correlation matrix."""
        return self._pairwise("spearman", spearman)

    @property
    def kendall(self) -> Result:
        """N×N Kendall tau-b matrix."""
        return self._pairwise("kendall", kendall_tau_b)

    @property
    def bicor(self) -> Result:
        """N×N biweighted midcorrelation matrix (per-vector stats cached)."""
        if "bicor" not in self._cache:
            self._cache["bicor"] = self._result("bicor", row_wise_bicor(self._vectors))
        return self._cache["bicor"]

    # ── summary ────────────────────────────────────────────────────────

    def summary(self) -> str:
        """Quick diagnostic string."""
        lines = [f"Pairwise Analysis  |  N={self._N} {self._axis}, length={self._L}"]
        for res in (self.pearson, self.spearman, self.kendall, self.bicor):
            off = res.off_diagonal()
            finite = off[~np.isnan(off)]
            if finite.size:
                lines.append(
                    f"  {res.metric:<9} mean|r|={np.mean(np.abs(finite)):.4f}  "
                    f"max|r|={np.max(np.abs(finite)):.4f}  "
                    f"undefined={off.size - finite.size}/{off.size}"
                )
            else:
                lines.append(f"  {res.metric:<9} undefined={off.size}/{off.size}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Pairwise(N={self._N}, axis='{self._axis}', length={self._L})"
