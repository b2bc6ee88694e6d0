"""
Result container for correlation matrices in corrstat.

``Pairwise`` returns a ``Result`` rather than a bare NumPy array.  It keeps
the metric name and vector labels next to the values while still behaving
like an array (``np.asarray(result)``, indexing, ``.shape``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np


# ---------------------------------------------------------------------------
# Lazy optional import – pandas is only needed for .to_dataframe()
# ---------------------------------------------------------------------------

def _require_pandas():
    try:
        import pandas as pd
        return pd
    except ImportError:
        raise ImportError(
            "pandas is required for .to_dataframe(). "
            "Install it with: pip install corrstat[dataframe]"
        )


@dataclass
class Result:
    """Container returned by every ``Pairwise`` metric.

    Parameters
    ----------
    metric : str
        Name of the measure (``"pearson"``, ``"kendall"``, ``"bicor"``, …).
    values : np.ndarray
        ``(N, N)`` correlation matrix.
    names : list[str] or None
        Optional labels of the *N* vectors.
    extra : dict
        Anything else a metric wants to keep (e.g. the axis used).

    Examples
    --------
    >>> res = Pairwise(m).bicor
    >>> res.values          # raw (N, N) array
    >>> res.is_symmetric()
    True
    >>> res.to_dataframe()  # labelled pandas DataFrame
    """

    metric: str
    values: np.ndarray
    names: Optional[Sequence[str]] = None
    extra: dict = field(default_factory=dict)

    # ── array-like access ──────────────────────────────────────────────

    @property
    def matrix(self) -> np.ndarray:
        """Alias for ``values``."""
        return self.values

    @property
    def shape(self) -> tuple:
        return self.values.shape

    def __array__(self, dtype=None, copy=None):
        """Allow ``np.asarray(result)``; ``copy=True`` always returns a new array."""
        if copy:
            return np.array(self.values, dtype=dtype, copy=True)
        return np.asarray(self.values, dtype=dtype)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, idx):
        return self.values[idx]

    # ── checks ─────────────────────────────────────────────────────────

    def is_symmetric(self) -> bool:
        """``True`` when the matrix equals its transpose (NaN == NaN)."""
        v = self.values
        return v.ndim == 2 and v.shape[0] == v.shape[1] and bool(
            np.array_equal(v, v.T, equal_nan=True)
        )

    def off_diagonal(self) -> np.ndarray:
        """Upper-triangle entries (``i < j``) as a flat array."""
        return self.values[np.triu_indices_from(self.values, k=1)]

    # ── repr ───────────────────────────────────────────────────────────

    def _summary_stats(self) -> dict:
        stats = {"shape": self.values.shape}
        off = self.off_diagonal()
        if off.size and not np.all(np.isnan(off)):
            stats["mean"] = float(np.nanmean(off))
            stats["max"] = float(np.nanmax(off))
            stats["min"] = float(np.nanmin(off))
        n_nan = int(np.sum(np.isnan(off)))
        if n_nan:
            stats["undefined"] = f"{n_nan}/{off.size}"
        return stats

    def __repr__(self) -> str:
        parts = [f"Result(metric='{self.metric}'"]
        for k, v in self._summary_stats().items():
            if isinstance(v, float):
                parts.append(f"  {k}={v:.4f}")
            else:
                parts.append(f"  {k}={v}")
        return ",\n".join(parts) + "\n)"

    # ── export ─────────────────────────────────────────────────────────

    def to_dataframe(self, names: Optional[Sequence[str]] = None):
        """Export to a labelled ``pandas.DataFrame``.

        Parameters
        ----------
        names : list[str], optional
            Override labels.  Falls back to ``self.names`` or
            auto-generated ``v_0, v_1, …``.
        """
        pd = _require_pandas()
        labels = names or self.names
        n = self.values.shape[0]
        if labels is None:
            labels = [f"v_{i}" for i in range(n)]
        return pd.DataFrame(self.values, index=list(labels), columns=list(labels))
