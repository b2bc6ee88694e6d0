"""
Biweighted midcorrelation (bicor).

A median/MAD based alternative to Pearson.  Each observation is scaled by
its distance from the median in units of ``c * MAD`` (``c = 9`` by
default); points at or beyond one unit get zero weight:

.. math::

    u_i = \\frac{x_i - \\mathrm{med}(x)}{c\\,\\mathrm{MAD}(x)}, \\qquad
    w_i = (1 - u_i^2)^2 \\, I(|u_i| < 1)

    \\tilde{x}_i = \\frac{(x_i - \\mathrm{med}(x))\\,w_i}
                        {\\sqrt{\\sum_j [(x_j - \\mathrm{med}(x))\\,w_j]^2}}, \\qquad
    \\mathrm{bicor}(x, y) = \\sum_i \\tilde{x}_i \\tilde{y}_i

A zero MAD leaves nothing to normalise by and the result is NaN.

References
----------
Wilcox, R. R. (2012). *Introduction to Robust Estimation and Hypothesis
Testing*, 3rd ed.  Langfelder, P. & Horvath, S. (2012). "Fast R Functions
for Robust Correlations and Hierarchical Clustering." JSS, 46(11).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

import numpy as np

from ..core.config import get_config
from ..core.validation import as_paired, as_sample, unzip_pairs
from ..descriptive.median import median, median_absolute_dev


@dataclass(frozen=True)
class BicorProfile:
    """Per-sample statistics reused across every pair a sample takes part in.

    Attributes
    ----------
    median : float
    mad : float
    weights : np.ndarray        biweights ``w_i``
    norm_factor : float         ``sqrt(sum(((x - med) * w)^2))``
    normalized : np.ndarray     ``(x - med) * w / norm_factor``
    """

    median: float
    mad: float
    weights: np.ndarray
    norm_factor: float
    normalized: np.ndarray

    def correlate(self, other: "BicorProfile") -> float:
        """Bicor between the two profiled samples."""
        return float(np.sum(self.normalized * other.normalized))


def bicor_profile(
        values: Iterable,
        tuning_constant: Optional[float] = None,
        rng: Optional[np.random.Generator] = None,
) -> BicorProfile:
    """Median, MAD, biweights and normalised values of one sample.

    Parameters
    ----------
    values : iterable of float
    tuning_constant : float, optional
        MAD multiple at which weights reach zero.  Defaults to
        ``get_config().bicor_tuning_constant``.
    rng : np.random.Generator, optional
        Passed to the quickselect median.
    """
    x = as_sample(values)
    c = tuning_constant if tuning_constant is not None else get_config().bicor_tuning_constant

    med = median(x, rng=rng)
    mad = median_absolute_dev(x, rng=rng)
    centred = x - med

    with np.errstate(divide="ignore", invalid="ignore"):
        dev = centred / (c * mad)
        weights = np.where(np.abs(dev) < 1.0, (1.0 - dev ** 2) ** 2, 0.0)
        scaled = centred * weights
        norm_factor = float(np.sqrt(np.sum(scaled ** 2)))
        normalized = scaled / norm_factor

    return BicorProfile(
        median=med,
        mad=mad,
        weights=weights,
        norm_factor=norm_factor,
        normalized=normalized,
    )


def bicor(seq1: Iterable, seq2: Iterable) -> float:
    """Biweighted midcorrelation of two equal-length samples.

    Raises
    ------
    LengthMismatchError
        If the samples do not have the same length.
    """
    x, y = as_paired(seq1, seq2)
    return bicor_profile(x).correlate(bicor_profile(y))


def bicor_of_pairs(pairs: Iterable[Tuple[float, float]]) -> float:
    return bicor(*unzip_pairs(pairs))


def bicor_by(f: Callable, seq: Iterable) -> float:
    return bicor_of_pairs(f(item) for item in seq)
