"""
corrstat - Descriptive statistics and correlation kernels
=========================================================

Numerically careful building blocks for exploratory statistics on
float64 data: streaming (Welford) means and dispersion, quickselect
median and MAD, average ranks, Pearson / Spearman / Kendall tau A-B-C,
biweighted midcorrelation and correlation matrices.

Subpackages:
------------
- descriptive: means, variance, covariance, median, ranks
- correlation: pairwise measures, matrix builders, ``Pairwise`` analysis
- core: configuration and exceptions
- utils: logging
"""

from . import correlation, descriptive
from .core import (
    CorrStatError,
    InvalidArgumentError,
    LengthMismatchError,
    StatsConfig,
    configure,
    get_config,
    reset_config,
)

__version__ = "0.1.0"

__all__ = [
    "correlation",
    "descriptive",
    "CorrStatError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "StatsConfig",
    "configure",
    "get_config",
    "reset_config",
]
