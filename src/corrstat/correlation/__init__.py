"""
``corrstat.correlation``: correlation measures between samples.

Quick-start
-----------
>>> from corrstat import correlation as corr
>>>
>>> corr.pearson(x, y)
>>> corr.spearman(x, y)
>>> corr.kendall_tau_b(x, y)
>>> corr.bicor(x, y)                       # robust to outliers
>>>
>>> corr.column_wise_correlation_matrix(corr.spearman, m)
>>> corr.Pairwise(m, axis="columns").bicor

Modules
-------
linear
    Pearson (plain and weighted), lagged correlation.
nonparametric
    Spearman, Kendall tau A/B/C.
robust
    Biweighted midcorrelation.
matrix
    Row/column-wise correlation matrices, RV2 coefficient.
pairwise
    ``Pairwise`` analysis object returning ``Result`` containers.
"""

from ..descriptive.rank import rank_average
from .linear import (
    auto_correlation,
    auto_covariance,
    correlation_of,
    normalized_xcorr,
    pearson,
    pearson_by,
    pearson_of_pairs,
    pearson_weighted,
    pearson_weighted_by,
    pearson_weighted_of_triples,
    xcorr,
)
from .matrix import (
    column_wise_bicor,
    column_wise_correlation_matrix,
    column_wise_pearson,
    row_wise_bicor,
    row_wise_correlation_matrix,
    row_wise_pearson,
    rv2,
)
from .nonparametric import (
    TieTally,
    kendall,
    kendall_by,
    kendall_of_pairs,
    kendall_tally,
    kendall_tau_a,
    kendall_tau_b,
    kendall_tau_c,
    spearman,
    spearman_by,
    spearman_of_pairs,
)
from .pairwise import Pairwise
from .result import Result
from .robust import BicorProfile, bicor, bicor_by, bicor_of_pairs, bicor_profile

__all__ = [
    "auto_correlation",
    "auto_covariance",
    "correlation_of",
    "normalized_xcorr",
    "pearson",
    "pearson_by",
    "pearson_of_pairs",
    "pearson_weighted",
    "pearson_weighted_by",
    "pearson_weighted_of_triples",
    "xcorr",
    "column_wise_bicor",
    "column_wise_correlation_matrix",
    "column_wise_pearson",
    "row_wise_bicor",
    "row_wise_correlation_matrix",
    "row_wise_pearson",
    "rv2",
    "TieTally",
    "kendall",
    "kendall_by",
    "kendall_of_pairs",
    "kendall_tally",
    "kendall_tau_a",
    "kendall_tau_b",
    "kendall_tau_c",
    "rank_average",
    "spearman",
    "spearman_by",
    "spearman_of_pairs",
    "Pairwise",
    "Result",
    "BicorProfile",
    "bicor",
    "bicor_by",
    "bicor_of_pairs",
    "bicor_profile",
]
