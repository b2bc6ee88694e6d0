"""
``corrstat.descriptive``: streaming descriptive statistics.

Means (arithmetic, weighted, harmonic, geometric, quadratic, trimmed),
variance, standard deviation, coefficient of variation, covariance,
quickselect median and MAD, average ranks, summary statistics and
pooled/replicate helpers.  Each ``*_by`` variant maps its input through a
function first.
"""

from .accumulators import (
    SummaryStats,
    cov,
    cov_by,
    cov_of_pairs,
    cov_population,
    cov_population_by,
    cov_population_of_pairs,
    cv,
    cv_by,
    cv_of_replicates,
    cv_population,
    cv_population_by,
    mean,
    mean_by,
    mean_geometric,
    mean_geometric_by,
    mean_harmonic,
    mean_harmonic_by,
    mean_of_replicates,
    mean_quadratic,
    mean_quadratic_by,
    mean_truncated,
    mean_truncated_by,
    pooled_stdev,
    pooled_stdev_of,
    pooled_stdev_population,
    pooled_stdev_population_of,
    pooled_var,
    pooled_var_of,
    pooled_var_population,
    pooled_var_population_of,
    sem,
    stdev,
    stdev_by,
    stdev_of_replicates,
    stdev_population,
    stdev_population_by,
    summary_stats,
    value_range,
    value_range_by,
    var,
    var_by,
    var_population,
    var_population_by,
    weighted_mean,
)
from .median import median, median_absolute_dev
from .rank import rank_average

__all__ = [
    "SummaryStats",
    "cov",
    "cov_by",
    "cov_of_pairs",
    "cov_population",
    "cov_population_by",
    "cov_population_of_pairs",
    "cv",
    "cv_by",
    "cv_of_replicates",
    "cv_population",
    "cv_population_by",
    "mean",
    "mean_by",
    "mean_geometric",
    "mean_geometric_by",
    "mean_harmonic",
    "mean_harmonic_by",
    "mean_of_replicates",
    "mean_quadratic",
    "mean_quadratic_by",
    "mean_truncated",
    "mean_truncated_by",
    "median",
    "median_absolute_dev",
    "pooled_stdev",
    "pooled_stdev_of",
    "pooled_stdev_population",
    "pooled_stdev_population_of",
    "pooled_var",
    "pooled_var_of",
    "pooled_var_population",
    "pooled_var_population_of",
    "rank_average",
    "sem",
    "stdev",
    "stdev_by",
    "stdev_of_replicates",
    "stdev_population",
    "stdev_population_by",
    "summary_stats",
    "value_range",
    "value_range_by",
    "var",
    "var_by",
    "var_population",
    "var_population_by",
    "weighted_mean",
]
