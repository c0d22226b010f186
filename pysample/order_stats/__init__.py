"""
Order statistics: continuous quantile estimators.

Provides the six continuous Hyndman & Fan sample quantile definitions
(R types 4-9) and the interquartile range built on them.

Public API:
    continuous_by(x, param=, p=) - quantile under a chosen definition
    quantiles(x, probs, param=)  - several quantiles, one sort
    iqr(x, param=)               - interquartile range
    quantile(x, p)               - quantile, default definition (S)
    ContinuousParam              - CADPW, HAZEN, SPSS, S,
                                   MEDIAN_UNBIASED, NORMAL_UNBIASED
"""

from pysample.order_stats._continuous import ContinuousParam
from pysample.order_stats.solvers import continuous_by, quantiles, iqr, quantile

__all__ = [
    "continuous_by",
    "quantiles",
    "iqr",
    "quantile",
    "ContinuousParam",
]
