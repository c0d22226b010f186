"""
PySample: sample statistics for Python.

Order statistics, ranks, quantiles, histograms, resampling and kernel
density estimation over one-dimensional samples of observations, with
results matching R's definitions.

Submodules:
    ranks: Ranks with tie resolution and tie-correction factor
    order_stats: Continuous quantile estimators and IQR
    binning: Uniform-width histograms
    resampling: Fisher-Yates shuffle and with/without-replacement sampling
    kde: Kernel density estimation with rule-of-thumb bandwidths
"""

__version__ = "0.1.0"

from pysample.ranks import rank, TiesStrategy
from pysample.order_stats import continuous_by, quantiles, quantile, iqr, ContinuousParam
from pysample.binning import histogram
from pysample.resampling import shuffle, sample, bootstrap_indices
from pysample.kde import estimate_pdf, Kernel, BandwidthRule

__all__ = [
    "__version__",
    # Ranks
    "rank",
    "TiesStrategy",
    # Quantiles
    "continuous_by",
    "quantiles",
    "quantile",
    "iqr",
    "ContinuousParam",
    # Histogram
    "histogram",
    # Resampling
    "shuffle",
    "sample",
    "bootstrap_indices",
    # KDE
    "estimate_pdf",
    "Kernel",
    "BandwidthRule",
]
