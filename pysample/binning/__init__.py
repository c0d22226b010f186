"""
Histogram binning.

Public API:
    histogram(x, bins=, range=, weights=, density=) - uniform-width histogram
"""

from pysample.binning.design import HistogramDesign, default_range
from pysample.binning.solution import HistogramParams, HistogramSolution
from pysample.binning.solvers import histogram

__all__ = [
    "histogram",
    "default_range",
    "HistogramDesign",
    "HistogramParams",
    "HistogramSolution",
]
