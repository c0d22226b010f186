"""
Kernel density estimation.

Univariate KDE with rule-of-thumb bandwidth selection and optional GPU
acceleration.

Public API:
    estimate_pdf(x, kernel=, bandwidth=, points=) - density on a uniform grid
    select_bandwidth(x, rule)                     - rule-of-thumb bandwidth
    Kernel                                        - GAUSSIAN
    BandwidthRule                                 - SILVERMAN, SCOTT

Example:
    >>> import numpy as np
    >>> from pysample.kde import estimate_pdf
    >>> x = np.random.default_rng(0).standard_normal(1000)
    >>> grid, pdf = estimate_pdf(x, points=10)
"""

from pysample.kde._bandwidth import BandwidthRule, select_bandwidth
from pysample.kde._kernels import Kernel
from pysample.kde.design import KDEDesign
from pysample.kde.solution import KDEParams, KDESolution
from pysample.kde.solvers import estimate_pdf

__all__ = [
    "estimate_pdf",
    "select_bandwidth",
    "Kernel",
    "BandwidthRule",
    "KDEDesign",
    "KDEParams",
    "KDESolution",
]
