"""
Resampling primitives.

Public API:
    shuffle(x, rng=)                   - Fisher-Yates permutation (copy)
    sample(x, rng=, replace=, size=)   - draw with or without replacement
    bootstrap_indices(n, rng=, size=)  - index draws for aligned resamples
"""

from pysample.resampling.solvers import shuffle, sample, bootstrap_indices

__all__ = [
    "shuffle",
    "sample",
    "bootstrap_indices",
]
