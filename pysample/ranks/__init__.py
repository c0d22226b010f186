"""
Sample ranks.

Public API:
    rank(values)      - ranks with tie resolution and tie-correction factor
    tie_correction()  - correction factor from known tie group sizes
    TiesStrategy      - AVERAGE, MIN, MAX
"""

from pysample.ranks._ties import TiesStrategy, tie_correction
from pysample.ranks.solution import RankParams, RankSolution
from pysample.ranks.solvers import rank

__all__ = [
    "rank",
    "tie_correction",
    "TiesStrategy",
    "RankParams",
    "RankSolution",
]
