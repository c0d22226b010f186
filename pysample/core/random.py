"""
Random source resolution.

Every randomized operation accepts ``rng`` as None, an integer seed, or
an object implementing RandomSource. resolve_rng() turns that into a
usable source without storing caller-supplied instances anywhere.
"""

from __future__ import annotations

import numpy as np

from pysample.core.exceptions import ValidationError
from pysample.core.protocols import RandomSource

_default_rng: np.random.Generator | None = None


def default_rng() -> np.random.Generator:
    """Process-wide generator, created on first use with OS entropy."""
    global _default_rng
    if _default_rng is None:
        _default_rng = np.random.default_rng()
    return _default_rng


def resolve_rng(rng: RandomSource | int | None = None) -> RandomSource:
    """
    Resolve the ``rng`` argument of a randomized operation.

    Parameters
    ----------
    rng : RandomSource, int, or None
        None uses the process-default generator. An integer is a seed for
        a fresh numpy Generator, so equal seeds give equal draws. Any
        object with ``integers`` and ``random`` methods is used as is.

    Returns
    -------
    RandomSource
    """
    if rng is None:
        return default_rng()
    if isinstance(rng, (bool, np.bool_)):
        raise ValidationError(f"rng: expected a seed or random source, got {rng!r}")
    if isinstance(rng, (int, np.integer)):
        if rng < 0:
            raise ValidationError(f"rng: seed must be non-negative, got {rng}")
        return np.random.default_rng(int(rng))
    if isinstance(rng, RandomSource):
        return rng
    raise ValidationError(
        f"rng: expected None, an integer seed, or an object with "
        f"integers() and random() methods, got {type(rng).__name__}"
    )
