"""
Tests for random source resolution.
"""

import numpy as np
import pytest

from pysample.core import RandomSource
from pysample.core.exceptions import ValidationError
from pysample.core.random import default_rng, resolve_rng


class FixedSource:
    def integers(self, low, high=None, size=None):
        return low

    def random(self, size=None):
        return 0.5


class TestResolveRng:

    def test_none_is_process_default(self):
        assert resolve_rng(None) is default_rng()
        assert resolve_rng() is resolve_rng()

    def test_seed_gives_fresh_generator(self):
        a = resolve_rng(17)
        b = resolve_rng(17)
        assert a is not b
        np.testing.assert_array_equal(a.integers(0, 1000, size=10), b.integers(0, 1000, size=10))

    def test_numpy_integer_seed(self):
        assert isinstance(resolve_rng(np.int64(3)), np.random.Generator)

    def test_generator_passthrough(self):
        gen = np.random.default_rng(0)
        assert resolve_rng(gen) is gen

    def test_custom_source_passthrough(self):
        source = FixedSource()
        assert isinstance(source, RandomSource)
        assert resolve_rng(source) is source

    def test_negative_seed(self):
        with pytest.raises(ValidationError, match="non-negative"):
            resolve_rng(-5)

    @pytest.mark.parametrize("bad", [True, 1.5, "42", object()])
    def test_rejected(self, bad):
        with pytest.raises(ValidationError, match="rng"):
            resolve_rng(bad)
