"""Histogram backends."""

from pysample.binning.backends.cpu import CPUHistogramBackend

__all__ = ["CPUHistogramBackend"]
