"""
Density estimation backends.

cpu: float64 direct summation (reference).
gpu: float32 direct summation with PyTorch; imported on demand.
"""

from pysample.kde.backends.cpu import CPUKDEBackend

__all__ = ["CPUKDEBackend"]
