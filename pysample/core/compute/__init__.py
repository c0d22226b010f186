"""
Shared compute infrastructure for PySample.

IMPORTANT: This is NOT where component backends live. Those go in
{component}/backends/. This module contains shared numeric infrastructure.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pysample.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pysample.core.compute.timing import Timer

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
]
