"""
Hardware detection and device selection.

Only the kernel density estimator has an accelerated path, so detection
is limited to what it needs: whether torch can see a CUDA or MPS device.
torch is imported lazily and is never required.
"""

from dataclasses import dataclass
from typing import Literal
import platform


@dataclass(frozen=True)
class DeviceInfo:
    """
    Where a density estimate is evaluated.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        device_index: torch device ordinal, None on the CPU
        name: Processor or GPU model, for Result.info
    """
    device_type: Literal['cpu', 'cuda', 'mps']
    device_index: int | None
    name: str

    def __str__(self) -> str:
        if self.device_type == 'cpu':
            return f"CPU ({self.name})"
        return f"{self.device_type.upper()}:{self.device_index} ({self.name})"

    @property
    def is_gpu(self) -> bool:
        """Whether kernel sums can run through torch."""
        return self.device_type in ('cuda', 'mps')


def detect_gpu() -> DeviceInfo | None:
    """
    First GPU torch can use, CUDA before MPS.

    Returns:
        DeviceInfo for the best available GPU (CUDA before MPS), or None
        if torch is missing or sees no GPU.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        return DeviceInfo(
            device_type='cuda',
            device_index=idx,
            name=torch.cuda.get_device_properties(idx).name,
        )

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(device_type='mps', device_index=0, name='Apple Silicon GPU')

    return None


def get_cpu_info() -> DeviceInfo:
    """Get CPU device info."""
    processor = platform.processor() or platform.machine() or "Unknown CPU"
    return DeviceInfo(device_type='cpu', device_index=None, name=processor)


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Resolve the backend= preference of estimate_pdf to a device.

    Args:
        prefer: 'cpu' always uses the CPU, 'gpu' requires a GPU,
            'auto' uses a GPU if one is available.

    Raises:
        RuntimeError: prefer='gpu' and no GPU is visible
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()

    if prefer == 'gpu':
        if gpu is None:
            raise RuntimeError(
                "backend='gpu' requested but torch sees no CUDA or MPS device. "
                "Install the gpu extra or use backend='cpu'."
            )
        return gpu

    return gpu if gpu is not None else get_cpu_info()
