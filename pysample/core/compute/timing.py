"""
Wall-clock timing for backend solves.

Every Result carries a timing dict: 'total_seconds' plus one entry per
named phase of the computation. Phases entered repeatedly (the blocked
kernel sums of a density estimate) are summed under one name.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Phase timer for a single solve.

        timer = Timer()
        timer.start()
        with timer.section('grid'):
            grid = design.grid()
        for block in blocks:
            with timer.section('kernel_sum'):
                ...
        timer.stop()
        timer.result()
        # {'total_seconds': ..., 'grid': ..., 'kernel_sum': ...}

    With ``sync_cuda=True`` every reading waits for queued CUDA work, so
    GPU phases are charged to the section that launched them.
    """

    def __init__(self, sync_cuda: bool = False):
        self._sync_cuda = sync_cuda
        self._phases: dict[str, float] = {}
        self._t0: float | None = None
        self._elapsed: float | None = None

    def _now(self) -> float:
        if self._sync_cuda:
            import torch
            if torch.cuda.is_available():
                torch.cuda.synchronize()
        return time.perf_counter()

    def start(self) -> None:
        self._t0 = self._now()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = self._now() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Charge the time spent in the block to phase ``name``."""
        t = self._now()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (self._now() - t)

    def result(self) -> dict[str, float]:
        """
        Timing dict for Result.timing.

        Raises:
            RuntimeError: If the timer has not been stopped.
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}
