"""CPU utilization collector."""

from __future__ import annotations

import threading

from ..errors import DegenerateComputation
from ..sources import CpuTicks, MetricSource
from ..state import SharedState
from .base import BaseCollector


def cpu_usage_percent(before: CpuTicks, after: CpuTicks) -> float:
    """Share of non-idle ticks between two samples, as a percentage.

    Raises DegenerateComputation when no ticks elapsed, instead of
    producing NaN or a division error.
    """
    total_delta = after.total - before.total
    idle_delta = after.idle - before.idle
    if total_delta <= 0:
        raise DegenerateComputation(f"total tick delta is {total_delta}")
    return 100.0 * (total_delta - idle_delta) / total_delta


class CPUCollector(BaseCollector):
    """Estimate CPU utilization from two tick samples a short gap apart."""

    def __init__(
        self,
        source: MetricSource,
        state: SharedState,
        interval: float = 10.0,
        sample_gap: float = 3.0,
    ) -> None:
        super().__init__(source, state, interval)
        self.sample_gap = sample_gap

    @property
    def name(self) -> str:
        return "cpu"

    def poll(self, stop: threading.Event) -> None:
        before = self.source.cpu_ticks()
        if stop.wait(self.sample_gap):
            return
        after = self.source.cpu_ticks()
        self.state.set_cpu_usage(cpu_usage_percent(before, after))
