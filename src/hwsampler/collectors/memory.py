"""Memory usage collector."""

from __future__ import annotations

import threading

from ..errors import MalformedSample
from ..sources import MetricSource
from ..state import SharedState
from .base import BaseCollector


class MemoryCollector(BaseCollector):
    """Copy total/used physical memory into shared state."""

    def __init__(self, source: MetricSource, state: SharedState, interval: float = 10.0) -> None:
        super().__init__(source, state, interval)

    @property
    def name(self) -> str:
        return "memory"

    def poll(self, stop: threading.Event) -> None:
        usage = self.source.memory()
        if usage.used > usage.total:
            raise MalformedSample(f"used memory {usage.used} exceeds total {usage.total}")
        self.state.set_memory(usage.total, usage.used)
