from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

import pytest

from hwsampler.config import Settings
from hwsampler.sources import CpuTicks, InterfaceCounters, MemoryUsage, MetricSource


class _Script:
    """Replay a list of readings; exceptions in it are raised. The last item repeats."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._items = list(items)
        self._lock = threading.Lock()
        self.calls = 0

    def next(self) -> Any:
        with self._lock:
            self.calls += 1
            item = self._items.pop(0) if len(self._items) > 1 else self._items[0]
        if isinstance(item, BaseException):
            raise item
        return item


class FakeSource(MetricSource):
    def __init__(
        self,
        ticks: Iterable[Any] = (CpuTicks(idle=0, total=0),),
        memory: Iterable[Any] = (MemoryUsage(total=0, used=0),),
        counters: Iterable[Any] = (InterfaceCounters(rx_bytes=0, tx_bytes=0),),
        name: str = "Fake CPU @ 1.00GHz",
    ) -> None:
        self.ticks = _Script(ticks)
        self.mem = _Script(memory)
        self.counters = _Script(counters)
        self.name = name
        self.requested_interfaces: list[str] = []

    def cpu_ticks(self) -> CpuTicks:
        return self.ticks.next()

    def memory(self) -> MemoryUsage:
        return self.mem.next()

    def interface_counters(self, name: str) -> InterfaceCounters:
        self.requested_interfaces.append(name)
        return self.counters.next()

    def cpu_name(self) -> str:
        return self.name


@pytest.fixture
def fast_settings() -> Settings:
    return Settings(
        interface_name="test0",
        proc_root="/nonexistent",
        cpu_interval_seconds=0.01,
        cpu_sample_gap_seconds=0.01,
        memory_interval_seconds=0.01,
        network_interval_seconds=0.01,
        refresh_seconds=0.01,
    )
