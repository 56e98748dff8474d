"""Network throughput collector."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from ..errors import DegenerateComputation
from ..sources import InterfaceCounters, MetricSource
from ..state import SharedState
from .base import BaseCollector


def bits_per_second(previous: int, current: int, elapsed: float) -> int | None:
    """Rate between two cumulative byte counters.

    Returns None when the counter went backwards (interface reset or wrap);
    such cycles are skipped rather than corrected.
    """
    if current < previous:
        return None
    return int(8 * (current - previous) / elapsed)


class NetworkCollector(BaseCollector):
    """Derive rx/tx bits per second for one interface.

    The previous sample lives here, not in shared state. The first
    successful read only seeds it.
    """

    def __init__(
        self,
        source: MetricSource,
        state: SharedState,
        interface_name: str,
        interval: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(source, state, interval)
        self.interface_name = interface_name
        self._clock = clock
        self._previous: InterfaceCounters | None = None
        self._previous_at = 0.0

    @property
    def name(self) -> str:
        return "network"

    def poll(self, stop: threading.Event) -> None:
        current = self.source.interface_counters(self.interface_name)
        now = self._clock()
        previous, previous_at = self._previous, self._previous_at
        self._previous, self._previous_at = current, now
        if previous is None:
            return

        elapsed = now - previous_at
        if elapsed <= 0:
            raise DegenerateComputation(f"elapsed time since last sample is {elapsed}")
        self.state.set_network_rates(
            bits_per_second(previous.rx_bytes, current.rx_bytes, elapsed),
            bits_per_second(previous.tx_bytes, current.tx_bytes, elapsed),
        )
