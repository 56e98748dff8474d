"""Shared metric state and the immutable Status snapshot."""

from __future__ import annotations

import threading
from dataclasses import dataclass

UNKNOWN_CPU = "unknown"


@dataclass(slots=True, frozen=True)
class Status:
    """Point-in-time copy of the sampled metrics.

    An all-zero Status means the collectors have not completed a cycle yet,
    not that the host is idle.
    """

    cpu_name: str = UNKNOWN_CPU
    cpu_core_count: int = 0
    interface_name: str = ""
    total_memory_bytes: int = 0
    used_memory_bytes: int = 0
    cpu_usage_percent: float = 0.0
    rx_bits_per_second: int = 0
    tx_bits_per_second: int = 0

    @property
    def memory_percent(self) -> float:
        if self.total_memory_bytes <= 0:
            return 0.0
        return 100.0 * self.used_memory_bytes / self.total_memory_bytes

    @property
    def memory_warmed_up(self) -> bool:
        return self.total_memory_bytes > 0


class SharedState:
    """The latest derived metrics, guarded by a single lock.

    Every accessor takes the lock for the shortest possible time. Each
    mutator writes all the fields one collector owns in a single critical
    section, so a snapshot never sees half of an update.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._interface_name = ""
        self._cpu_core_count = 0
        self._cpu_name = UNKNOWN_CPU
        self._cpu_usage_percent = 0.0
        self._total_memory_bytes = 0
        self._used_memory_bytes = 0
        self._rx_bits_per_second = 0
        self._tx_bits_per_second = 0
        self._running = False

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def mark_started(self, interface_name: str, cpu_core_count: int, cpu_name: str) -> bool:
        """Flip to running and record the host description.

        Returns False, leaving everything untouched, if already running.
        """
        with self._lock:
            if self._running:
                return False
            self._running = True
            self._interface_name = interface_name
            self._cpu_core_count = cpu_core_count
            self._cpu_name = cpu_name
            return True

    def mark_stopped(self) -> None:
        with self._lock:
            self._running = False

    def set_cpu_usage(self, percent: float) -> None:
        with self._lock:
            self._cpu_usage_percent = percent

    def set_memory(self, total_bytes: int, used_bytes: int) -> None:
        with self._lock:
            self._total_memory_bytes = total_bytes
            self._used_memory_bytes = used_bytes

    def set_network_rates(self, rx_bps: int | None, tx_bps: int | None) -> None:
        """Store new rates; a None direction keeps its previous value."""
        with self._lock:
            if rx_bps is not None:
                self._rx_bits_per_second = rx_bps
            if tx_bps is not None:
                self._tx_bits_per_second = tx_bps

    def snapshot(self) -> Status:
        with self._lock:
            return Status(
                cpu_name=self._cpu_name,
                cpu_core_count=self._cpu_core_count,
                interface_name=self._interface_name,
                total_memory_bytes=self._total_memory_bytes,
                used_memory_bytes=self._used_memory_bytes,
                cpu_usage_percent=self._cpu_usage_percent,
                rx_bits_per_second=self._rx_bits_per_second,
                tx_bits_per_second=self._tx_bits_per_second,
            )
