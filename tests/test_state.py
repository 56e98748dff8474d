"""Tests for SharedState and Status."""

from __future__ import annotations

import dataclasses
import threading

import pytest

from hwsampler.state import SharedState, Status


class TestStatus:
    def test_defaults_are_zero_baseline(self):
        status = Status()
        assert status.cpu_name == "unknown"
        assert status.total_memory_bytes == 0
        assert status.cpu_usage_percent == 0.0
        assert not status.memory_warmed_up
        assert status.memory_percent == 0.0

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Status().cpu_usage_percent = 50.0  # type: ignore[misc]

    def test_memory_percent(self):
        status = Status(total_memory_bytes=200, used_memory_bytes=50)
        assert status.memory_percent == 25.0
        assert status.memory_warmed_up


class TestSharedState:
    def test_starts_empty(self):
        state = SharedState()
        assert not state.running
        assert state.snapshot() == Status()

    def test_mark_started_once(self):
        state = SharedState()
        assert state.mark_started("eth0", 8, "Some CPU")
        assert not state.mark_started("wlan0", 2, "Other CPU")

        status = state.snapshot()
        assert state.running
        assert (status.interface_name, status.cpu_core_count, status.cpu_name) == ("eth0", 8, "Some CPU")

    def test_mark_stopped(self):
        state = SharedState()
        state.mark_started("eth0", 1, "x")
        state.mark_stopped()
        assert not state.running

    def test_partial_network_update(self):
        state = SharedState()
        state.set_network_rates(100, 200)
        state.set_network_rates(None, 300)
        status = state.snapshot()
        assert (status.rx_bits_per_second, status.tx_bits_per_second) == (100, 300)

    def test_snapshots_never_see_torn_writes(self):
        state = SharedState()
        stop = threading.Event()
        torn: list[Status] = []

        def writer() -> None:
            n = 1
            while not stop.is_set():
                state.set_memory(n, n)
                state.set_network_rates(n, n)
                n += 1

        def reader() -> None:
            while not stop.is_set():
                status = state.snapshot()
                if status.total_memory_bytes != status.used_memory_bytes:
                    torn.append(status)
                if status.rx_bits_per_second != status.tx_bits_per_second:
                    torn.append(status)

        threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        stop.wait(0.3)
        stop.set()
        for t in threads:
            t.join(timeout=2.0)

        assert torn == []
        assert state.snapshot().total_memory_bytes > 0
