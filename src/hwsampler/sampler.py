"""Sampler facade: owns shared state and the collector threads."""

from __future__ import annotations

import logging
import threading

import psutil

from .collectors import BaseCollector, CPUCollector, MemoryCollector, NetworkCollector
from .config import Settings, settings as default_settings
from .sources import MetricSource, default_source
from .state import UNKNOWN_CPU, SharedState, Status

log = logging.getLogger(__name__)


class Sampler:
    """
    Background hardware sampler.

    ``start`` launches one daemon thread per collector (CPU, memory,
    network). ``snapshot`` returns whatever values are stored at that moment
    and never waits on collector progress. ``stop`` only requests
    cancellation; each collector exits the next time it wakes, at most one
    poll interval later. Use ``join`` to wait for that.
    """

    def __init__(
        self,
        source: MetricSource | None = None,
        config: Settings | None = None,
    ) -> None:
        self._config = config or default_settings
        self._source = source or default_source(self._config.proc_root)
        self._state = SharedState()
        self._stop_event = threading.Event()
        self._threads: list[threading.Thread] = []
        self._lifecycle_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._state.running

    def start(self, interface_name: str | None = None) -> bool:
        """Begin sampling *interface_name* (defaults to the configured one).

        Returns False without spawning anything if already running.
        """
        iface = interface_name or self._config.interface_name
        with self._lifecycle_lock:
            if self._state.running:
                log.warning("sampler already running, start ignored", extra={"interface": iface})
                return False
            cores = psutil.cpu_count(logical=True) or 0
            self._state.mark_started(iface, cores, self._resolve_cpu_name())

            self._stop_event = threading.Event()
            self._threads = [
                self._spawn(collector, self._stop_event) for collector in self._collectors(iface)
            ]

        log.info("sampler started", extra={"interface": iface})
        return True

    def stop(self) -> None:
        """Request the collectors to stop; does not wait for them."""
        with self._lifecycle_lock:
            self._stop_event.set()
            self._state.mark_stopped()
        log.info("sampler stop requested")

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the collector threads; True once all of them exited."""
        with self._lifecycle_lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout=timeout)
        return not any(t.is_alive() for t in threads)

    def snapshot(self) -> Status:
        return self._state.snapshot()

    def __enter__(self) -> Sampler:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _collectors(self, interface_name: str) -> list[BaseCollector]:
        cfg = self._config
        return [
            CPUCollector(
                self._source,
                self._state,
                interval=cfg.cpu_interval_seconds,
                sample_gap=cfg.cpu_sample_gap_seconds,
            ),
            MemoryCollector(self._source, self._state, interval=cfg.memory_interval_seconds),
            NetworkCollector(
                self._source,
                self._state,
                interface_name,
                interval=cfg.network_interval_seconds,
            ),
        ]

    def _resolve_cpu_name(self) -> str:
        try:
            return self._source.cpu_name() or UNKNOWN_CPU
        except Exception:
            log.warning("could not resolve cpu name", exc_info=True)
            return UNKNOWN_CPU

    @staticmethod
    def _spawn(collector: BaseCollector, stop: threading.Event) -> threading.Thread:
        thread = threading.Thread(
            target=collector.run,
            args=(stop,),
            daemon=True,
            name=f"Sampler-{collector.name}",
        )
        thread.start()
        return thread
