"""Raw counter sources the collectors poll."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import NamedTuple

import psutil

from .errors import MalformedSample, SourceUnavailable
from .state import UNKNOWN_CPU

log = logging.getLogger(__name__)

# Position of the idle counter among the numbers of the aggregate cpu line.
IDLE_FIELD = 3


class CpuTicks(NamedTuple):
    idle: int
    total: int


class MemoryUsage(NamedTuple):
    total: int
    used: int


class InterfaceCounters(NamedTuple):
    rx_bytes: int
    tx_bytes: int


class MetricSource(ABC):
    """Read-only access to the host's cumulative counters."""

    @abstractmethod
    def cpu_ticks(self) -> CpuTicks:
        """Cumulative idle and total ticks of the aggregate CPU."""
        ...

    @abstractmethod
    def memory(self) -> MemoryUsage:
        """System-wide physical memory in bytes."""
        ...

    @abstractmethod
    def interface_counters(self, name: str) -> InterfaceCounters:
        """Cumulative received/transmitted bytes of interface *name*."""
        ...

    def cpu_name(self) -> str:
        return UNKNOWN_CPU


# ── parsers ───────────────────────────────────────────────────────────


def _to_int(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MalformedSample(f"non-numeric {what} value {token!r}") from None
    if value < 0:
        raise MalformedSample(f"negative {what} value {value}")
    return value


def parse_cpu_ticks(text: str) -> CpuTicks:
    """Parse the aggregate ``cpu`` line of /proc/stat.

    The idle counter is the fourth number; the total is the sum of all of them.
    """
    for line in text.splitlines():
        fields = line.split()
        if not fields or fields[0] != "cpu":
            continue
        values = [_to_int(f, "cpu tick") for f in fields[1:]]
        if len(values) <= IDLE_FIELD:
            raise MalformedSample(f"cpu line has {len(values)} counters, need at least 4")
        return CpuTicks(idle=values[IDLE_FIELD], total=sum(values))
    raise MalformedSample("no aggregate cpu line found")


def parse_net_dev(text: str, name: str) -> InterfaceCounters:
    """Extract rx/tx byte counters for *name* from /proc/net/dev."""
    for line in text.splitlines():
        iface, sep, rest = line.partition(":")
        if not sep or iface.strip() != name:
            continue
        fields = rest.split()
        if len(fields) < 9:
            raise MalformedSample(f"interface {name} has {len(fields)} columns, need 9")
        return InterfaceCounters(
            rx_bytes=_to_int(fields[0], "rx byte"),
            tx_bytes=_to_int(fields[8], "tx byte"),
        )
    raise SourceUnavailable(f"interface {name} not listed")


def parse_cpu_model(text: str) -> str | None:
    """Return the first ``model name`` entry of /proc/cpuinfo, if any."""
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if sep and key.strip() == "model name" and value.strip():
            return value.strip()
    return None


# ── implementations ───────────────────────────────────────────────────


def _read_memory() -> MemoryUsage:
    try:
        vm = psutil.virtual_memory()
    except (OSError, RuntimeError) as e:
        raise SourceUnavailable(f"memory query failed: {e}") from e
    if vm.total <= 0:
        raise MalformedSample(f"reported total memory is {vm.total}")
    return MemoryUsage(total=int(vm.total), used=int(vm.used))


class ProcfsSource(MetricSource):
    """Linux source reading the proc filesystem.

    Memory goes through psutil rather than parsing ``free`` output.
    """

    def __init__(self, proc_root: str | Path = "/proc") -> None:
        self.root = Path(proc_root)

    def _read(self, relative: str) -> str:
        path = self.root / relative
        try:
            return path.read_text()
        except OSError as e:
            raise SourceUnavailable(f"cannot read {path}: {e.strerror or e}") from e

    def cpu_ticks(self) -> CpuTicks:
        return parse_cpu_ticks(self._read("stat"))

    def memory(self) -> MemoryUsage:
        return _read_memory()

    def interface_counters(self, name: str) -> InterfaceCounters:
        return parse_net_dev(self._read("net/dev"), name)

    def cpu_name(self) -> str:
        try:
            model = parse_cpu_model(self._read("cpuinfo"))
        except SourceUnavailable:
            return UNKNOWN_CPU
        return model or UNKNOWN_CPU


class PsutilSource(MetricSource):
    """Portable source for hosts without a proc filesystem."""

    def cpu_ticks(self) -> CpuTicks:
        try:
            times = psutil.cpu_times()
        except (OSError, RuntimeError) as e:
            raise SourceUnavailable(f"cpu times query failed: {e}") from e
        # psutil reports seconds; scale to centiseconds so deltas stay integral.
        values = {k: round(v * 100) for k, v in times._asdict().items()}
        return CpuTicks(idle=values.get("idle", 0), total=sum(values.values()))

    def memory(self) -> MemoryUsage:
        return _read_memory()

    def interface_counters(self, name: str) -> InterfaceCounters:
        try:
            counters = psutil.net_io_counters(pernic=True)
        except (OSError, RuntimeError) as e:
            raise SourceUnavailable(f"interface counters query failed: {e}") from e
        nic = counters.get(name)
        if nic is None:
            raise SourceUnavailable(f"interface {name} not listed")
        return InterfaceCounters(rx_bytes=nic.bytes_recv, tx_bytes=nic.bytes_sent)


def default_source(proc_root: str | Path = "/proc") -> MetricSource:
    """Pick the procfs source on Linux, psutil everywhere else."""
    if sys.platform.startswith("linux") and (Path(proc_root) / "stat").exists():
        return ProcfsSource(proc_root)
    log.info("proc filesystem unavailable, using psutil source")
    return PsutilSource()
