from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True, slots=True)
class Settings:
    interface_name: str = field(default_factory=lambda: _get_str("HWSAMPLER_INTERFACE", "eth0"))
    proc_root: str = field(default_factory=lambda: _get_str("HWSAMPLER_PROC_ROOT", "/proc"))

    # Collector cadence; the CPU collector's effective period is interval + gap.
    cpu_interval_seconds: float = field(
        default_factory=lambda: _get_float("HWSAMPLER_CPU_INTERVAL_SECONDS", 10.0)
    )
    cpu_sample_gap_seconds: float = field(
        default_factory=lambda: _get_float("HWSAMPLER_CPU_SAMPLE_GAP_SECONDS", 3.0)
    )
    memory_interval_seconds: float = field(
        default_factory=lambda: _get_float("HWSAMPLER_MEMORY_INTERVAL_SECONDS", 10.0)
    )
    network_interval_seconds: float = field(
        default_factory=lambda: _get_float("HWSAMPLER_NETWORK_INTERVAL_SECONDS", 10.0)
    )

    # Presentation loop
    refresh_seconds: float = field(
        default_factory=lambda: _get_float("HWSAMPLER_REFRESH_SECONDS", 10.0)
    )


settings = Settings()
