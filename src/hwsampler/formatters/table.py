"""Table formatter for human-readable output."""

from __future__ import annotations

from ..state import Status
from .base import BaseFormatter


def _bytes_to_human(n: int) -> str:
    """Convert bytes to human-readable string."""
    value = float(n)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if abs(value) < 1024.0:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} PB"


class TableFormatter(BaseFormatter):
    """Format status as one human-readable line."""

    def header(self, status: Status) -> str:
        lines = [
            f"CPU:       {status.cpu_name} ({status.cpu_core_count} cores)",
            f"RAM:       {_bytes_to_human(status.total_memory_bytes)}",
            f"Interface: {status.interface_name}",
        ]
        return "\n".join(lines)

    def format(self, status: Status) -> str:
        return (
            f"CPU used: {int(status.cpu_usage_percent):2d}%  "
            f"RAM used: {int(status.memory_percent):2d}%  "
            f"Rx: {status.rx_bits_per_second // 1000} Kbps   "
            f"Tx: {status.tx_bits_per_second // 1000} Kbps"
        )
