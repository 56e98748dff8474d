"""
hwsampler

Background hardware-metrics sampler: CPU utilization, memory usage and
network throughput of one host, read as an instantaneous snapshot.
"""

from __future__ import annotations

from .sampler import Sampler
from .state import Status

__all__ = ["Sampler", "Status", "__version__"]

__version__ = "0.1.0"
