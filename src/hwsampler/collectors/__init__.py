"""Periodic metric collectors."""

from __future__ import annotations

from .base import BaseCollector
from .cpu import CPUCollector
from .memory import MemoryCollector
from .network import NetworkCollector

__all__ = [
    "BaseCollector",
    "CPUCollector",
    "MemoryCollector",
    "NetworkCollector",
]
