"""Base formatter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..state import Status


class BaseFormatter(ABC):
    """Abstract base class for status formatters."""

    def header(self, status: Status) -> str | None:
        """Optional one-off description printed before the first status."""
        return None

    @abstractmethod
    def format(self, status: Status) -> str:
        """Format one status reading to string."""
        ...
