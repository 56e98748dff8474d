"""Base collector interface."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from ..errors import SampleError
from ..sources import MetricSource
from ..state import SharedState

log = logging.getLogger(__name__)


class BaseCollector(ABC):
    """A periodic sampler of one metric family.

    ``run`` waits one interval, polls, and repeats until the cancellation
    token is set. A stop request is seen at the next sleep boundary, so the
    worst-case latency is one interval plus one in-flight read.
    """

    def __init__(self, source: MetricSource, state: SharedState, interval: float) -> None:
        self.source = source
        self.state = state
        self.interval = interval

    @property
    @abstractmethod
    def name(self) -> str:
        """Collector name used as thread name suffix and log field."""
        ...

    @abstractmethod
    def poll(self, stop: threading.Event) -> None:
        """Run one sampling cycle and write the result into shared state.

        Raises SampleError when the cycle produced nothing usable.
        """
        ...

    def run(self, stop: threading.Event) -> None:
        log.debug("collector started", extra={"collector": self.name})
        while not stop.wait(self.interval):
            try:
                self.poll(stop)
            except SampleError as e:
                log.warning(
                    "sample skipped: %s",
                    e.message,
                    extra={"collector": self.name, "code": e.code},
                )
            except Exception:
                log.exception("unexpected collector failure", extra={"collector": self.name})
        log.debug("collector stopped", extra={"collector": self.name})
