from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleError(Exception):
    """A reading that could not be turned into a metric.

    Raised by sources and derivations, always handled inside the
    collector loop. Callers of ``Sampler.snapshot`` never see it.
    """

    code: str
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code}: {self.message}"


class SourceUnavailable(SampleError):
    """The underlying data source cannot be read."""

    def __init__(self, message: str) -> None:
        super().__init__(code="source_unavailable", message=message)


class MalformedSample(SampleError):
    """Data was read but is not in the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(code="malformed_sample", message=message)


class DegenerateComputation(SampleError):
    """A derived metric is mathematically undefined."""

    def __init__(self, message: str) -> None:
        super().__init__(code="degenerate_computation", message=message)
