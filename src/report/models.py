"""Data models for parsed wrk2 reports."""
import math
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Tuple, Union

from .constants import ReportConstants
from .exceptions import EmptyLatencyTableError, MalformedNumberError


class LatencyPoint(NamedTuple):
    """One row of the latency table, e.g. ("99.000", "45.67ms")."""
    percentile: str
    latency: str


class SummaryFragment(NamedTuple):
    """Values captured from the 'N requests in D, R read' line."""
    total_requests: int
    duration: str
    data_read: str


@dataclass(frozen=True)
class BenchmarkReport:
    """Metrics extracted from a single wrk2 run."""
    total_requests: int
    duration: str
    data_read: str
    requests_per_sec: float
    transfer_per_sec: str
    uncorrected_latency: Tuple[LatencyPoint, ...]

    TEXT_FIELDS = ("duration", "data_read", "transfer_per_sec")

    def __post_init__(self):
        if isinstance(self.total_requests, bool) or not isinstance(self.total_requests, int):
            raise TypeError(f"total_requests must be an integer, got {type(self.total_requests).__name__}")
        if not 0 <= self.total_requests <= ReportConstants.MAX_UNSIGNED_64:
            raise MalformedNumberError(
                f"Request count {self.total_requests} is outside the unsigned 64-bit range"
            )
        for name in self.TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string, got {type(value).__name__}")
            if not value.strip():
                raise ValueError(f"{name} must not be empty")
        if isinstance(self.requests_per_sec, bool) or not isinstance(self.requests_per_sec, (int, float)):
            raise TypeError(f"requests_per_sec must be a number, got {type(self.requests_per_sec).__name__}")
        if not math.isfinite(self.requests_per_sec):
            raise MalformedNumberError(f"requests_per_sec {self.requests_per_sec} is not finite")
        if not self.uncorrected_latency:
            raise EmptyLatencyTableError(
                "Benchmark report requires at least one latency entry",
                ReportConstants.UNCORRECTED_LATENCY_MARKER,
            )
        # Normalize to an immutable tuple of LatencyPoint
        points = tuple(LatencyPoint(*point) for point in self.uncorrected_latency)
        object.__setattr__(self, "uncorrected_latency", points)

    def latency_pairs(self) -> List[Tuple[str, str]]:
        """Return the latency table as plain (percentile, latency) tuples."""
        return [tuple(point) for point in self.uncorrected_latency]

    def summary(self) -> Dict[str, Union[int, float, str]]:
        """Return the scalar fields keyed by name."""
        return {
            "total_requests": self.total_requests,
            "duration": self.duration,
            "data_read": self.data_read,
            "requests_per_sec": self.requests_per_sec,
            "transfer_per_sec": self.transfer_per_sec,
        }
