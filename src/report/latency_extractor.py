"""Extracts percentile/latency pairs from the uncorrected latency section."""
import re
from typing import List

from .constants import ReportConstants
from .exceptions import EmptyLatencyTableError
from .models import LatencyPoint


class LatencyExtractor:
    """Converts the lines of the latency section into latency points."""

    LATENCY_LINE_RE = re.compile(ReportConstants.LATENCY_LINE_PATTERN)

    @staticmethod
    def extract(section: str) -> List[LatencyPoint]:
        """
        Convert each percentile line of the section into a LatencyPoint.

        Blank lines and lines without a percentile (headers, annotations) are
        skipped. Order and duplicates are preserved.

        Args:
            section: Body of the Uncorrected Latency section.

        Returns:
            Latency points in order of appearance.

        Raises:
            EmptyLatencyTableError: If no line matched.
        """
        points = []
        for raw_line in section.splitlines():
            line = raw_line.strip()
            if not line:
                continue
            match = LatencyExtractor.LATENCY_LINE_RE.search(line)
            if match is None:
                continue
            points.append(LatencyPoint(percentile=match.group(1), latency=match.group(2)))

        if not points:
            raise EmptyLatencyTableError(
                "No latency data found in Uncorrected Latency section",
                ReportConstants.LATENCY_LINE_PATTERN,
            )
        return points
