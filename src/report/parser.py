"""Assembles a BenchmarkReport from the raw wrk2 output."""
import logging

from .constants import ReportConstants
from .exceptions import EmptyLatencyTableError
from .latency_extractor import LatencyExtractor
from .models import BenchmarkReport
from .patterns import PatternMatcher
from .section_locator import SectionLocator


# Configure logging
logger = logging.getLogger(__name__)


def parse_report(text: str) -> BenchmarkReport:
    """
    Parse the complete standard output of one wrk2 invocation.

    Any extraction failure propagates unchanged to the caller; no partially
    filled report is ever returned.

    Args:
        text: Complete wrk2 output.

    Returns:
        Fully populated BenchmarkReport.

    Raises:
        ReportParseError: One of its subclasses, identifying what was missing.
    """
    summary = PatternMatcher.extract_summary(text)
    requests_per_sec = PatternMatcher.extract_requests_per_sec(text)
    transfer_per_sec = PatternMatcher.extract_transfer_per_sec(text)

    section = SectionLocator.locate(text)
    latency_table = LatencyExtractor.extract(section)
    if not latency_table:
        raise EmptyLatencyTableError(
            "Extracted empty latency data set", ReportConstants.UNCORRECTED_LATENCY_MARKER
        )

    report = BenchmarkReport(
        total_requests=summary.total_requests,
        duration=summary.duration,
        data_read=summary.data_read,
        requests_per_sec=requests_per_sec,
        transfer_per_sec=transfer_per_sec,
        uncorrected_latency=tuple(latency_table),
    )
    logger.debug(f"Parsed report with {len(report.uncorrected_latency)} latency entries")
    return report
