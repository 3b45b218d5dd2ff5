"""Exceptions raised while parsing a wrk2 report."""
from enum import Enum


class ParseErrorKind(Enum):
    """Distinguishable reasons a report could not be parsed."""
    MISSING_SUMMARY = "missing_summary"
    MISSING_THROUGHPUT = "missing_throughput"
    MISSING_SECTION = "missing_section"
    MISSING_SECTION_END = "missing_section_end"
    EMPTY_LATENCY_TABLE = "empty_latency_table"
    MALFORMED_NUMBER = "malformed_number"


class ReportParseError(Exception):
    """Base exception for report parsing failures.

    Attributes:
        kind: Which part of the report was missing or unusable.
        message: Human-readable description.
        context: The expected pattern or section name, for diagnostics.
    """
    kind = None

    def __init__(self, message: str, context: str = ""):
        self.message = message
        self.context = context
        if context:
            message = f"{message} (expected: {context})"
        super().__init__(message)


class MissingSummaryError(ReportParseError):
    """Exception raised when the requests/duration/data-read line is absent."""
    kind = ParseErrorKind.MISSING_SUMMARY


class MissingThroughputError(ReportParseError):
    """Exception raised when Requests/sec or Transfer/sec is absent."""
    kind = ParseErrorKind.MISSING_THROUGHPUT


class MissingSectionError(ReportParseError):
    """Exception raised when the Uncorrected Latency marker is absent."""
    kind = ParseErrorKind.MISSING_SECTION


class MissingSectionEndError(ReportParseError):
    """Exception raised when the Uncorrected Latency section never ends."""
    kind = ParseErrorKind.MISSING_SECTION_END


class EmptyLatencyTableError(ReportParseError):
    """Exception raised when no percentile lines were recognized."""
    kind = ParseErrorKind.EMPTY_LATENCY_TABLE


class MalformedNumberError(ReportParseError):
    """Exception raised when a captured number cannot be converted."""
    kind = ParseErrorKind.MALFORMED_NUMBER
