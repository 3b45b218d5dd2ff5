"""Pattern matchers for the summary and throughput lines of a wrk2 report."""
import math
import re

from .constants import ReportConstants
from .exceptions import MalformedNumberError, MissingSummaryError, MissingThroughputError
from .models import SummaryFragment


class PatternMatcher:
    """Extracts the summary and throughput values from the whole report text."""

    SUMMARY_RE = re.compile(ReportConstants.SUMMARY_PATTERN)
    REQUESTS_PER_SEC_RE = re.compile(ReportConstants.REQUESTS_PER_SEC_PATTERN)
    TRANSFER_PER_SEC_RE = re.compile(ReportConstants.TRANSFER_PER_SEC_PATTERN)

    @staticmethod
    def parse_unsigned(value: str) -> int:
        """
        Convert a captured digit string to an unsigned 64-bit integer.

        Raises:
            MalformedNumberError: If the value is not an integer or does not fit.
        """
        try:
            number = int(value)
        except ValueError as e:
            raise MalformedNumberError(f"Cannot convert {value!r} to an integer") from e
        if not 0 <= number <= ReportConstants.MAX_UNSIGNED_64:
            raise MalformedNumberError(f"Integer {value} is outside the unsigned 64-bit range")
        return number

    @staticmethod
    def parse_float(value: str) -> float:
        """
        Convert a captured decimal string to a finite float.

        Raises:
            MalformedNumberError: If the value is not a finite number.
        """
        try:
            number = float(value)
        except ValueError as e:
            raise MalformedNumberError(f"Cannot convert {value!r} to a float") from e
        if not math.isfinite(number):
            raise MalformedNumberError(f"Float {value} is not finite")
        return number

    @staticmethod
    def extract_summary(text: str) -> SummaryFragment:
        """
        Extract request count, duration and data read from the summary line.

        Args:
            text: Complete wrk2 output.

        Returns:
            SummaryFragment with the first matching line's values.

        Raises:
            MissingSummaryError: If no summary line is present.
            MalformedNumberError: If the request count cannot be converted.
        """
        match = PatternMatcher.SUMMARY_RE.search(text)
        if match is None:
            raise MissingSummaryError(
                "Could not find summary information in output", ReportConstants.SUMMARY_PATTERN
            )
        return SummaryFragment(
            total_requests=PatternMatcher.parse_unsigned(match.group(1)),
            duration=match.group(2),
            data_read=match.group(3),
        )

    @staticmethod
    def extract_requests_per_sec(text: str) -> float:
        """Extract the Requests/sec value."""
        match = PatternMatcher.REQUESTS_PER_SEC_RE.search(text)
        if match is None:
            raise MissingThroughputError(
                "Could not find Requests/sec in output", ReportConstants.REQUESTS_PER_SEC_PATTERN
            )
        return PatternMatcher.parse_float(match.group(1))

    @staticmethod
    def extract_transfer_per_sec(text: str) -> str:
        """Extract the Transfer/sec value with its unit suffix."""
        match = PatternMatcher.TRANSFER_PER_SEC_RE.search(text)
        if match is None:
            raise MissingThroughputError(
                "Could not find Transfer/sec in output", ReportConstants.TRANSFER_PER_SEC_PATTERN
            )
        return match.group(1)
