"""Report package initialization."""
from .models import BenchmarkReport, LatencyPoint, SummaryFragment
from .constants import ReportConstants
from .exceptions import (
    ParseErrorKind, ReportParseError, MissingSummaryError, MissingThroughputError,
    MissingSectionError, MissingSectionEndError, EmptyLatencyTableError, MalformedNumberError
)
from .patterns import PatternMatcher
from .section_locator import SectionLocator
from .latency_extractor import LatencyExtractor
from .parser import parse_report
from .formatting import NumberFormatter

__all__ = [
    'BenchmarkReport',
    'LatencyPoint',
    'SummaryFragment',
    'ReportConstants',
    'ParseErrorKind',
    'ReportParseError',
    'MissingSummaryError',
    'MissingThroughputError',
    'MissingSectionError',
    'MissingSectionEndError',
    'EmptyLatencyTableError',
    'MalformedNumberError',
    'PatternMatcher',
    'SectionLocator',
    'LatencyExtractor',
    'parse_report',
    'NumberFormatter'
]
