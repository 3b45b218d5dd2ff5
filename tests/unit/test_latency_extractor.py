"""Unit tests for the latency table extractor."""

import pytest

from src.report import EmptyLatencyTableError, LatencyPoint, ParseErrorKind, LatencyExtractor


class TestLatencyExtractor:
    """Test conversion of section lines into latency points."""

    def test_extract_pairs(self):
        """Test each percentile line yields one pair."""
        points = LatencyExtractor.extract("\n 50.000%  1.23ms\n 99.000%  45.67ms")
        assert points == [("50.000", "1.23ms"), ("99.000", "45.67ms")]
        assert all(isinstance(point, LatencyPoint) for point in points)

    def test_integer_percentile(self):
        """Test integer percentiles are accepted."""
        points = LatencyExtractor.extract("  50%    1.10ms\n  99%    5.00ms")
        assert points == [("50", "1.10ms"), ("99", "5.00ms")]

    def test_stray_line_skipped(self):
        """Test a non-percentile line between two valid lines is ignored."""
        section = " 50.000%  1.23ms\n#[annotation line]\n 99.000%  45.67ms"
        points = LatencyExtractor.extract(section)
        assert points == [("50.000", "1.23ms"), ("99.000", "45.67ms")]

    def test_blank_lines_skipped(self):
        """Test blank and whitespace-only lines are ignored."""
        points = LatencyExtractor.extract("\n\n   \n 75.000%  1.50ms\n\t\n")
        assert points == [("75.000", "1.50ms")]

    def test_thread_stats_lines_skipped(self):
        """Test thread statistics ending in a percentage are not matched."""
        section = (
            "  Thread Stats   Avg      Stdev     Max   +/- Stdev\n"
            "    Latency     1.00ms  400.00us  10.00ms   80.00%\n"
            " 90.000%    2.10ms"
        )
        assert LatencyExtractor.extract(section) == [("90.000", "2.10ms")]

    def test_order_and_duplicates_preserved(self):
        """Test output follows input order without sorting or deduplication."""
        section = " 99.000%  9.00ms\n 50.000%  1.00ms\n 99.000%  9.00ms"
        points = LatencyExtractor.extract(section)
        assert [point.percentile for point in points] == ["99.000", "50.000", "99.000"]

    def test_latency_rest_of_line_kept(self):
        """Test everything after the separating whitespace is the latency."""
        points = LatencyExtractor.extract(" 50.000%    1.23ms (approx)")
        assert points[0].latency == "1.23ms (approx)"

    def test_windows_line_endings(self):
        """Test carriage returns are stripped with the surrounding whitespace."""
        points = LatencyExtractor.extract(" 50.000%  1.23ms\r\n 99.000%  45.67ms\r\n")
        assert points == [("50.000", "1.23ms"), ("99.000", "45.67ms")]

    def test_empty_table(self):
        """Test a section without percentile lines raises EmptyLatencyTableError."""
        with pytest.raises(EmptyLatencyTableError) as exc_info:
            LatencyExtractor.extract("\n  header only\n\n")
        assert exc_info.value.kind is ParseErrorKind.EMPTY_LATENCY_TABLE

    def test_empty_string(self):
        """Test an empty section raises EmptyLatencyTableError."""
        with pytest.raises(EmptyLatencyTableError):
            LatencyExtractor.extract("")
