"""Renders a parsed report to the console."""
import sys
from typing import Optional, TextIO

from src.report import BenchmarkReport, NumberFormatter


class ReportPrinter:
    """Writes the command echo, raw output and parsed results to a stream."""

    SEPARATOR = "-" * 21

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def _write(self, line: str = "") -> None:
        print(line, file=self.stream)

    def print_command(self, command_line: str) -> None:
        self._write(command_line)

    def print_raw(self, output: str) -> None:
        """Echo the unparsed wrk2 output (verbose mode)."""
        self._write(f"======\n{output}")

    def print_report(self, report: BenchmarkReport) -> None:
        """Print the summary block followed by the latency table."""
        self._write("\nPerformance Results:")
        self._write(self.SEPARATOR)
        self._write(f"Totals      : {NumberFormatter.format_with_commas(report.total_requests)}")
        self._write(f"Duration    : {report.duration}")
        self._write(f"Data read   : {report.data_read}")
        self._write(f"Requests/sec: {NumberFormatter.format_rate_with_commas(report.requests_per_sec)}")
        self._write(f"Transfer/sec: {report.transfer_per_sec}")
        self._write("\nUncorrected Latency:")
        self._write(self.SEPARATOR)
        for percentile, latency in report.uncorrected_latency:
            self._write(f"{percentile:>8}%: {latency}")
