"""Integration tests running the full wrapper pipeline against a stubbed wrk2 process."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from src.report import EmptyLatencyTableError
from src.wrapper import ReportPrinter, ResultExporter, Wrk2Runner
from ..test_const import (
    OUTPUT_WITH_BLANK_SECTION, TEST_USER_ARGS, TOTAL_REQUESTS, WRK2_FULL_LATENCY, WRK2_FULL_OUTPUT
)


def _completed(stdout: str, returncode: int = 0):
    result = MagicMock(spec=subprocess.CompletedProcess)
    result.returncode = returncode
    result.stdout = stdout.encode("utf-8")
    result.stderr = b""
    return result


class TestWrk2Pipeline:
    """Test argument defaulting, execution, parsing, printing and export together."""

    @patch("src.wrapper.executor.subprocess.run")
    def test_full_pipeline(self, mock_run, config, output_stream, tmp_path):
        """Test a complete wrk2 report flows through to stdout and CSV files."""
        mock_run.return_value = _completed(WRK2_FULL_OUTPUT)
        config.export_dir = tmp_path / "results"
        runner = Wrk2Runner(config, printer=ReportPrinter(output_stream))

        report = runner.run(TEST_USER_ARGS)

        assert mock_run.call_args[0][0] == ["wrk2", *TEST_USER_ARGS, "-R", "99999999", "-U"]
        assert report.total_requests == TOTAL_REQUESTS
        assert report.latency_pairs() == WRK2_FULL_LATENCY

        printed = output_stream.getvalue()
        assert "Totals      : 1,000,000" in printed
        assert "Requests/sec: 33,333" in printed
        assert "  99.000%: 45.67ms" in printed

        loaded = ResultExporter.load_latency_table(tmp_path / "results" / "uncorrected_latency.csv")
        assert loaded == WRK2_FULL_LATENCY

    @patch("src.wrapper.executor.subprocess.run")
    def test_blank_section_fails(self, mock_run, config, output_stream):
        """Test an empty latency section surfaces EmptyLatencyTableError."""
        mock_run.return_value = _completed(OUTPUT_WITH_BLANK_SECTION)
        runner = Wrk2Runner(config, printer=ReportPrinter(output_stream))

        with pytest.raises(EmptyLatencyTableError):
            runner.run(TEST_USER_ARGS)

    @patch("src.wrapper.executor.subprocess.run")
    def test_main_exit_code_on_parse_failure(self, mock_run, config, capsys):
        """Test the entry point turns a parse failure into exit code one."""
        from main import main

        mock_run.return_value = _completed("no report here\n")

        with patch("main.LoggingManager"):
            assert main(TEST_USER_ARGS) == 1
        assert "Could not find summary information" in capsys.readouterr().err
