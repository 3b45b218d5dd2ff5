"""Runner to orchestrate a wrk2 invocation and the parsing of its report."""
from typing import Optional, Sequence

from src.report import BenchmarkReport, ReportParseError, parse_report
from src.shared.config import Config
from src.shared.logging import LoggingManager

from .arguments import build_wrk2_arguments
from .exceptions import Wrk2ExecutionError
from .executor import Wrk2Executor
from .exporter import ResultExporter
from .printer import ReportPrinter


# Configure logging
logger = LoggingManager.get_logger(__name__)


class Wrk2Runner:
    """Runs wrk2 with default flags, then parses, prints and exports its report."""

    def __init__(self, config: Config, executor: Optional[Wrk2Executor] = None,
                 printer: Optional[ReportPrinter] = None):
        self.config = config
        self.executor = executor or Wrk2Executor(config.wrk2_binary, config.timeout_seconds)
        self.printer = printer or ReportPrinter()

    def run(self, user_args: Sequence[str]) -> BenchmarkReport:
        """
        Run the complete wrap-execute-parse process.

        Args:
            user_args: Arguments to pass through to wrk2.

        Returns:
            The parsed report.

        Raises:
            Wrk2ExecutionError: If wrk2 fails.
            ReportParseError: If the output cannot be parsed.
        """
        wrk2_args = build_wrk2_arguments(user_args, self.config.default_rate)
        self.printer.print_command(wrk2_args.command_line(self.config.wrk2_binary))

        try:
            output = self.executor.run(wrk2_args.args)
        except Wrk2ExecutionError as e:
            logger.error(f"wrk2 failed: {e}")
            if e.stderr:
                logger.error(f"Error output: {e.stderr}")
            raise

        if wrk2_args.verbose:
            self.printer.print_raw(output.stdout)

        try:
            report = parse_report(output.stdout)
        except ReportParseError as e:
            logger.error(f"Could not parse wrk2 output ({e.kind.value}): {e}")
            logger.debug(f"Raw output:\n{output.stdout}")
            raise

        self.printer.print_report(report)

        if self.config.export_dir is not None:
            ResultExporter.export(report, self.config.export_dir)

        return report
