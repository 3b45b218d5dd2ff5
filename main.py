"""Main entry point for the wrk2 wrapper."""

import sys
from typing import List, Optional

from src.const import EXIT_FAILURE, EXIT_SUCCESS
from src.report import ReportParseError
from src.shared.config import Config
from src.shared.logging import LoggingManager
from src.wrapper import Wrk2ExecutionError, Wrk2Runner


def main(argv: Optional[List[str]] = None) -> int:
    """Run wrk2 with the given arguments and print the extracted metrics.

    Args:
        argv: Arguments passed through to wrk2; defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    config = Config()
    LoggingManager.setup_logging(config.log_level, config)

    runner = Wrk2Runner(config)
    try:
        runner.run(argv)
    except (Wrk2ExecutionError, ReportParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
