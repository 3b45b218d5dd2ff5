"""Runs the wrk2 binary and captures its output."""
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from src.const import DEFAULT_WRK2_BINARY
from src.shared.logging import LoggingManager

from .exceptions import Wrk2ExecutionError


# Configure logging
logger = LoggingManager.get_logger(__name__)


@dataclass
class Wrk2Output:
    """Captured result of one wrk2 process."""
    stdout: str
    stderr: str
    returncode: int


class Wrk2Executor:
    """Handles invocation of the wrk2 process."""

    def __init__(self, binary: str = DEFAULT_WRK2_BINARY, timeout: Optional[float] = None):
        self.binary = binary
        self.timeout = timeout

    def run(self, args: Sequence[str]) -> Wrk2Output:
        """
        Run wrk2 to completion.

        Args:
            args: Arguments passed to wrk2.

        Returns:
            Wrk2Output with decoded stdout and stderr.

        Raises:
            Wrk2ExecutionError: If wrk2 cannot be started, times out or exits non-zero.
        """
        cmd = [self.binary, *args]
        logger.debug(f"Executing: {cmd}")
        try:
            result = subprocess.run(cmd, capture_output=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise Wrk2ExecutionError(f"{self.binary} did not finish within {self.timeout}s") from e
        except OSError as e:
            raise Wrk2ExecutionError(f"Failed to execute {self.binary} command: {e}") from e

        output = Wrk2Output(
            stdout=result.stdout.decode("utf-8", errors="replace"),
            stderr=result.stderr.decode("utf-8", errors="replace"),
            returncode=result.returncode,
        )
        if output.returncode != 0:
            raise Wrk2ExecutionError(
                f"{self.binary} command failed with exit code: {output.returncode}",
                returncode=output.returncode,
                stderr=output.stderr,
            )
        return output
