"""Custom exceptions for the wrk2 wrapper."""
from typing import Optional


class Wrk2ExecutionError(Exception):
    """Exception raised when wrk2 cannot be run or exits unsuccessfully."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
