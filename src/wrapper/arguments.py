"""Builds the wrk2 argument list from the user's arguments."""
from dataclasses import dataclass, field
from typing import List, Sequence

from src.const import DEFAULT_RATE, RATE_FLAG, UNCORRECTED_LATENCY_FLAG, VERBOSE_FLAG


@dataclass
class Wrk2Arguments:
    """Arguments to pass to wrk2 and the wrapper options derived from them."""
    args: List[str] = field(default_factory=list)
    verbose: bool = False

    def command_line(self, binary: str) -> str:
        """Render the command as it would be typed in a shell."""
        return " ".join([binary, *self.args])


def build_wrk2_arguments(user_args: Sequence[str], default_rate: int = DEFAULT_RATE) -> Wrk2Arguments:
    """
    Add the rate and uncorrected-latency flags unless the user supplied them.

    Only exact tokens are recognized, so "-R1000" does not count as "-R".

    Args:
        user_args: Arguments given on the command line, in order.
        default_rate: Requests/sec passed with -R when the user gave none.

    Returns:
        Wrk2Arguments with defaults appended after the user's arguments.
    """
    args = list(user_args)
    if RATE_FLAG not in args:
        args.extend([RATE_FLAG, str(default_rate)])
    if UNCORRECTED_LATENCY_FLAG not in args:
        args.append(UNCORRECTED_LATENCY_FLAG)
    return Wrk2Arguments(args=args, verbose=VERBOSE_FLAG in args)
