"""Number formatting for report display."""
from .constants import ReportConstants


class NumberFormatter:
    """Renders counts and rates with grouping commas."""

    @staticmethod
    def format_with_commas(n: int) -> str:
        """
        Render an unsigned integer with a comma every three digits.

        Args:
            n: Non-negative integer.

        Returns:
            Grouped digit string, e.g. "1,000,000".

        Raises:
            TypeError: If n is not an integer.
            ValueError: If n is negative.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Expected an integer, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"Expected an unsigned integer, got {n}")
        return f"{n:,}"

    @staticmethod
    def format_rate_with_commas(value: float) -> str:
        """Truncate a rate toward zero, capped at the unsigned 64-bit maximum, and group it."""
        if value >= ReportConstants.MAX_UNSIGNED_64:
            return NumberFormatter.format_with_commas(ReportConstants.MAX_UNSIGNED_64)
        return NumberFormatter.format_with_commas(int(value))
