"""Constants for the wrk2 report parser."""


class ReportConstants:
    """Section markers and pattern sources of the wrk2 text report."""
    UNCORRECTED_LATENCY_MARKER = "Uncorrected Latency"
    DETAILED_SPECTRUM_MARKER = "Detailed Percentile spectrum"
    BLANK_LINE = "\n\n"

    # Units are kept verbatim, so any run of non-whitespace after the number is accepted
    SUMMARY_PATTERN = r"(\d+) requests in (\d+\.\d+\S+), (\d+\.\d+\S+) read"
    REQUESTS_PER_SEC_PATTERN = r"Requests/sec:\s+(\d+\.\d+)"
    TRANSFER_PER_SEC_PATTERN = r"Transfer/sec:\s+(\d+\.\d+\S+)"
    LATENCY_LINE_PATTERN = r"(\d+\.\d+|\d+)%\s+(.+)"

    MAX_UNSIGNED_64 = 2 ** 64 - 1
