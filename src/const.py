"""Constants for the wrk2 wrapper."""

# wrk2 invocation defaults
DEFAULT_WRK2_BINARY = "wrk2"
DEFAULT_RATE = 99999999
RATE_FLAG = "-R"
UNCORRECTED_LATENCY_FLAG = "-U"
VERBOSE_FLAG = "-v"

# Configuration sources
ENV_PREFIX = "WRK2_WRAPPER_"
CONFIG_FILE_NAME = "wrk2_wrapper.json"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {}

# Export file names
SUMMARY_CSV_NAME = "summary.csv"
LATENCY_CSV_NAME = "uncorrected_latency.csv"

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
