"""Shared test configuration and fixtures for all tests."""

import io
from unittest.mock import MagicMock

import pytest

from src.report import parse_report
from src.shared.config import Config
from src.wrapper import ReportPrinter, Wrk2Output
from .test_const import MINIMAL_OUTPUT, WRK2_FULL_OUTPUT


@pytest.fixture
def minimal_report():
    """Parsed report of the minimal example output."""
    return parse_report(MINIMAL_OUTPUT)


@pytest.fixture
def full_report():
    """Parsed report of a complete wrk2 -U output."""
    return parse_report(WRK2_FULL_OUTPUT)


@pytest.fixture
def output_stream():
    """In-memory stream capturing printer output."""
    return io.StringIO()


@pytest.fixture
def printer(output_stream):
    """Printer writing to the in-memory stream."""
    return ReportPrinter(output_stream)


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Settings isolated from the developer's environment and config file."""
    monkeypatch.chdir(tmp_path)
    return Config()


@pytest.fixture
def mock_executor():
    """Executor returning the full wrk2 output."""
    executor = MagicMock()
    executor.run.return_value = Wrk2Output(stdout=WRK2_FULL_OUTPUT, stderr="", returncode=0)
    return executor
