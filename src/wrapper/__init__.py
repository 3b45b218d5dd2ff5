"""Wrapper package initialization."""
from .arguments import Wrk2Arguments, build_wrk2_arguments
from .exceptions import Wrk2ExecutionError
from .executor import Wrk2Executor, Wrk2Output
from .printer import ReportPrinter
from .exporter import ResultExporter
from .runner import Wrk2Runner

__all__ = [
    'Wrk2Arguments',
    'build_wrk2_arguments',
    'Wrk2ExecutionError',
    'Wrk2Executor',
    'Wrk2Output',
    'ReportPrinter',
    'ResultExporter',
    'Wrk2Runner'
]
