"""Handles exporting parsed wrk2 reports to CSV."""
from pathlib import Path
from typing import List, Union

import pandas as pd

from src.const import LATENCY_CSV_NAME, SUMMARY_CSV_NAME
from src.report import BenchmarkReport, LatencyPoint
from src.shared.logging import LoggingManager


# Configure logging
logger = LoggingManager.get_logger(__name__)


class ResultExporter:
    """Handles exporting parsed reports to CSV files."""

    LATENCY_COLUMNS = ["percentile", "latency"]

    @staticmethod
    def latency_frame(report: BenchmarkReport) -> pd.DataFrame:
        """
        Build a DataFrame of the latency table.

        Args:
            report: Parsed report.

        Returns:
            DataFrame with percentile and latency columns, in report order.
        """
        return pd.DataFrame(report.latency_pairs(), columns=ResultExporter.LATENCY_COLUMNS)

    @staticmethod
    def save_latency_table(report: BenchmarkReport, output_path: Union[Path, str]) -> None:
        """Save the latency table to CSV."""
        ResultExporter.latency_frame(report).to_csv(output_path, index=False)
        logger.info(f"Latency table saved to CSV: {output_path}")

    @staticmethod
    def save_summary(report: BenchmarkReport, output_path: Union[Path, str]) -> None:
        """Save the scalar metrics as a single-row CSV."""
        pd.DataFrame([report.summary()]).to_csv(output_path, index=False)
        logger.info(f"Summary saved to CSV: {output_path}")

    @staticmethod
    def load_latency_table(input_path: Union[Path, str]) -> List[LatencyPoint]:
        """
        Load a latency table saved by save_latency_table.

        Values are read as strings so "50.000" keeps its trailing zeros.

        Args:
            input_path: Path to load CSV from.

        Returns:
            Latency points in file order.
        """
        df = pd.read_csv(input_path, dtype=str, keep_default_na=False)
        points = [
            LatencyPoint(percentile=row["percentile"], latency=row["latency"])
            for _, row in df.iterrows()
        ]
        logger.info(f"Latency table loaded from CSV: {input_path}")
        return points

    @staticmethod
    def export(report: BenchmarkReport, export_dir: Union[Path, str]) -> None:
        """Write summary and latency CSV files into export_dir, creating it if needed."""
        export_dir = Path(export_dir)
        export_dir.mkdir(parents=True, exist_ok=True)
        ResultExporter.save_summary(report, export_dir / SUMMARY_CSV_NAME)
        ResultExporter.save_latency_table(report, export_dir / LATENCY_CSV_NAME)
