"""CSV output strategy for ICA results.

Writes one row per sample with raw measurements followed by the derived
values at their persisted scale, in the fixed OutputColumns order.
"""

import logging
from pathlib import Path

import pandas as pd

from ica.config import OutputColumns

logger = logging.getLogger(__name__)


class CSVOutputStrategy:
    """Writes computed ICA results to CSV.

    Decimal values are written with str(), so the fixed scale applied by the
    adapter (e.g. 0.800, 0.78) is preserved rather than reformatted as floats.
    """

    def write(self, results: pd.DataFrame, output_path: Path) -> Path:
        """Write computed results to a CSV file.

        Args:
            results: DataFrame produced by ica.batch.compute_frame
            output_path: Path where CSV file should be written

        Returns:
            Path to the written CSV file

        Raises:
            IOError: If writing fails
            ValueError: If results are empty or missing required columns
        """
        if results.empty:
            raise ValueError("Cannot write CSV: results are empty")

        column_order = self._get_column_order(results)
        missing = [col for col in column_order if col not in results.columns]
        if missing:
            msg = f"Cannot write CSV: missing columns {', '.join(missing)}"
            raise ValueError(msg)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        results[column_order].to_csv(output_path, index=False)

        logger.info(f"Wrote {len(results)} ICA results to {output_path}")
        return output_path

    def _get_column_order(self, results: pd.DataFrame) -> list[str]:
        """Get column order for the CSV, keeping the error column if present."""
        columns = OutputColumns.final_output_order()
        if OutputColumns.ERROR in results.columns:
            columns.append(OutputColumns.ERROR)
        return columns
