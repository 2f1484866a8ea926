"""Base output strategy interface for ICA results."""

from pathlib import Path
from typing import Protocol

import pandas as pd


class OutputStrategy(Protocol):
    """Protocol for output strategies that serialize computed ICA results.

    Output strategies are separate from computation: ica.batch.compute_frame
    returns a DataFrame and the caller decides when and where to write it.
    """

    def write(self, results: pd.DataFrame, output_path: Path) -> Path:
        """Write computed results to a file.

        Args:
            results: DataFrame produced by ica.batch.compute_frame
            output_path: Path where output file should be written

        Returns:
            Path to the written output file

        Raises:
            IOError: If writing fails
            ValueError: If results cannot be serialized
        """
        ...
