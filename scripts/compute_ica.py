#!/usr/bin/env python

"""Compute ICA (Water Quality Index) values for a CSV of samples.

This script is for LOCAL ANALYSIS and data-quality checks. It reads raw
measurements, runs every row through the same engine used when monitoring
records are saved, and writes the derived values to a results CSV.

Input CSV columns (header row required):
    sample_id (optional), od, sst, dqo, ce, ph, n (optional), p (optional)

Usage:
    uv run python scripts/compute_ica.py samples.csv
    uv run python scripts/compute_ica.py samples.csv --output results.csv --skip-errors
    uv run python scripts/compute_ica.py --help
"""

import logging
from pathlib import Path

import pandas as pd
import typer

from ica.batch import compute_frame
from ica.config import IcaConfig, OutputColumns
from ica.outputs import CSVOutputStrategy, OutputStrategy
from ica.validation.errors import IcaCalculationError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Compute ICA water quality indices for a CSV of samples")


@app.command()
def compute(
    input_csv: Path = typer.Argument(
        ...,
        help="CSV file with one sample per row",
        exists=True,
        dir_okay=False,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Results CSV path (default: <input>_ica.csv next to the input)",
    ),
    skip_errors: bool = typer.Option(
        False,
        "--skip-errors",
        help="Record failing rows in an error column instead of aborting",
    ),
    reject_zero_phosphorus: bool | None = typer.Option(
        None,
        "--reject-zero-phosphorus/--allow-zero-phosphorus",
        help="Treat phosphorus == 0 as an error instead of omitting the N/P ratio "
        "(default: ICA_REJECT_ZERO_PHOSPHORUS)",
    ),
):
    """Compute ICA values for every sample in INPUT_CSV."""
    logger.info("=== ICA Water Quality Index - Batch Computation ===")
    logger.info(f"Input file: {input_csv}")

    # Read as text so measurements become exact decimals, not binary floats
    samples = pd.read_csv(input_csv, dtype=str, keep_default_na=False)
    if samples.empty:
        logger.error("Input file contains no samples")
        raise typer.Exit(1)

    missing = [col for col in OutputColumns.raw_fields()[:5] if col not in samples.columns]
    if missing:
        logger.error(f"Input file is missing required columns: {', '.join(missing)}")
        raise typer.Exit(1)

    config = IcaConfig()
    if reject_zero_phosphorus is not None:
        config = IcaConfig(reject_zero_phosphorus=reject_zero_phosphorus)
    try:
        results = compute_frame(
            samples, on_error="skip" if skip_errors else "raise", config=config
        )
    except IcaCalculationError as e:
        logger.error(f"Computation aborted ({e.kind}): {e}")
        logger.error("Re-run with --skip-errors to process the remaining samples")
        raise typer.Exit(1) from e

    output_path = output or input_csv.with_name(f"{input_csv.stem}_ica.csv")
    strategy: OutputStrategy = CSVOutputStrategy()
    strategy.write(results, output_path)

    summary = results[OutputColumns.QUALITY_CLASSIFICATION].value_counts(dropna=True)
    for quality_class, count in summary.items():
        logger.info(f"  {quality_class}: {count}")
    logger.info(f"Results written to {output_path}")


if __name__ == "__main__":
    app()
