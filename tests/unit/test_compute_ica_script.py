"""Unit tests for the compute_ica command line script."""

import pandas as pd
import pytest
from typer.testing import CliRunner

from scripts.compute_ica import app

runner = CliRunner()

HEADER = "sample_id,od,sst,dqo,ce,ph,n,p\n"


@pytest.fixture
def input_csv(tmp_path):
    path = tmp_path / "samples.csv"
    path.write_text(HEADER + "S1,80,10,15,500,7.5,,\nS2,80,10,15,500,7.5,30,2\n")
    return path


def test_writes_default_output(input_csv):
    """Test results land next to the input as <stem>_ica.csv."""
    result = runner.invoke(app, [str(input_csv)])

    assert result.exit_code == 0
    output = input_csv.with_name("samples_ica.csv")
    df = pd.read_csv(output, dtype=str, keep_default_na=False)
    assert list(df["ica_coefficient"]) == ["0.74", "0.75"]


def test_explicit_output(input_csv, tmp_path):
    """Test --output overrides the results path."""
    output = tmp_path / "out" / "results.csv"

    result = runner.invoke(app, [str(input_csv), "--output", str(output)])

    assert result.exit_code == 0
    assert output.exists()


def test_failing_row_aborts(tmp_path):
    """Test a row error exits 1 unless --skip-errors is given."""
    path = tmp_path / "samples.csv"
    path.write_text(HEADER + "S1,80,10,15,0,7.5,,\nS2,80,10,15,500,7.5,,\n")

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 1
    assert not path.with_name("samples_ica.csv").exists()

    result = runner.invoke(app, [str(path), "--skip-errors"])

    assert result.exit_code == 0
    df = pd.read_csv(path.with_name("samples_ica.csv"), dtype=str, keep_default_na=False)
    assert list(df["error"]) == ["invalid_domain_value", ""]


def test_reject_zero_phosphorus_flag(tmp_path):
    """Test the command line flag turns p == 0 into a row error."""
    path = tmp_path / "samples.csv"
    path.write_text(HEADER + "S1,80,10,15,500,7.5,30,0\n")

    assert runner.invoke(app, [str(path)]).exit_code == 0
    assert runner.invoke(app, [str(path), "--reject-zero-phosphorus"]).exit_code == 1


def test_missing_required_column(tmp_path):
    """Test an input without a required column is rejected up front."""
    path = tmp_path / "samples.csv"
    path.write_text("od,sst,dqo,ph\n80,10,15,7\n")

    assert runner.invoke(app, [str(path)]).exit_code == 1
