"""Unit tests for quality classification of the ICA coefficient."""

from decimal import Decimal

import pytest

from ica.calculators import classify_ica_coefficient
from ica.models import QualityClass
from ica.validation import InvalidCompositeRange


@pytest.mark.parametrize(
    ("coefficient", "expected"),
    [
        ("0", QualityClass.VERY_POOR),
        ("0.25", QualityClass.VERY_POOR),
        ("0.2500001", QualityClass.POOR),
        ("0.5", QualityClass.POOR),
        ("0.501", QualityClass.FAIR),
        ("0.7", QualityClass.FAIR),
        ("0.701", QualityClass.ACCEPTABLE),
        ("0.9", QualityClass.ACCEPTABLE),
        ("0.901", QualityClass.GOOD),
        ("1.0", QualityClass.GOOD),
    ],
)
def test_partition(coefficient, expected):
    """Test every range boundary of the five quality classes."""
    assert classify_ica_coefficient(Decimal(coefficient)) is expected


@pytest.mark.parametrize("coefficient", ["1.01", "-0.01", "-0.355", "2"])
def test_out_of_range_rejected(coefficient):
    """Test coefficients outside [0, 1] raise InvalidCompositeRange."""
    with pytest.raises(InvalidCompositeRange) as exc_info:
        classify_ica_coefficient(Decimal(coefficient))

    assert exc_info.value.kind == "invalid_composite_range"
    assert exc_info.value.value == Decimal(coefficient)


def test_quality_classes_are_ordered():
    """Test classes compare from worst to best."""
    assert QualityClass.VERY_POOR < QualityClass.POOR < QualityClass.FAIR
    assert QualityClass.FAIR < QualityClass.ACCEPTABLE < QualityClass.GOOD
    assert max(QualityClass) is QualityClass.GOOD
    assert QualityClass.GOOD.label == "Good"
