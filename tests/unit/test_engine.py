"""Unit tests for the ICA engine orchestration."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from ica import compute, compute_many
from ica.config import IcaConfig
from ica.models import QualityClass, RawSample
from ica.validation import (
    IcaCalculationError,
    InvalidCompositeRange,
    InvalidDomainValue,
    MissingRequiredInput,
)


class TestComputeFiveVariables:
    """End-to-end scenario without nutrients."""

    def test_sub_indices(self, five_variable_sample):
        """Test each sub-index follows its transfer function."""
        result = compute(five_variable_sample)

        assert result.oxygen_index == Decimal("0.8")
        assert result.solids_index == Decimal("0.99")
        assert result.demand_index == Decimal("0.91")
        assert result.conductivity_index == 0
        assert result.acidity_index == 1

    def test_nutrients_absent(self, five_variable_sample):
        """Test the nutrient pair is absent and 5 variables are used."""
        result = compute(five_variable_sample)

        assert result.nutrient_ratio is None
        assert result.nutrient_index is None
        assert result.has_nutrient_ratio is False
        assert result.variable_count == 5

    def test_coefficient_is_average_of_five(self, five_variable_sample):
        """Test coefficient = 0.2 * (0.8 + 0.99 + 0.91 + 0 + 1) = 0.74."""
        result = compute(five_variable_sample)

        assert result.ica_coefficient == Decimal("0.74")
        assert result.quality_class is QualityClass.ACCEPTABLE


class TestComputeSixVariables:
    """End-to-end scenario with nutrients."""

    def test_nutrient_pair(self, six_variable_sample):
        """Test N/P = 15 gives the 0.8 sub-index and 6 variables."""
        result = compute(six_variable_sample)

        assert result.nutrient_ratio == 15
        assert result.nutrient_index == Decimal("0.8")
        assert result.variable_count == 6

    def test_coefficient_uses_six_variable_weights(self, six_variable_sample):
        """Test 0.136 + 0.168 + 0.155 + 0 + 0.15 + 0.136 = 0.745."""
        result = compute(six_variable_sample)

        assert result.ica_coefficient == Decimal("0.745")
        assert result.quality_class is QualityClass.ACCEPTABLE

    def test_incomplete_nutrients_fall_back_to_five(self, five_variable_sample):
        """Test a lone nitrogen value does not add a sixth variable."""
        sample = five_variable_sample.model_copy(update={"n": Decimal("30")})

        result = compute(sample)

        assert result.variable_count == 5
        assert result.ica_coefficient == Decimal("0.74")

    def test_zero_phosphorus_falls_back_to_five(self, six_variable_sample):
        """Test p == 0 leaves the nutrient pair out by default."""
        sample = six_variable_sample.model_copy(update={"p": Decimal("0")})

        assert compute(sample).variable_count == 5

    def test_zero_phosphorus_rejected_when_configured(self, six_variable_sample):
        """Test reject_zero_phosphorus turns p == 0 into an error."""
        sample = six_variable_sample.model_copy(update={"p": Decimal("0")})

        with pytest.raises(InvalidDomainValue):
            compute(sample, IcaConfig(reject_zero_phosphorus=True))


class TestComputeErrors:
    """Tests for typed error propagation."""

    def test_missing_required_inputs(self):
        """Test every absent required field is reported together."""
        sample = RawSample(od=Decimal("80"), dqo=Decimal("15"), ph=Decimal("7"))

        with pytest.raises(MissingRequiredInput) as exc_info:
            compute(sample)

        assert exc_info.value.missing_fields == ["sst", "ce"]
        assert exc_info.value.kind == "missing_required_input"

    def test_non_positive_conductivity(self, five_variable_sample):
        """Test ce <= 0 propagates InvalidDomainValue."""
        sample = five_variable_sample.model_copy(update={"ce": Decimal("0")})

        with pytest.raises(InvalidDomainValue):
            compute(sample)

    def test_negative_coefficient(self):
        """Test a coefficient below 0 propagates InvalidCompositeRange.

        od = -200 gives iod = -2; -0.4 + 0 + 0.025 + 0 + 0.02 = -0.355.
        """
        sample = RawSample(
            od=Decimal("-200"),
            sst=Decimal("320"),
            dqo=Decimal("100"),
            ce=Decimal("1000"),
            ph=Decimal("3"),
        )

        with pytest.raises(InvalidCompositeRange) as exc_info:
            compute(sample)

        assert exc_info.value.value == Decimal("-0.355")

    def test_errors_share_base_class(self, five_variable_sample):
        """Test callers can catch every engine failure at once."""
        sample = five_variable_sample.model_copy(update={"ce": Decimal("-1")})

        with pytest.raises(IcaCalculationError):
            compute(sample)

    def test_compute_many_fails_fast(self, five_variable_sample):
        """Test compute_many propagates the first failure."""
        bad = five_variable_sample.model_copy(update={"ce": Decimal("0")})

        with pytest.raises(InvalidDomainValue):
            compute_many([five_variable_sample, bad, five_variable_sample])


class TestComputeProperties:
    """Tests for determinism and concurrency."""

    def test_idempotent(self, six_variable_sample):
        """Test identical input gives byte-identical output."""
        first = compute(six_variable_sample)
        second = compute(six_variable_sample)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_input_not_mutated(self, six_variable_sample):
        """Test the sample is unchanged after computing."""
        before = six_variable_sample.model_dump()

        compute(six_variable_sample)

        assert six_variable_sample.model_dump() == before

    def test_concurrent_calls(self, five_variable_sample, six_variable_sample):
        """Test concurrent calls give the same results as sequential ones."""
        samples = [five_variable_sample, six_variable_sample] * 50
        expected = compute_many(samples)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(compute, samples))

        assert results == expected

    def test_result_is_frozen(self, five_variable_sample):
        """Test the IndexSet cannot be modified after creation."""
        result = compute(five_variable_sample)

        with pytest.raises(ValueError):
            result.ica_coefficient = Decimal("1")
