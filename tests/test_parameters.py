"""
Unit Tests for the Parameters Module

Tests cover:
- Age band parsing and the fixed weight table
- Vaccination coverage from targeted bands
- Parameter validation (ranges, non-finite and non-numeric values)
- Conversion of weekly parameters into per-day rates
- Scenario presets
"""

import dataclasses
import math

import pytest

from sirsvax.errors import InvalidParameter
from sirsvax.parameters import (
    AGE_BAND_WEIGHTS,
    AgeBand,
    Rates,
    SIRSParameters,
    compute_rates,
    default_params,
    high_transmission_params,
    targeted_vaccination_params,
    vaccination_coverage,
)


# ============================================================================
# Age bands
# ============================================================================


class TestAgeBand:
    """Test AgeBand parsing and weights."""

    def test_weight_table(self):
        """Reference weights are exact."""
        assert AGE_BAND_WEIGHTS[AgeBand.YOUTH] == 0.221
        assert AGE_BAND_WEIGHTS[AgeBand.ADULTS] == 0.614
        assert AGE_BAND_WEIGHTS[AgeBand.OLDER_ADULTS] == 0.165
        assert AGE_BAND_WEIGHTS[AgeBand.NONE] == 0.0

    def test_weight_table_is_read_only(self):
        """The table cannot be modified."""
        with pytest.raises(TypeError):
            AGE_BAND_WEIGHTS[AgeBand.YOUTH] = 0.5

    @pytest.mark.parametrize("text", ["Older adults", "older-adults", "OLDER_ADULTS", "OlderAdults"])
    def test_parse_spellings(self, text):
        """Value, name and separator variants resolve to the same member."""
        assert AgeBand.parse(text) is AgeBand.OLDER_ADULTS

    def test_parse_member_passthrough(self):
        assert AgeBand.parse(AgeBand.YOUTH) is AgeBand.YOUTH

    @pytest.mark.parametrize("bad", ["Elderly", "", 3, None])
    def test_parse_unknown(self, bad):
        with pytest.raises(InvalidParameter):
            AgeBand.parse(bad)


# ============================================================================
# Vaccination coverage
# ============================================================================


class TestVaccinationCoverage:
    """Test coverage computation."""

    def test_empty_selection(self):
        assert vaccination_coverage([]) == 0.0

    def test_none_band(self):
        assert vaccination_coverage([AgeBand.NONE]) == 0.0

    def test_additive(self):
        """Coverage is the sum of the selected weights."""
        assert vaccination_coverage(["Youth", "Adults"]) == pytest.approx(0.835)

    def test_all_bands(self):
        """Disjoint bands together cover the whole population."""
        assert vaccination_coverage(list(AgeBand)) == pytest.approx(1.0)
        assert vaccination_coverage(list(AgeBand)) <= 1.0

    def test_redundant_selection_capped(self):
        """Selecting a band twice is capped at 1.0 with a warning."""
        with pytest.warns(UserWarning):
            coverage = vaccination_coverage(["Adults", "Adults"])
        assert coverage == 1.0

    def test_unknown_band(self):
        with pytest.raises(InvalidParameter):
            vaccination_coverage(["Youth", "Toddlers"])


# ============================================================================
# Parameter validation
# ============================================================================


class TestSIRSParameters:
    """Test parameter construction and validation."""

    def test_defaults(self):
        params = SIRSParameters()
        assert params.initial_prevalence == 0.01
        assert params.transmission_probability == 0.01
        assert params.infection_duration_weeks == 1.0
        assert params.waning_weeks == 2.0
        assert params.vaccination_uptake_weekly == 0.0
        assert params.targeted_age_bands == frozenset()

    def test_bands_normalised(self):
        """Band names are converted to a frozenset of AgeBand."""
        params = SIRSParameters(targeted_age_bands=["Youth", "adults", AgeBand.YOUTH])
        assert params.targeted_age_bands == frozenset({AgeBand.YOUTH, AgeBand.ADULTS})

    def test_single_band_string(self):
        params = SIRSParameters(targeted_age_bands="Adults")
        assert params.targeted_age_bands == frozenset({AgeBand.ADULTS})

    def test_integers_coerced(self):
        params = SIRSParameters(initial_prevalence=1, infection_duration_weeks=2)
        assert isinstance(params.initial_prevalence, float)
        assert params.infection_duration_weeks == 2.0

    def test_immutable(self):
        params = SIRSParameters()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.transmission_probability = 0.5

    def test_replace(self):
        params = SIRSParameters()
        other = params.replace(vaccination_uptake_weekly=0.3)
        assert other.vaccination_uptake_weekly == 0.3
        assert params.vaccination_uptake_weekly == 0.0

    @pytest.mark.parametrize("field,value", [
        ("initial_prevalence", 0.0),
        ("initial_prevalence", 1.5),
        ("initial_prevalence", -0.1),
        ("transmission_probability", -0.01),
        ("transmission_probability", 1.01),
        ("infection_duration_weeks", 0.0),
        ("infection_duration_weeks", -1.0),
        ("waning_weeks", 0.0),
        ("vaccination_uptake_weekly", 1.2),
        ("vaccination_uptake_weekly", -0.5),
        ("transmission_probability", float("nan")),
        ("waning_weeks", float("inf")),
        ("initial_prevalence", "abc"),
        ("initial_prevalence", None),
        ("transmission_probability", True),
    ])
    def test_invalid_values(self, field, value):
        """Out-of-range and non-numeric inputs are rejected."""
        with pytest.raises(InvalidParameter):
            SIRSParameters(**{field: value})

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            SIRSParameters(waning_weeks=0)

    def test_unknown_band_rejected(self):
        with pytest.raises(InvalidParameter):
            SIRSParameters(targeted_age_bands={"Infants"})

    def test_boundaries_accepted(self):
        """Closed ends of the valid ranges are accepted."""
        params = SIRSParameters(
            initial_prevalence=1.0,
            transmission_probability=0.0,
            vaccination_uptake_weekly=1.0,
        )
        assert params.initial_prevalence == 1.0

    def test_to_dict(self):
        params = SIRSParameters(targeted_age_bands={"Youth"})
        d = params.to_dict()
        assert d["targeted_age_bands"] == ["Youth"]
        assert d["vax_proportion"] == pytest.approx(0.221)

    def test_print_summary(self, capsys):
        targeted_vaccination_params().print_summary()
        out = capsys.readouterr().out
        assert "VACCINATION" in out
        assert "Adults" in out


# ============================================================================
# Rate transform
# ============================================================================


class TestComputeRates:
    """Test conversion to per-day rates."""

    def test_rates(self):
        params = SIRSParameters(
            transmission_probability=0.3,
            infection_duration_weeks=2.0,
            waning_weeks=4.0,
            vaccination_uptake_weekly=0.7,
            targeted_age_bands={AgeBand.YOUTH, AgeBand.ADULTS},
        )
        rates = compute_rates(params)

        assert rates.beta == 0.3
        assert rates.gamma == pytest.approx(1 / 14)
        assert rates.omega == pytest.approx(1 / 28)
        assert rates.vax_proportion == pytest.approx(0.835)
        assert rates.nu == pytest.approx(0.1 * 0.835)

    def test_no_bands_means_no_vaccination(self):
        rates = compute_rates(SIRSParameters(vaccination_uptake_weekly=1.0))
        assert rates.nu == 0.0

    def test_rejects_other_types(self):
        with pytest.raises(InvalidParameter):
            compute_rates({"transmission_probability": 0.1})

    def test_r0(self):
        rates = compute_rates(high_transmission_params())
        assert rates.R0 == pytest.approx(3.5)

    def test_r0_zero_gamma(self):
        assert Rates(beta=0.1, gamma=0.0, omega=0.1, nu=0.0).R0 == math.inf


class TestPresets:
    """Test scenario factories."""

    def test_default(self):
        assert default_params() == SIRSParameters()

    def test_high_transmission_grows(self):
        """beta * S0 exceeds gamma, so prevalence grows initially."""
        params = high_transmission_params()
        rates = compute_rates(params)
        assert rates.beta * (1 - params.initial_prevalence) > rates.gamma

    def test_targeted(self):
        rates = compute_rates(targeted_vaccination_params())
        assert rates.vax_proportion == pytest.approx(0.779)
        assert rates.nu > 0
