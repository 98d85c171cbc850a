"""
===============================================================================
parameters.py
Last Updated: 2026-10-19
===============================================================================
Model Parameters for the SIRS Vaccination Engine

User-facing parameters are expressed the way the interactive layer collects
them (durations in weeks, proportions per week). compute_rates() turns them
into the per-day rates used by the ODE right-hand side.

    beta  = transmission_probability
    gamma = 1 / (7 * infection_duration_weeks)
    omega = 1 / (7 * waning_weeks)
    nu    = (vaccination_uptake_weekly / 7) * vax_proportion

vax_proportion is the population share of the targeted age bands, read from
the fixed AGE_BAND_WEIGHTS table.
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""

import math
import warnings
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Union

from .errors import InvalidParameter

DAYS_PER_WEEK = 7.0


class AgeBand(Enum):
    """Population age bands that a vaccination campaign can target."""
    NONE = "None"
    YOUTH = "Youth"
    ADULTS = "Adults"
    OLDER_ADULTS = "Older adults"

    @classmethod
    def parse(cls, band: Union["AgeBand", str]) -> "AgeBand":
        """Resolve a member, its value or its name (case/separator-insensitive)."""
        if isinstance(band, cls):
            return band
        if isinstance(band, str):
            key = "".join(c for c in band.lower() if c.isalnum())
            for member in cls:
                if key == member.name.lower().replace("_", ""):
                    return member
        raise InvalidParameter(f"unknown age band: {band!r}")


# population share per age band (None contributes nothing)
AGE_BAND_WEIGHTS = MappingProxyType({
    AgeBand.NONE: 0.0,
    AgeBand.YOUTH: 0.221,
    AgeBand.ADULTS: 0.614,
    AgeBand.OLDER_ADULTS: 0.165,
})


def vaccination_coverage(bands: Iterable[Union[AgeBand, str]]) -> float:
    """
    Proportion of the population reached by vaccination.

    Weights of the selected bands are summed without normalisation. The
    result is capped at 1.0; a warning is emitted if the raw sum exceeds it,
    which only happens when a band is selected more than once.

    Parameters:
    bands: iterable of AgeBand or band names. Empty selection gives 0.

    Returns:
    vax_proportion: float in [0, 1]
    """
    total = sum(AGE_BAND_WEIGHTS[AgeBand.parse(b)] for b in bands)
    if total > 1.0 + 1e-12:
        warnings.warn(
            f"Selected age bands cover {total:.3f} of the population; "
            "capping vaccination coverage at 1.0."
        )
    return min(float(total), 1.0)


def _as_float(name: str, value) -> float:
    if isinstance(value, bool):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class SIRSParameters:
    """
    Parameter set for one simulation request.

    Durations are in weeks and proportions per week; compute_rates()
    converts them to per-day rates. Instances are immutable, use
    replace() to derive a variant.
    """

    initial_prevalence: float = 0.01        # proportion infectious at day 0, (0, 1]
    transmission_probability: float = 0.01  # beta, [0, 1]
    infection_duration_weeks: float = 1.0   # 1/gamma in weeks, > 0
    waning_weeks: float = 2.0               # 1/omega in weeks, > 0
    vaccination_uptake_weekly: float = 0.0  # susceptibles vaccinated per week, [0, 1]
    targeted_age_bands: FrozenSet[AgeBand] = field(default_factory=frozenset)

    def __post_init__(self):
        """Coerce fields and validate ranges"""
        for name in ("initial_prevalence", "transmission_probability",
                     "infection_duration_weeks", "waning_weeks",
                     "vaccination_uptake_weekly"):
            object.__setattr__(self, name, _as_float(name, getattr(self, name)))

        bands = self.targeted_age_bands
        if bands is None:
            bands = ()
        elif isinstance(bands, (str, AgeBand)):
            bands = (bands,)
        object.__setattr__(self, "targeted_age_bands",
                           frozenset(AgeBand.parse(b) for b in bands))

        if not 0.0 < self.initial_prevalence <= 1.0:
            raise InvalidParameter("initial_prevalence must be in (0, 1]")
        if not 0.0 <= self.transmission_probability <= 1.0:
            raise InvalidParameter("transmission_probability must be in [0, 1]")
        if self.infection_duration_weeks <= 0:
            raise InvalidParameter("infection_duration_weeks must be positive")
        if self.waning_weeks <= 0:
            raise InvalidParameter("waning_weeks must be positive")
        if not 0.0 <= self.vaccination_uptake_weekly <= 1.0:
            raise InvalidParameter("vaccination_uptake_weekly must be in [0, 1]")

    @property
    def vax_proportion(self) -> float:
        return vaccination_coverage(self.targeted_age_bands)

    def replace(self, **changes) -> "SIRSParameters":
        return replace(self, **changes)

    def to_dict(self) -> Dict:
        """Convert parameters to dictionary for easy inspection."""
        return {
            'initial_prevalence': self.initial_prevalence,
            'transmission_probability': self.transmission_probability,
            'infection_duration_weeks': self.infection_duration_weeks,
            'waning_weeks': self.waning_weeks,
            'vaccination_uptake_weekly': self.vaccination_uptake_weekly,
            'targeted_age_bands': sorted(b.value for b in self.targeted_age_bands),
            'vax_proportion': self.vax_proportion,
        }

    def print_summary(self):
        """Print parameter summary for documentation."""
        rates = compute_rates(self)
        bands = ", ".join(sorted(b.value for b in self.targeted_age_bands)) or "none"
        print("SIRS VACCINATION MODEL PARAMETERS:")
        print("\n--- EPIDEMIOLOGY ---")
        print(f"Initial prevalence: {self.initial_prevalence * 100:.2f}%")
        print(f"Transmission (β): {rates.beta:.3f} per day")
        print(f"Infectious period: {self.infection_duration_weeks:.1f} weeks (γ = {rates.gamma:.4f} per day)")
        print(f"Immunity duration: {self.waning_weeks:.1f} weeks (ω = {rates.omega:.4f} per day)")

        print("\n--- VACCINATION ---")
        print(f"Weekly uptake: {self.vaccination_uptake_weekly * 100:.0f}%")
        print(f"Targeted age bands: {bands} ({rates.vax_proportion * 100:.1f}% of population)")
        print(f"Vaccination rate (ν): {rates.nu:.4f} per day")


@dataclass(frozen=True)
class Rates:
    """Per-day rates for the SIRS right-hand side."""
    beta: float
    gamma: float
    omega: float
    nu: float
    vax_proportion: float = 0.0

    @property
    def R0(self) -> float:
        # beta / gamma, ignoring waning and vaccination
        return self.beta / self.gamma if self.gamma > 0 else math.inf


def compute_rates(params: SIRSParameters) -> Rates:
    """
    Convert user-facing parameters into per-day rates.

    Parameters:
    params: SIRSParameters. Validated on construction; a non-instance
            is rejected with InvalidParameter.

    Returns:
    rates: Rates
    """
    if not isinstance(params, SIRSParameters):
        raise InvalidParameter(f"expected SIRSParameters, got {type(params).__name__}")
    vax_proportion = vaccination_coverage(params.targeted_age_bands)
    return Rates(
        beta=params.transmission_probability,
        gamma=1.0 / (params.infection_duration_weeks * DAYS_PER_WEEK),
        omega=1.0 / (params.waning_weeks * DAYS_PER_WEEK),
        nu=(params.vaccination_uptake_weekly / DAYS_PER_WEEK) * vax_proportion,
        vax_proportion=vax_proportion,
    )


# Alternative parameter sets for scenario exploration
def default_params() -> SIRSParameters:
    """Starting values of the interactive layer"""
    return SIRSParameters()


def high_transmission_params() -> SIRSParameters:
    """Situation where beta * S exceeds gamma and prevalence grows"""
    return SIRSParameters(
        transmission_probability=0.5,
        infection_duration_weeks=1.0,
        waning_weeks=4.0,
    )


def targeted_vaccination_params() -> SIRSParameters:
    """High transmission with half of susceptible adults and older adults vaccinated weekly."""
    return high_transmission_params().replace(
        vaccination_uptake_weekly=0.5,
        targeted_age_bands=frozenset({AgeBand.ADULTS, AgeBand.OLDER_ADULTS}),
    )
