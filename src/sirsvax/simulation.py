"""
===========================================================
simulation.py
Last Updated: 2026-10-19
===========================================================

Description:
    Runs the SIRS model twice over the same 31-day grid, once
    with the vaccination flow and once without, and bundles the
    aligned trajectories with their incidence summary.

Example Usage:
    from sirsvax import SIRSParameters, AgeBand, simulate
    params = SIRSParameters(transmission_probability=0.5,
                            vaccination_uptake_weekly=0.3,
                            targeted_age_bands={AgeBand.ADULTS})
    result = simulate(params)
    result.incidence.percent_reduction

Notes:
    - Stateless: every call builds its own rates, grid copy and
      trajectories.
    - Both runs use the same SolverSettings so that differences
      between the series come from the model alone.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from dataclasses import dataclass
from typing import Dict

import numpy as np
import pandas as pd

from .errors import InvalidParameter
from .incidence import IncidenceSummary, summarize_incidence
from .integrator import SolverSettings, integrate
from .parameters import Rates, SIRSParameters, compute_rates
from .sirs import baseline_rhs, vaccinated_rhs

SIMULATION_DAYS = 30
TIME_GRID = np.arange(0, SIMULATION_DAYS + 1)
TIME_GRID.flags.writeable = False


def initial_state(params: SIRSParameters) -> np.ndarray:
    """[S0, I0, R0] with nobody immune at day 0"""
    p = params.initial_prevalence
    return np.array([1.0 - p, p, 0.0])


@dataclass(frozen=True)
class SimulationResult:
    """
    Aligned output of one simulation request.

    S, I, R are the vaccinated trajectory; baseline_* come from the
    vaccination-free run over the same grid and initial state.
    """
    time: np.ndarray
    S: np.ndarray
    I: np.ndarray
    R: np.ndarray
    baseline_S: np.ndarray
    baseline_I: np.ndarray
    baseline_R: np.ndarray
    rates: Rates
    parameters: SIRSParameters
    incidence: IncidenceSummary

    def to_dataframe(self) -> pd.DataFrame:
        """One row per day, for tables and plotting"""
        return pd.DataFrame({
            'day': self.time,
            'S': self.S,
            'I': self.I,
            'R': self.R,
            'baseline_S': self.baseline_S,
            'baseline_I': self.baseline_I,
            'baseline_R': self.baseline_R,
            'new_cases': self.incidence.new_cases,
            'baseline_new_cases': self.incidence.baseline_new_cases,
        })

    def summary(self) -> Dict[str, object]:
        peak_idx = int(np.argmax(self.I))
        base_peak_idx = int(np.argmax(self.baseline_I))
        return {
            "peak_day": int(self.time[peak_idx]),
            "peak_prevalence": float(self.I[peak_idx]),
            "baseline_peak_day": int(self.time[base_peak_idx]),
            "baseline_peak_prevalence": float(self.baseline_I[base_peak_idx]),
            "final_recovered": float(self.R[-1]),
            "baseline_final_recovered": float(self.baseline_R[-1]),
            "total_per_100k": self.incidence.total_per_100k,
            "baseline_total_per_100k": self.incidence.baseline_total_per_100k,
            "percent_reduction": self.incidence.percent_reduction,
        }


def simulate(params: SIRSParameters, settings: SolverSettings = None) -> SimulationResult:
    """
    Simulate the vaccinated and baseline scenarios for one parameter set.

    Parameters:
    params: SIRSParameters
    settings: SolverSettings, optional. Used for both runs

    Returns:
    result: SimulationResult

    Raises:
    InvalidParameter: before any integration if params is not usable
    NumericalInstability: if either run produces corrupted values
    """
    rates = compute_rates(params)
    settings = settings or SolverSettings()
    y0 = initial_state(params)
    t = TIME_GRID.copy()

    vaccinated = integrate(vaccinated_rhs, y0, t, args=(rates,), settings=settings)
    baseline = integrate(baseline_rhs, y0, t, args=(rates,), settings=settings)

    for arr in (t, vaccinated, baseline):
        arr.flags.writeable = False
    S, I, R = vaccinated.T
    bS, bI, bR = baseline.T
    return SimulationResult(
        time=t,
        S=S, I=I, R=R,
        baseline_S=bS, baseline_I=bI, baseline_R=bR,
        rates=rates,
        parameters=params,
        incidence=summarize_incidence(I, bI),
    )


class SIRSVaccinationModel:
    """
    Class wrapper around simulate() for a fixed parameter set.

    Parameters:
    params: SIRSParameters
    settings: SolverSettings, optional
    """

    def __init__(self, params: SIRSParameters, settings: SolverSettings = None):
        if not isinstance(params, SIRSParameters):
            raise InvalidParameter(f"expected SIRSParameters, got {type(params).__name__}")
        self.params = params
        self.settings = settings or SolverSettings()
        self.rates = compute_rates(params)

    @property
    def R0(self) -> float:
        return self.rates.R0

    def simulate(self) -> SimulationResult:
        return simulate(self.params, self.settings)

    @staticmethod
    def summary(result: SimulationResult) -> Dict[str, object]:
        return result.summary()


if __name__ == "__main__":
    from .parameters import targeted_vaccination_params

    params = targeted_vaccination_params()
    params.print_summary()

    print("\nSimulation summary:")
    import pprint
    pprint.pprint(simulate(params).summary())
