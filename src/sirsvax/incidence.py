"""
===========================================================
incidence.py
Last Updated: 2026-10-19
===========================================================

Description:
    New-case series and reduction statistics derived from the
    vaccinated and baseline prevalence trajectories.

Notes:
    - new cases at step k = max(I[k] - I[k-1], 0), with I[-1]
      taken as 0. This is a prevalence-difference proxy and
      undercounts infections that recover within one step.
    - totals are reported per 100,000 population.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from dataclasses import dataclass
from typing import Union

import numpy as np

from .errors import NOT_APPLICABLE, InvalidParameter, NotApplicable

PER_100K = 100_000


def new_cases(I) -> np.ndarray:
    """Positive first differences of I against an implicit leading zero"""
    I = np.asarray(I, dtype=float)
    return np.maximum(np.diff(I, prepend=0.0), 0.0)


def percent_reduction(total_vaccinated: float, total_baseline: float) -> Union[int, NotApplicable]:
    """Rounded percentage difference from the baseline; NOT_APPLICABLE when it is zero."""
    if total_baseline == 0:
        return NOT_APPLICABLE
    return int(round(100.0 * abs(total_baseline - total_vaccinated) / total_baseline))


@dataclass(frozen=True)
class IncidenceSummary:
    """
    Container for incidence results.

    Attributes:
    -----------
    new_cases: np.ndarray
        Per-step new cases with vaccination (proportion of population)
    baseline_new_cases: np.ndarray
        Per-step new cases without vaccination
    total_per_100k: float
        Sum of new_cases scaled to 100,000 population
    baseline_total_per_100k: float
        Sum of baseline_new_cases scaled to 100,000 population
    percent_reduction: int or NOT_APPLICABLE
    """
    new_cases: np.ndarray
    baseline_new_cases: np.ndarray
    total_per_100k: float
    baseline_total_per_100k: float
    percent_reduction: Union[int, NotApplicable]

    @property
    def cases_averted_per_100k(self) -> float:
        return self.baseline_total_per_100k - self.total_per_100k


def summarize_incidence(I, baseline_I) -> IncidenceSummary:
    """
    Build the incidence summary for aligned vaccinated and baseline series.

    Parameters:
    I: array-like. Prevalence with vaccination
    baseline_I: array-like. Prevalence without vaccination, same grid

    Returns:
    summary: IncidenceSummary
    """
    vaccinated = new_cases(I)
    baseline = new_cases(baseline_I)
    if vaccinated.shape != baseline.shape:
        raise InvalidParameter("vaccinated and baseline series must share the same time grid")

    vaccinated.flags.writeable = False
    baseline.flags.writeable = False

    total = float(np.sum(vaccinated)) * PER_100K
    baseline_total = float(np.sum(baseline)) * PER_100K
    return IncidenceSummary(
        new_cases=vaccinated,
        baseline_new_cases=baseline,
        total_per_100k=total,
        baseline_total_per_100k=baseline_total,
        percent_reduction=percent_reduction(total, baseline_total),
    )
