"""
===========================================================
experiments.py
Last Updated: 2026-10-19
===========================================================

Description:
    Scenario sweeps for the SIRS vaccination engine: vary the
    weekly uptake or the targeted age band and collect tidy
    results as a DataFrame.

Example Usage:
    from sirsvax.experiments import uptake_sweep
    df = uptake_sweep(params, np.linspace(0, 1, 11))
-----------------------------------------------------------
License: MIT
===========================================================
"""
from typing import Iterable

import numpy as np
import pandas as pd

from .errors import NOT_APPLICABLE
from .parameters import AgeBand, SIRSParameters
from .simulation import simulate


def _summarize_one(params: SIRSParameters, **labels):
    """Run one simulation and return a flat record of its summary"""
    result = simulate(params)
    rec = dict(labels)
    rec.update(result.summary())
    rec["nu"] = result.rates.nu
    if rec["percent_reduction"] is NOT_APPLICABLE:
        rec["percent_reduction"] = np.nan
    return rec


def uptake_sweep(params: SIRSParameters, uptakes: Iterable[float]) -> pd.DataFrame:
    """
    Evaluate the model for each weekly uptake value, all else fixed.
    Returns one row per uptake, sorted by uptake.
    """
    records = [
        _summarize_one(params.replace(vaccination_uptake_weekly=float(u)), uptake=float(u))
        for u in uptakes
    ]
    df = pd.DataFrame.from_records(records)
    return df.sort_values("uptake").reset_index(drop=True)


def band_comparison(params: SIRSParameters) -> pd.DataFrame:
    """Targeting each age band on its own, plus all bands together."""
    selections = [(band.value, frozenset({band})) for band in AgeBand]
    selections.append(("All", frozenset(AgeBand)))
    records = [
        _summarize_one(params.replace(targeted_age_bands=bands), bands=label)
        for label, bands in selections
    ]
    return pd.DataFrame.from_records(records)
