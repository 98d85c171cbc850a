"""
sirsvax: deterministic SIRS model with targeted vaccination.

    from sirsvax import SIRSParameters, simulate
    result = simulate(SIRSParameters(transmission_probability=0.5))
"""
from .errors import NOT_APPLICABLE, InvalidParameter, NotApplicable, NumericalInstability
from .incidence import IncidenceSummary, new_cases, summarize_incidence
from .integrator import SolverSettings, integrate
from .parameters import (AGE_BAND_WEIGHTS, AgeBand, Rates, SIRSParameters,
                         compute_rates, vaccination_coverage)
from .simulation import TIME_GRID, SIRSVaccinationModel, SimulationResult, simulate

__version__ = "0.1.0"
