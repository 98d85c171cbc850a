"""
===========================================================
sirs.py
Last Updated: 2026-10-19
===========================================================

Description:
    Right-hand side of the SIRS equations with an optional
    vaccination flow from S directly to R.

        dS/dt = -beta*S*I - nu*S + omega*R
        dI/dt =  beta*S*I - gamma*I
        dR/dt =  gamma*I  + nu*S - omega*R

    State variables are population proportions. Every flow
    leaves one compartment and enters another, so
    d(S+I+R)/dt = 0.

    Defines:
        - sirs_rhs(): parameterised right-hand side.
        - vaccinated_rhs(): variant with the nu*S flow.
        - baseline_rhs(): variant without it.

Notes:
    - Both variants share the (t, y, rates) signature expected
      by scipy.integrate.solve_ivp(args=(rates,)).
-----------------------------------------------------------
License: MIT
===========================================================
"""
from typing import Optional

import numpy as np

from .parameters import Rates


def sirs_rhs(t: float, y, beta: float, gamma: float, omega: float,
             nu: Optional[float] = None) -> np.ndarray:
    """
    Derivatives [dS/dt, dI/dt, dR/dt].

    nu=None drops the vaccination term entirely rather than
    evaluating it with a zero rate.
    """
    S, I, R = y
    infection = beta * S * I
    recovery = gamma * I
    waning = omega * R

    dS = -infection + waning
    dI = infection - recovery
    dR = recovery - waning

    if nu is not None:
        vaccination = nu * S
        dS -= vaccination
        dR += vaccination

    return np.array([dS, dI, dR])


def vaccinated_rhs(t: float, y, rates: Rates) -> np.ndarray:
    return sirs_rhs(t, y, rates.beta, rates.gamma, rates.omega, rates.nu)


def baseline_rhs(t: float, y, rates: Rates) -> np.ndarray:
    return sirs_rhs(t, y, rates.beta, rates.gamma, rates.omega)
