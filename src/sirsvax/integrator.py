"""
===========================================================
integrator.py
Last Updated: 2026-10-19
===========================================================

Description:
    Integrates an ODE right-hand side over a fixed time grid
    and checks the resulting trajectory.

    Defines:
        - SolverSettings: numerical configuration shared by
                          every run that gets compared.
        - rk4_step(): single classical Runge-Kutta step.
        - integrate(): one state row per grid point.

Notes:
    - Adaptive methods (RK45, DOP853, LSODA, ...) go through
      scipy.integrate.solve_ivp; "RK4" is a fixed-step NumPy
      integrator with `rk4_substeps` steps per grid interval.
    - A trajectory with NaN/inf values or with a drifting total
      population raises NumericalInstability.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

import numpy as np
from scipy.integrate import solve_ivp

from .errors import InvalidParameter, NumericalInstability

RHS = Callable[..., np.ndarray]
SOLVE_IVP_METHODS = frozenset({"RK23", "RK45", "DOP853", "Radau", "BDF", "LSODA"})


@dataclass(frozen=True)
class SolverSettings:
    method: str = "RK45"            # any solve_ivp method, or "RK4"
    rtol: float = 1e-9
    atol: float = 1e-12
    max_step: float = 1.0           # days
    rk4_substeps: int = 20          # RK4 steps per grid interval
    conservation_tol: float = 1e-6  # allowed |sum(y) - sum(y0)|

    def __post_init__(self):
        if not isinstance(self.method, str) or (
                self.method.upper() != "RK4" and self.method not in SOLVE_IVP_METHODS):
            raise InvalidParameter(
                f"unknown integration method {self.method!r}; "
                f"expected 'RK4' or one of {sorted(SOLVE_IVP_METHODS)}"
            )
        if self.rk4_substeps < 1:
            raise InvalidParameter("rk4_substeps must be at least 1")


def rk4_step(rhs: RHS, t: float, y: np.ndarray, h: float, args: Tuple = ()) -> np.ndarray:
    """single RK4 step"""
    k1 = rhs(t, y, *args)
    k2 = rhs(t + 0.5*h, y + 0.5*h*k1, *args)
    k3 = rhs(t + 0.5*h, y + 0.5*h*k2, *args)
    k4 = rhs(t + h, y + h*k3, *args)
    return y + (h/6.0)*(k1 + 2*k2 + 2*k3 + k4)


def _integrate_rk4(rhs: RHS, y0: np.ndarray, t: np.ndarray, args: Tuple, substeps: int) -> np.ndarray:
    y = np.empty((len(t), len(y0)), dtype=float)
    y[0] = y0
    for k in range(1, len(t)):
        h = float(t[k] - t[k-1]) / substeps
        state = y[k-1]
        tk = float(t[k-1])
        for j in range(substeps):
            state = rk4_step(rhs, tk + j*h, state, h, args)
        y[k] = state
    return y


def _integrate_solve_ivp(rhs: RHS, y0: np.ndarray, t: np.ndarray, args: Tuple,
                         settings: SolverSettings) -> np.ndarray:
    solution = solve_ivp(
        fun=rhs,
        t_span=(float(t[0]), float(t[-1])),
        y0=y0,
        method=settings.method,
        t_eval=t,
        args=args,
        rtol=settings.rtol,
        atol=settings.atol,
        max_step=settings.max_step,
    )
    if not solution.success:
        raise NumericalInstability(f"ODE solver failed: {solution.message}")
    return solution.y.T.copy()


def check_trajectory(y: np.ndarray, total: float, tol: float) -> None:
    """Raise NumericalInstability for non-finite values or conservation drift."""
    if not np.all(np.isfinite(y)):
        raise NumericalInstability("trajectory contains NaN or infinite values")
    drift = np.max(np.abs(y.sum(axis=1) - total))
    if drift > tol:
        raise NumericalInstability(
            f"population total drifted by {drift:.3e} (tolerance {tol:.1e})"
        )


def integrate(rhs: RHS, y0: Sequence[float], t: Sequence[float], args: Tuple = (),
              settings: SolverSettings = None) -> np.ndarray:
    """
    Integrate rhs(t, y, *args) over the time grid t.

    Parameters:
    rhs: callable. Right-hand side with the solve_ivp signature
    y0: array-like. Initial state; copied, never modified
    t: array-like. Strictly increasing output times, t[0] is the start
    args: tuple. Extra arguments passed to rhs
    settings: SolverSettings, optional. Defaults to SolverSettings()

    Returns:
    y: np.ndarray of shape (len(t), len(y0)); y[0] equals y0
    """
    settings = settings or SolverSettings()
    y0 = np.array(y0, dtype=float)
    t = np.asarray(t, dtype=float)
    if t.ndim != 1 or len(t) < 2 or np.any(np.diff(t) <= 0):
        raise InvalidParameter("time grid must be 1-D, strictly increasing, with at least 2 points")

    if settings.method.upper() == "RK4":
        y = _integrate_rk4(rhs, y0, t, args, settings.rk4_substeps)
    else:
        y = _integrate_solve_ivp(rhs, y0, t, args, settings)

    # round-off below zero, within the absolute tolerance
    y[(y < 0.0) & (y >= -settings.atol)] = 0.0
    y[0] = y0
    check_trajectory(y, float(y0.sum()), settings.conservation_tol)
    return y
