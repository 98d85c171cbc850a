"""
===========================================================
figures.py
Last Updated: 2026-10-19
===========================================================
Visualization functions for SIRS vaccination results.

Plots the vaccinated trajectory against the vaccination-free
baseline, and the per-day new cases behind the reduction
statistic.
"""
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .errors import NOT_APPLICABLE
from .incidence import PER_100K
from .simulation import SimulationResult


def basic_reproduction_proxy(contacts_per_day: float,
                             infection_duration_weeks: float,
                             transmission_probability: float) -> float:
    """
    Illustrative R0: contacts per day x days infectious x transmission
    probability. Shown next to the inputs only, the model does not use it.
    """
    return contacts_per_day * infection_duration_weeks * 7.0 * transmission_probability


def plot_compartments(result: SimulationResult,
                      ax: Optional[Axes] = None,
                      show: bool = True,
                      title: Optional[str] = None) -> Axes:
    """
    Plot the vaccinated S, I, R trajectory as proportions.

    Parameters
    ----------
    result : SimulationResult
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates new figure
    show : bool
        Whether to display the plot immediately
    title : str, optional

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(result.time, result.S, 'b-', linewidth=2, label='Susceptible')
    ax.plot(result.time, result.I, 'r-', linewidth=2, label='Infectious')
    ax.plot(result.time, result.R, 'g-', linewidth=2, label='Recovered / immune')

    ax.set_xlabel('Day', fontsize=12)
    ax.set_ylabel('Proportion of population', fontsize=12)
    ax.set_ylim(0, 1)
    ax.set_title(title or f'SIRS Model ($R_0$ = {result.rates.R0:.2f})', fontsize=14)
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3)

    if show:
        plt.tight_layout()
        plt.show()

    return ax


def plot_prevalence(result: SimulationResult,
                    ax: Optional[Axes] = None,
                    show: bool = True) -> Axes:
    """Infectious proportion with and without vaccination"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(result.time, result.baseline_I, 'k--', linewidth=2, label='No vaccination')
    ax.plot(result.time, result.I, 'r-', linewidth=2, label='With vaccination')

    ax.set_xlabel('Day', fontsize=12)
    ax.set_ylabel('Prevalence', fontsize=12)
    ax.set_title('Infectious proportion', fontsize=14)
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3)

    if show:
        plt.tight_layout()
        plt.show()

    return ax


def plot_incidence(result: SimulationResult,
                   ax: Optional[Axes] = None,
                   show: bool = True) -> Axes:
    """Daily new cases per 100,000, side by side bars"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    inc = result.incidence
    width = 0.4
    days = np.asarray(result.time, dtype=float)
    ax.bar(days - width/2, inc.baseline_new_cases * PER_100K, width=width,
           color='grey', label=f'No vaccination ({inc.baseline_total_per_100k:,.0f})')
    ax.bar(days + width/2, inc.new_cases * PER_100K, width=width,
           color='tab:red', label=f'With vaccination ({inc.total_per_100k:,.0f})')

    if inc.percent_reduction is NOT_APPLICABLE:
        subtitle = 'reduction not applicable'
    else:
        subtitle = f'{inc.percent_reduction}% reduction'
    ax.set_xlabel('Day', fontsize=12)
    ax.set_ylabel('New cases per 100,000', fontsize=12)
    ax.set_title(f'Incidence ({subtitle})', fontsize=14)
    ax.legend(fontsize=11)
    ax.grid(True, axis='y', alpha=0.3)

    if show:
        plt.tight_layout()
        plt.show()

    return ax
