"""
===========================================================
errors.py
Last Updated: 2026-10-19
===========================================================

Description:
    Error kinds raised by the SIRS vaccination engine, plus the
    NOT_APPLICABLE marker used for results that are defined but
    meaningless (e.g. a percent reduction against a zero baseline).
-----------------------------------------------------------
License: MIT
===========================================================
"""


class InvalidParameter(ValueError):
    """Out-of-range or unknown input. Raised before any integration starts."""


class NumericalInstability(RuntimeError):
    """Integrator produced NaN/inf values or broke S + I + R = 1."""


class NotApplicable:
    """Tagged result for quantities with no meaningful value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NOT_APPLICABLE"

    def __bool__(self):
        return False


NOT_APPLICABLE = NotApplicable()
