"""Keplerian orbital mechanics functions.

This sub-module provides functions for:

- **Kepler's equation**: a bounded, JAX-traceable Newton-Raphson solver
  that reports non-convergence instead of looping forever.
- **Anomaly conversions**: converting between mean, eccentric, and true
  anomalies.
- **Derived quantities**: gravitational parameter, mean motion, orbital
  period, and periapsis/apoapsis distances of a two-body system.
"""

from ._types import KeplerSolution
from .keplerian import (
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_eccentric,
    anomaly_mean_to_true,
    anomaly_true_to_eccentric,
    anomaly_true_to_mean,
    apoapsis,
    eccentric_anomaly,
    gravitational_parameter,
    mean_motion,
    periapsis,
    period,
    solve_kepler,
)

__all__ = [
    "KeplerSolution",
    "solve_kepler",
    "eccentric_anomaly",
    "gravitational_parameter",
    "mean_motion",
    "period",
    "periapsis",
    "apoapsis",
    "anomaly_eccentric_to_mean",
    "anomaly_mean_to_eccentric",
    "anomaly_true_to_eccentric",
    "anomaly_eccentric_to_true",
    "anomaly_true_to_mean",
    "anomaly_mean_to_true",
]
