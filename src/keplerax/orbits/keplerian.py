"""Keplerian orbital mechanics functions for two-body systems.

This module provides the Kepler equation solver, conversions between mean,
eccentric, and true anomalies, and scalar quantities derived from the
orbital elements (gravitational parameter, mean motion, period,
periapsis and apoapsis distances).

Unlike an Earth-centric library, the central body is not fixed: every
function that needs a gravitational parameter takes the two body masses
``m1`` (primary) and ``m2`` (secondary) and forms ``mu = G * (m1 + m2)``.
Pass ``m2 = 0`` when the primary body is on rails.

All functions use JAX operations and are compatible with ``jax.jit``,
``jax.vmap``, and ``jax.grad``. Inputs are coerced to the configured
float dtype (see :func:`keplerax.config.set_dtype`).
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from keplerax.config import get_dtype
from keplerax.constants import (
    G,
    HIGH_ECCENTRICITY_THRESHOLD,
    KEPLER_MAX_ITERATIONS,
    KEPLER_TOLERANCE,
    PI,
)
from keplerax.orbits._types import KeplerSolution
from keplerax.utils import from_radians, to_radians

# ──────────────────────────────────────────────
# Gravitational parameter and mean motion
# ──────────────────────────────────────────────


def gravitational_parameter(m1: ArrayLike, m2: ArrayLike) -> Array:
    """Compute the gravitational parameter of a two-body system.

    Args:
        m1: Mass of the primary body. Units: *kg*
        m2: Mass of the secondary body, or ``0`` for an on-rails primary.
            Units: *kg*

    Returns:
        Gravitational parameter ``G * (m1 + m2)``. Units: *m^3/s^2*
    """
    _float = get_dtype()
    m1 = jnp.asarray(m1, dtype=_float)
    m2 = jnp.asarray(m2, dtype=_float)
    return G * (m1 + m2)


def mean_motion(a: ArrayLike, m1: ArrayLike, m2: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the mean motion of a two-body orbit.

    Only meaningful for elliptical orbits (``a > 0``); a negative
    semi-major axis yields ``NaN``.

    Args:
        a: Semi-major axis. Units: *m*
        m1: Mass of the primary body. Units: *kg*
        m2: Mass of the secondary body. Units: *kg*
        use_degrees: If ``True``, return mean motion in degrees per second.

    Returns:
        Mean motion. Units: *rad/s* or *deg/s*

    Examples:
        ```python
        from keplerax.constants import MASS_EARTH
        from keplerax.orbits import mean_motion
        n = mean_motion(7000e3, MASS_EARTH, 0.0)
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    mu = gravitational_parameter(m1, m2)
    n = jnp.sqrt(mu / (a * a * a))
    return from_radians(n, use_degrees)


# ──────────────────────────────────────────────
# Period and apsides
# ──────────────────────────────────────────────


def period(a: ArrayLike, m1: ArrayLike, m2: ArrayLike) -> Array:
    """Compute the orbital period of a two-body orbit.

    If the primary body is on rails set ``m2`` to ``0``; otherwise both
    bodies are assumed to orbit their common barycenter.

    Args:
        a: Semi-major axis. Units: *m*
        m1: Mass of the primary body. Units: *kg*
        m2: Mass of the secondary body. Units: *kg*

    Returns:
        Orbital period ``2 pi sqrt(a^3 / mu)``. Units: *s*

    Examples:
        ```python
        from keplerax.constants import MASS_EARTH, MASS_MOON
        from keplerax.orbits import period
        T = period(502989447.71, MASS_EARTH, MASS_MOON)
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    mu = gravitational_parameter(m1, m2)
    return (2.0 * PI) * jnp.sqrt((a * a * a) / mu)


def periapsis(a: ArrayLike, e: ArrayLike) -> Array:
    """Compute the distance at periapsis.

    Args:
        a: Semi-major axis. Units: *m*
        e: Eccentricity. Dimensionless.

    Returns:
        Periapsis distance. Units: *m*

    Examples:
        ```python
        from keplerax.orbits import periapsis
        rp = periapsis(500e3, 0.1)
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return a * (1.0 - e)


def apoapsis(a: ArrayLike, e: ArrayLike) -> Array:
    """Compute the distance at apoapsis.

    Args:
        a: Semi-major axis. Units: *m*
        e: Eccentricity. Dimensionless.

    Returns:
        Apoapsis distance. Units: *m*

    Examples:
        ```python
        from keplerax.orbits import apoapsis
        ra = apoapsis(500e3, 0.1)
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return a * (1.0 + e)


# ──────────────────────────────────────────────
# Kepler equation solver
# ──────────────────────────────────────────────


def solve_kepler(
    e: ArrayLike,
    m: ArrayLike,
    tol: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> KeplerSolution:
    """Solve Kepler's equation ``E - e sin(E) = M`` for the eccentric anomaly.

    Newton-Raphson iteration implemented with ``jax.lax.while_loop``.
    The initial guess is ``M + e/2``, or ``pi`` when
    ``e >= HIGH_ECCENTRICITY_THRESHOLD`` (0.6).  Iteration stops once the
    Newton step is no larger than ``tol``, when a step evaluates to
    ``NaN``, or after ``max_iterations`` steps.

    Newton runs on ``M mod 2 pi`` and the whole revolutions are added back
    to the root, so ``E`` keeps the revolution count of ``M`` (a negative
    ``M`` gives a negative ``E``) and a circular orbit (``e = 0``) returns
    ``M`` unchanged.  Eccentricities outside the elliptic domain
    ``[0, 1)`` are reported as not converged: at ``e = 1`` the derivative
    of Kepler's equation vanishes at ``M = 0`` and ``M = 2 pi`` and the
    iteration has no meaningful answer.

    Args:
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        m: Mean anomaly. Units: *rad*
        tol: Convergence tolerance on the Newton step. Units: *rad*
        max_iterations: Iteration cap.

    Returns:
        KeplerSolution: Eccentric anomaly (``NaN`` if not converged),
            iteration count and convergence flag.

    Examples:
        ```python
        from keplerax.orbits import solve_kepler
        sol = solve_kepler(0.1, 1.0)
        sol.converged
        ```
    """
    _float = get_dtype()
    e = jnp.asarray(e, dtype=_float)
    m = jnp.asarray(m, dtype=_float)

    # Solve within one revolution, then restore the whole turns
    m_rev = m % (2.0 * jnp.pi)
    m_offset = m - m_rev

    eca0 = jnp.where(e >= HIGH_ECCENTRICITY_THRESHOLD, jnp.asarray(PI, dtype=_float), m_rev + e / 2.0)

    def not_done(state):
        _, step, k = state
        return jnp.any(step > tol) & (k < max_iterations)

    def newton_step(state):
        eca, _, k = state
        eca_next = eca - (eca - e * jnp.sin(eca) - m_rev) / (1.0 - e * jnp.cos(eca))
        return eca_next, jnp.abs(eca_next - eca), k + 1

    init = (eca0, jnp.full_like(eca0, jnp.inf), jnp.asarray(0, dtype=jnp.int32))
    eca, step, iterations = jax.lax.while_loop(not_done, newton_step, init)

    converged = (e >= 0.0) & (e < 1.0) & (step <= tol)
    eca = jnp.where(e == 0.0, m, eca + m_offset)
    eca = jnp.where(converged, eca, jnp.nan)
    return KeplerSolution(eca=eca, iterations=iterations, converged=converged)


def eccentric_anomaly(
    e: ArrayLike,
    m: ArrayLike,
    tol: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> Array:
    """Compute the eccentric anomaly from the mean anomaly.

    Convenience wrapper around :func:`solve_kepler` that returns only the
    anomaly.  A non-convergent or out-of-domain solve yields ``NaN``; use
    :func:`solve_kepler` to tell the two apart from the inputs alone.

    Args:
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        m: Mean anomaly. Units: *rad*
        tol: Convergence tolerance on the Newton step. Units: *rad*
        max_iterations: Iteration cap.

    Returns:
        Eccentric anomaly. Units: *rad*

    References:
        Newton's method for Kepler's equation,
        http://www.csun.edu/~hcmth017/master/node16.html

    Examples:
        ```python
        from keplerax.orbits import eccentric_anomaly
        from keplerax.utils import radians
        E = eccentric_anomaly(0.99999, radians(245.0))
        ```
    """
    return solve_kepler(e, m, tol=tol, max_iterations=max_iterations).eca


# ──────────────────────────────────────────────
# Anomaly conversions
# ──────────────────────────────────────────────


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to mean anomaly.

    Applies Kepler's equation: ``M = E - e * sin(E)``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    M = E - (e * jnp.sin(E))
    return from_radians(M, use_degrees)


def anomaly_mean_to_eccentric(anm_mean: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert mean anomaly to eccentric anomaly.

    Solves Kepler's equation with :func:`solve_kepler` using the default
    tolerance and iteration cap.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly, ``NaN`` if the solve did not converge.
            Units: *rad* or *deg*
    """
    anm_mean = jnp.asarray(anm_mean, dtype=get_dtype())

    M = to_radians(anm_mean, use_degrees)
    E = eccentric_anomaly(e, M)
    return from_radians(E, use_degrees)


def anomaly_true_to_eccentric(anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert true anomaly to eccentric anomaly.

    Uses ``E = 2 atan(tan(nu/2) / sqrt((1+e)/(1-e)))``, which returns
    ``E`` in ``(-pi, pi)``: a true anomaly past apoapsis maps to a negative
    eccentric anomaly.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*
    """
    anm_true = jnp.asarray(anm_true, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    nu = to_radians(anm_true, use_degrees)
    E = 2.0 * jnp.arctan(jnp.tan(nu / 2.0) / jnp.sqrt((1.0 + e) / (1.0 - e)))
    return from_radians(E, use_degrees)


def anomaly_eccentric_to_true(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to true anomaly.

    Uses the half-angle form
    ``nu = 2 atan2(sqrt(1+e) sin(E/2), sqrt(1-e) cos(E/2))``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    nu = 2.0 * jnp.arctan2(jnp.sqrt(1.0 + e) * jnp.sin(E / 2.0), jnp.sqrt(1.0 - e) * jnp.cos(E / 2.0))
    return from_radians(nu, use_degrees)


def anomaly_true_to_mean(anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert true anomaly to mean anomaly.

    Composite conversion: true -> eccentric -> mean.
    """
    return anomaly_eccentric_to_mean(
        anomaly_true_to_eccentric(anm_true, e, use_degrees),
        e,
        use_degrees,
    )


def anomaly_mean_to_true(anm_mean: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert mean anomaly to true anomaly.

    Composite conversion: mean -> eccentric -> true.
    """
    return anomaly_eccentric_to_true(
        anomaly_mean_to_eccentric(anm_mean, e, use_degrees),
        e,
        use_degrees,
    )
