"""Keplerian orbital element ↔ Cartesian state vector conversions.

Converts between the osculating Keplerian elements
``(a, e, w, lan, i, m)`` of a two-body orbit and the position/velocity
of the secondary body relative to the primary.

| Field | Element                           | Units         |
|-------|-----------------------------------|---------------|
| a     | semi-major axis                   | m             |
| e     | eccentricity                      | dimensionless |
| w     | argument of periapsis             | rad           |
| lan   | longitude of the ascending node   | rad           |
| i     | inclination                       | rad           |
| m     | mean anomaly                      | rad           |

If the primary body is on rails set ``m2`` to ``0``.  With a non-zero
``m2`` the elements describe both bodies orbiting their barycenter, and
``r``/``v`` must be given in that frame.

Angles left undefined by degenerate geometry are reported as ``0``
rather than propagated as ``NaN``; the inputs are never perturbed:

- equatorial orbits (``i = 0`` or ``i = pi``) have no node line, so
  ``lan`` and ``w`` are ``0``;
- circular orbits (``e = 0``) have no periapsis, so ``w`` and the true
  anomaly are ``0``.

Such orbits convert to finite elements but do not round-trip through
:func:`state_vectors`.  Hyperbolic states (``e >= 1``) give a negative
``a`` and a ``NaN`` mean anomaly.

References:
    1. R. Schwarz, *Cartesian State Vectors to Keplerian Orbit Elements*,
       Memorandum No. 2, 2017.
    2. R. Schwarz, *Keplerian Orbit Elements to Cartesian State Vectors*,
       Memorandum No. 1, 2017.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from keplerax.config import get_dtype
from keplerax.constants import PI
from keplerax.coordinates._types import OrbitalElements, StateVectors
from keplerax.orbits import (
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_true_to_eccentric,
    eccentric_anomaly,
    gravitational_parameter,
    mean_motion,
)
from keplerax.utils import from_radians, to_radians
from keplerax.vec3 import cross, divide, dot, magnitude, subtract


def _angle_from_reference(y: Array, x: Array) -> Array:
    # atan2 folded into [0, 2*PI), the quadrant convention of the acos form
    # "2*PI - acos(...)" in the lower half-turn.
    ang = jnp.arctan2(y, x)
    return jnp.where(ang < 0.0, ang + 2.0 * PI, ang)


def orbital_elements(
    r: ArrayLike,
    v: ArrayLike,
    m1: ArrayLike,
    m2: ArrayLike,
    use_degrees: bool = False,
) -> OrbitalElements:
    """Convert Cartesian state vectors to Keplerian orbital elements.

    Derives the elements from the specific angular momentum ``h = r x v``,
    the eccentricity vector ``(v x h)/mu - r/|r|`` and the node vector
    ``n = (-h_y, h_x, 0)``.  The semi-major axis uses vis-viva.

    The angles follow the textbook ``acos`` definitions with their
    quadrant corrections (true anomaly past ``pi`` when ``r . v < 0``,
    ``lan`` past ``pi`` when ``n_y < 0``, ``w`` past ``pi`` when
    ``e_z < 0``) but are evaluated with ``atan2`` of the matching sine and
    cosine, which keeps full precision near ``0`` and ``pi`` where
    ``acos`` loses half of its significant digits.

    Preconditions: ``r`` and ``h`` must be non-zero and ``m1 + m2 > 0``;
    violating them yields ``NaN``.  See the module docstring for the
    circular/equatorial conventions.

    Args:
        r: Position relative to the primary body. Units: *m*
        v: Velocity relative to the primary body. Units: *m/s*
        m1: Mass of the primary body. Units: *kg*
        m2: Mass of the secondary body. Units: *kg*
        use_degrees: If ``True``, return angular elements in degrees.

    Returns:
        OrbitalElements: ``(a, e, w, lan, i, m)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from keplerax.constants import MASS_EARTH, MASS_MOON
        from keplerax.coordinates import orbital_elements
        r = jnp.array([0.0, 405400000.0, 100.0])
        v = jnp.array([1090.0, 0.0, 10.0])
        oe = orbital_elements(r, v, MASS_EARTH, MASS_MOON)
        ```
    """
    _float = get_dtype()
    r = jnp.asarray(r, dtype=_float)
    v = jnp.asarray(v, dtype=_float)

    mu = gravitational_parameter(m1, m2)

    rmag = magnitude(r)
    vmag = magnitude(v)

    # Specific angular momentum
    h = cross(r, v)
    hmag = magnitude(h)

    # Eccentricity vector
    evec = subtract(divide(cross(v, h), mu), divide(r, rmag))
    e = magnitude(evec)

    # Ascending node direction
    n = jnp.stack([-h[1], h[0], jnp.zeros_like(h[0])])
    nmag = magnitude(n)

    circular = e == 0.0
    equatorial = nmag == 0.0

    # True anomaly
    ta = _angle_from_reference(dot(cross(evec, r), h) / hmag, dot(evec, r))
    ta = jnp.where(circular, 0.0, ta)

    i = jnp.arctan2(jnp.sqrt(h[0] * h[0] + h[1] * h[1]), h[2])

    eca = anomaly_true_to_eccentric(ta, e)

    lan = _angle_from_reference(n[1], n[0])
    lan = jnp.where(equatorial, 0.0, lan)

    w = _angle_from_reference(dot(cross(n, evec), h) / hmag, dot(n, evec))
    w = jnp.where(equatorial | circular, 0.0, w)

    m = anomaly_eccentric_to_mean(eca, e)

    # Vis-viva
    a = 1.0 / ((2.0 / rmag) - ((vmag * vmag) / mu))

    return OrbitalElements(
        a=a,
        e=e,
        w=from_radians(w, use_degrees),
        lan=from_radians(lan, use_degrees),
        i=from_radians(i, use_degrees),
        m=from_radians(m, use_degrees),
    )


def state_vectors(
    a: ArrayLike,
    e: ArrayLike,
    w: ArrayLike,
    lan: ArrayLike,
    i: ArrayLike,
    m0: ArrayLike,
    t: ArrayLike,
    m1: ArrayLike,
    m2: ArrayLike,
    use_degrees: bool = False,
) -> StateVectors:
    """Convert Keplerian orbital elements to state vectors at ``t`` after epoch.

    Advances the mean anomaly by ``t`` times the mean motion, solves
    Kepler's equation, builds position and velocity in the orbital plane
    and rotates them into the reference frame by ``w``, then ``i``, then
    ``lan``.

    Only elliptical orbits (``a > 0``, ``0 <= e < 1``) are supported; if
    Kepler's equation does not converge the result is ``NaN``.

    Args:
        a: Semi-major axis. Units: *m*
        e: Eccentricity. Dimensionless.
        w: Argument of periapsis. Units: *rad* or *deg*
        lan: Longitude of the ascending node. Units: *rad* or *deg*
        i: Inclination. Units: *rad* or *deg*
        m0: Mean anomaly at epoch. Units: *rad* or *deg*
        t: Time since epoch. Units: *s*
        m1: Mass of the primary body. Units: *kg*
        m2: Mass of the secondary body. Units: *kg*
        use_degrees: If ``True``, interpret angular elements as degrees.

    Returns:
        StateVectors: Position (*m*) and velocity (*m/s*) relative to the
            primary body.

    Examples:
        ```python
        from keplerax.constants import MASS_EARTH
        from keplerax.coordinates import state_vectors
        r, v = state_vectors(7000e3, 0.01, 0.2, 0.3, 0.5, 0.8, 0.0, MASS_EARTH, 0.0)
        ```
    """
    _float = get_dtype()
    a = jnp.asarray(a, dtype=_float)
    e = jnp.asarray(e, dtype=_float)
    t = jnp.asarray(t, dtype=_float)

    w = to_radians(jnp.asarray(w, dtype=_float), use_degrees)
    lan = to_radians(jnp.asarray(lan, dtype=_float), use_degrees)
    i = to_radians(jnp.asarray(i, dtype=_float), use_degrees)
    m0 = to_radians(jnp.asarray(m0, dtype=_float), use_degrees)

    mu = gravitational_parameter(m1, m2)

    # Mean anomaly at t
    mT = jnp.where(t == 0.0, m0, m0 + t * mean_motion(a, m1, m2))

    ecaT = eccentric_anomaly(e, mT)
    taT = anomaly_eccentric_to_true(ecaT, e)
    rcT = a * (1.0 - e * jnp.cos(ecaT))

    # Position and velocity in the orbital plane
    or_x = rcT * jnp.cos(taT)
    or_y = rcT * jnp.sin(taT)

    vscale = jnp.sqrt(mu * a) / rcT
    ov_x = vscale * -jnp.sin(ecaT)
    ov_y = vscale * (jnp.sqrt(1.0 - (e * e)) * jnp.cos(ecaT))

    # Perifocal unit vectors
    cos_w = jnp.cos(w)
    sin_w = jnp.sin(w)
    cos_l = jnp.cos(lan)
    sin_l = jnp.sin(lan)
    cos_i = jnp.cos(i)
    sin_i = jnp.sin(i)

    P = jnp.stack(
        [
            cos_w * cos_l - sin_w * cos_i * sin_l,
            cos_w * sin_l + sin_w * cos_i * cos_l,
            sin_w * sin_i,
        ]
    )

    Q = jnp.stack(
        [
            -(sin_w * cos_l + cos_w * cos_i * sin_l),
            cos_w * cos_i * cos_l - sin_w * sin_l,
            cos_w * sin_i,
        ]
    )

    r_vec = or_x * P + or_y * Q
    v_vec = ov_x * P + ov_y * Q

    return StateVectors(r=r_vec, v=v_vec)
