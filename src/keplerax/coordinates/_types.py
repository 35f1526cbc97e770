"""Result types of the state vector / orbital element conversions.

Both are :class:`~typing.NamedTuple` instances, so they unpack like plain
tuples and JAX treats them as pytrees (they pass through ``jax.jit`` and
``jax.vmap`` unchanged).
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class OrbitalElements(NamedTuple):
    """Classical Keplerian orbital elements.

    The field order ``(a, e, w, lan, i, m)`` matches the positional
    arguments of :func:`keplerax.coordinates.state_vectors`, so
    ``state_vectors(*elements, t, m1, m2)`` propagates them.

    Attributes:
        a: Semi-major axis [m].  Negative for hyperbolic trajectories.
        e: Eccentricity, ``0`` circular, ``< 1`` elliptical.
        w: Argument of periapsis [rad].
        lan: Longitude of the ascending node [rad].
        i: Inclination [rad], in ``[0, pi]``.
        m: Mean anomaly [rad].
    """

    a: Array
    e: Array
    w: Array
    lan: Array
    i: Array
    m: Array


class StateVectors(NamedTuple):
    """Cartesian state of the secondary body relative to the primary.

    Attributes:
        r: Position [m], shape ``(3,)``.
        v: Velocity [m/s], shape ``(3,)``.
    """

    r: Array
    v: Array
