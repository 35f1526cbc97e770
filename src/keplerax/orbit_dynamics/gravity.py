"""Newtonian point-mass gravity between two bodies.

All inputs and outputs use SI base units (metres, kilograms, newtons).

References:
    1. Newton's law of universal gravitation, vector form,
       https://en.wikipedia.org/wiki/Newton%27s_law_of_universal_gravitation#Vector_form
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from keplerax.config import get_dtype
from keplerax.constants import G
from keplerax.vec3 import divide, magnitude, scale, subtract


def force(
    p1: ArrayLike,
    p2: ArrayLike,
    m1: ArrayLike,
    m2: ArrayLike,
) -> Array:
    """Gravitational force between the bodies at *p1* and *p2*.

    Returns ``-(G m1 m2 / d^2) * r_hat`` with ``r = p1 - p2``: the
    attractive force acting on the body at *p1*, pointing toward *p2*.
    The body at *p2* receives the negation, so
    ``force(p1, p2, m1, m2) == -force(p2, p1, m1, m2)``.

    Coincident positions (``p1 == p2``) divide by zero and produce ``NaN``;
    callers must keep the bodies apart.

    Args:
        p1: Position of the primary body [m].  Shape ``(3,)``.
        p2: Position of the secondary body [m].  Shape ``(3,)``.
        m1: Mass of the primary body [kg].
        m2: Mass of the secondary body [kg].

    Returns:
        Force vector [N], shape ``(3,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from keplerax.orbit_dynamics import force
        f = force(jnp.array([200.0, 0.0, 0.0]), jnp.zeros(3), 2e6, 8e6)
        ```
    """
    _float = get_dtype()
    m1 = jnp.asarray(m1, dtype=_float)
    m2 = jnp.asarray(m2, dtype=_float)

    r = subtract(p1, p2)
    d = magnitude(r)
    rhat = divide(r, d)
    return scale(rhat, -(G * m1 * m2) / (d * d))
