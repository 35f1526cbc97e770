"""Type definitions for the Kepler equation solver.

:class:`KeplerSolution` is a :class:`~typing.NamedTuple`, which JAX treats
as a pytree automatically, so it can be returned from functions wrapped in
``jax.jit`` or ``jax.vmap``.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class KeplerSolution(NamedTuple):
    """Result of a bounded Newton-Raphson solve of Kepler's equation.

    Attributes:
        eca: Eccentric anomaly [rad]. ``NaN`` whenever ``converged`` is
            ``False``.
        iterations: Number of Newton iterations performed.  For batched
            (array) inputs this is the count of the slowest element.
        converged: ``True`` if the last Newton step was within tolerance
            and the eccentricity lies in the elliptic domain ``[0, 1)``.
            ``False`` distinguishes a non-convergent or out-of-domain solve
            from a genuine root.
    """

    eca: Array
    iterations: Array
    converged: Array
