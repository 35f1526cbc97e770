"""Three-vector primitives.

Thin, JAX-traceable wrappers for the handful of vector operations the
two-body routines compose.  Vectors are arrays of shape ``(3,)`` coerced
to the configured float dtype (see :func:`keplerax.config.set_dtype`).

None of these functions guard against degenerate input: dividing by a zero
scalar yields ``inf``/``NaN`` per IEEE 754, exactly like the underlying
``jax.numpy`` operation.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from keplerax.config import get_dtype


def subtract(a: ArrayLike, b: ArrayLike) -> Array:
    """Component-wise difference ``a - b``."""
    _float = get_dtype()
    return jnp.asarray(a, dtype=_float) - jnp.asarray(b, dtype=_float)


def cross(a: ArrayLike, b: ArrayLike) -> Array:
    """Cross product ``a x b``.

    Written out component by component rather than through ``jnp.cross`` so
    the rounding matches the closed-form expressions of the element
    conversions.
    """
    _float = get_dtype()
    a = jnp.asarray(a, dtype=_float)
    b = jnp.asarray(b, dtype=_float)
    return jnp.array(
        [
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ]
    )


def dot(a: ArrayLike, b: ArrayLike) -> Array:
    """Inner product ``a . b``."""
    _float = get_dtype()
    a = jnp.asarray(a, dtype=_float)
    b = jnp.asarray(b, dtype=_float)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def scale(v: ArrayLike, s: ArrayLike) -> Array:
    """Multiply every component of ``v`` by the scalar ``s``."""
    _float = get_dtype()
    return jnp.asarray(v, dtype=_float) * jnp.asarray(s, dtype=_float)


def divide(v: ArrayLike, s: ArrayLike) -> Array:
    """Divide every component of ``v`` by the scalar ``s``.

    ``s = 0`` is not guarded: the result is ``±inf`` or ``NaN``.
    """
    _float = get_dtype()
    return jnp.asarray(v, dtype=_float) / jnp.asarray(s, dtype=_float)


def magnitude(v: ArrayLike) -> Array:
    """Euclidean norm ``sqrt(v . v)``, always ``>= 0``."""
    return jnp.sqrt(dot(v, v))
