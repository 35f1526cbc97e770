"""Angle and unit conversion helpers.

``degrees`` and ``radians`` use :data:`keplerax.constants.PI` so that
``radians(180) == PI`` and ``degrees(PI) == 180`` hold exactly.  The
``to_radians``/``from_radians`` pair wraps the ``use_degrees`` convention
used throughout keplerax, providing JAX-traceable conditional conversion
via ``jnp.where``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from keplerax.config import get_dtype
from keplerax.constants import PI


def degrees(rad: ArrayLike) -> Array:
    """Convert an angle from radians to degrees.

    Args:
        rad (ArrayLike): Angle. Units: *rad*

    Returns:
        Angle. Units: *deg*
    """
    rad = jnp.asarray(rad, dtype=get_dtype())
    return 180.0 * rad / PI


def radians(deg: ArrayLike) -> Array:
    """Convert an angle from degrees to radians.

    Args:
        deg (ArrayLike): Angle. Units: *deg*

    Returns:
        Angle. Units: *rad*
    """
    deg = jnp.asarray(deg, dtype=get_dtype())
    return PI * deg / 180.0


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, radians(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, degrees(angle), angle)
