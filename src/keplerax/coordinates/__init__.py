"""Coordinate transformations.

This sub-module converts between the two representations of a two-body
orbit:

- **Cartesian**: position and velocity of the secondary body relative to
  the primary (:class:`StateVectors`).
- **Keplerian**: classical orbital elements ``(a, e, w, lan, i, m)``
  (:class:`OrbitalElements`).
"""

from ._types import OrbitalElements, StateVectors
from .keplerian import (
    orbital_elements,
    state_vectors,
)

__all__ = [
    "OrbitalElements",
    "StateVectors",
    "orbital_elements",
    "state_vectors",
]
