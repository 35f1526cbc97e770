"""Shared utility functions for keplerax.

Provides degree/radian conversion helpers.
"""

from keplerax.utils._angle import degrees, from_radians, radians, to_radians

__all__ = [
    "degrees",
    "from_radians",
    "radians",
    "to_radians",
]
