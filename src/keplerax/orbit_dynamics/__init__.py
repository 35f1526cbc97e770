"""Two-body force models.

Provides the Newtonian gravitational force between two point masses.
"""

from .gravity import force

__all__ = [
    "force",
]
