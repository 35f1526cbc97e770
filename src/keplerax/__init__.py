"""
keplerax is a small two-body orbital mechanics library implemented in JAX.
"""

from .config import set_dtype, get_dtype

from .constants import (
    PI,
    DEG2RAD,
    RAD2DEG,
    G,
    KEPLER_TOLERANCE,
    KEPLER_MAX_ITERATIONS,
    HIGH_ECCENTRICITY_THRESHOLD,
    MASS_EARTH,
    MASS_MOON,
)

from .vec3 import (
    subtract,
    cross,
    dot,
    scale,
    divide,
    magnitude,
)

from .utils import degrees, radians

from .orbit_dynamics import force

from .orbits import (
    KeplerSolution,
    solve_kepler,
    eccentric_anomaly,
    gravitational_parameter,
    mean_motion,
    period,
    periapsis,
    apoapsis,
    anomaly_eccentric_to_mean,
    anomaly_mean_to_eccentric,
    anomaly_true_to_eccentric,
    anomaly_eccentric_to_true,
    anomaly_true_to_mean,
    anomaly_mean_to_true,
)

from .coordinates import (
    OrbitalElements,
    StateVectors,
    orbital_elements,
    state_vectors,
)

__all__ = [
    # Config
    "set_dtype",
    "get_dtype",
    # Constants
    "PI",
    "DEG2RAD",
    "RAD2DEG",
    "G",
    "KEPLER_TOLERANCE",
    "KEPLER_MAX_ITERATIONS",
    "HIGH_ECCENTRICITY_THRESHOLD",
    "MASS_EARTH",
    "MASS_MOON",
    # Vectors
    "subtract",
    "cross",
    "dot",
    "scale",
    "divide",
    "magnitude",
    # Angles
    "degrees",
    "radians",
    # Orbit Dynamics
    "force",
    # Orbits
    "KeplerSolution",
    "solve_kepler",
    "eccentric_anomaly",
    "gravitational_parameter",
    "mean_motion",
    "period",
    "periapsis",
    "apoapsis",
    "anomaly_eccentric_to_mean",
    "anomaly_mean_to_eccentric",
    "anomaly_true_to_eccentric",
    "anomaly_eccentric_to_true",
    "anomaly_true_to_mean",
    "anomaly_mean_to_true",
    # Coordinates
    "OrbitalElements",
    "StateVectors",
    "orbital_elements",
    "state_vectors",
]
