"""
The `constants` module defines the physical and numerical constants used by the two-body routines.
"""

# Mathematical Constants
"""
Value of pi used by ``degrees``, ``radians`` and ``period``. Truncated to 15
significant digits so results stay comparable with the tabulated reference
values. Units: *rad*
"""
PI = 3.14159265358979

"""
Constant to convert degrees to radians. Equal to PI/180. Units: *rad/deg*
"""
DEG2RAD = PI / 180.0

"""
Constant to convert radians to degrees. Equal to 180/PI. Units: *deg/rad*
"""
RAD2DEG = 180.0 / PI

# Physical Constants
"""
Newtonian constant of gravitation. Units: *m^3/(kg s^2)*

References:

1. CODATA 1986 recommended value.
"""
G = 6.6725985e-11

# Solver Constants
"""
Convergence tolerance on the Newton step of the Kepler equation solver. Units: *rad*
"""
KEPLER_TOLERANCE = 1e-6

"""
Maximum number of Newton iterations before the Kepler solver reports
non-convergence. Units: *dimensionless*
"""
KEPLER_MAX_ITERATIONS = 100

"""
Eccentricity at and above which the Kepler solver starts from ``PI`` instead
of ``M + e/2``. Units: *dimensionless*
"""
HIGH_ECCENTRICITY_THRESHOLD = 0.6

# Reference Bodies
"""
Mass of the Earth. Units: *kg*
"""
MASS_EARTH = 5.972e24

"""
Mass of the Moon. Units: *kg*
"""
MASS_MOON = 7.34767309e22
