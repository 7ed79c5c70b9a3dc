"""Numeric constants and tolerances shared by the reprojection engine.

Angles are always radians inside the engine; degrees only appear at the
edges (definition strings and geographic points).
"""

import math

PI = math.pi
HALF_PI = math.pi / 2
TWO_PI = math.pi * 2
FORTPI = math.pi / 4

# degree <-> radian factors
R2D = 180 / math.pi
D2R = math.pi / 180

# arc-seconds to radians (pi / 648000)
SEC_TO_RAD = math.pi / 648000

# general purpose "is zero" tolerance
EPSLN = 1.0e-10

# default iteration cap for the iterative inverses
MAX_ITER = 20

# r_a (authalic sphere) power series coefficients
SIXTH = 1 / 6
RA4 = 17 / 360
RA6 = 67 / 3024

# datum comparison and geocentric conversion
SRS_WGS84_SEMIMAJOR = 6378137.0
DATUM_ES_TOLERANCE = 5.0e-11
GEOCENTRIC_MAX_ITER = 30
GEOCENTRIC_TOLERANCE = 1.0e-12

# latitudes up to this factor past the pole are clamped rather than rejected
POLE_CLAMP_FACTOR = 1.001

CANONICAL_AXIS = "enu"
LEGAL_AXIS_LETTERS = "ewnsud"
