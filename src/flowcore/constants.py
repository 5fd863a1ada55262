"""Physical constants and design criteria used by the flowcore calculators.

Tractive force is expressed in the engineering unit system of the sanitary
design codes: unit weight of water in kilograms-force per cubic meter, so
that shear stress ``tau = gamma * Rh * S`` comes out in kg/m**2 and the
self-cleaning criterion reads ``tau >= 0.15``."""

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

#: Gravitational acceleration, m/s**2
GRAVITY = 9.81

#: Unit weight of water, kg/m**3
GAMMA_WATER = 1000.0

#: Minimum tractive force for self-cleaning, kg/m**2
MIN_TRACTIVE_FORCE = 0.15

#: Default maximum fill ratio (y/D) for the pluvial matrix, percent
DEFAULT_FILL_RATIO = 85.0

#: Number of depth increments sampled between zero and the maximum fill
#: depth when searching for the minimum self-cleaning depth
MIN_DEPTH_SEARCH_STEPS = 200

#: Slopes evaluated by the pluvial matrix, percent
DEFAULT_SLOPES = (0.5, 1.0, 2.0)

#: Default pluvial design rainfall intensity, mm/hr
DEFAULT_INTENSITY = 100.0

#: Default runoff coefficient, dimensionless
DEFAULT_RUNOFF_COEFF = 0.9

#: Default absolute roughness (PVC), m
DEFAULT_KS = 1.5E-6

#: Default kinematic viscosity (water at 20 C), m**2/s
DEFAULT_KIN_VISC = 1.01E-6

#: Default limit velocity for potable water sizing, m/s
DEFAULT_LIMIT_VELOCITY = 2.0

#: Default slope for drainage sizing, percent
DEFAULT_DRAINAGE_SLOPE = 2.0

#: Default Manning coefficient for drainage sizing (PVC)
DEFAULT_MANNING_N = 0.009

#: Default fill ratio for drainage sizing, percent
DEFAULT_DRAINAGE_FILL_RATIO = 75.0
