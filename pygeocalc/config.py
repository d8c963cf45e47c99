"""Module-level constants shared by the formula groups.

Everything here is a plain immutable number.  There is no runtime
configuration: a function that needs a different value takes it as a
keyword argument defaulting to the constant below.

Constants
---------
GAMMA_W
    Unit weight of water (kN/m³).
DEFAULT_TOLERANCE
    Default absolute tolerance of :func:`pygeocalc.numeric.approx_equal`.
ZERO_ANGLE_TOLERANCE
    Friction angles (degrees) closer than this to zero take the φ = 0
    branch of the bearing-capacity factors.
MAX_BEARING_FRICTION_ANGLE
    Upper bound (degrees, inclusive) of the bearing-capacity factor fits.
TERZAGHI_NC_PHI0
    Terzaghi's tabulated Nc for a purely cohesive soil.
CONSOLIDATION_CROSSOVER_TV
    Default time factor at which the degree of consolidation switches
    from the square-root branch to the exponential branch.  The two
    branches differ by about 1e-6 there.
MIN_CONSOLIDATION_CROSSOVER_TV, MAX_CONSOLIDATION_CROSSOVER_TV
    Accepted range of the crossover.  Above the maximum the exponential
    branch starts below the square-root branch.  The minimum keeps the
    exponential branch within 0.22 % of the exact series.
KPA_PER_MPA
    Stress conversion used where coefficients are given in MPa⁻¹ and
    stresses in kPa.
"""

GAMMA_W = 9.81

DEFAULT_TOLERANCE = 1e-9
ZERO_ANGLE_TOLERANCE = 1e-9

MAX_BEARING_FRICTION_ANGLE = 50.0
TERZAGHI_NC_PHI0 = 5.7

CONSOLIDATION_CROSSOVER_TV = 0.213
MIN_CONSOLIDATION_CROSSOVER_TV = 0.2
MAX_CONSOLIDATION_CROSSOVER_TV = 0.213

KPA_PER_MPA = 1000.0
