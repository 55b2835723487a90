"""
Library-wide defaults.

Default strategy names are used by CurveDefinition when a persisted
definition omits them. Tolerances are those the test-suite and the
sensitivity checks are calibrated against.
"""

# Default strategies
DEFAULT_INTERPOLATOR = "TimeSquare"
DEFAULT_EXTRAPOLATOR = "Flat"

# Minimum number of nodes for any interpolation family
MIN_NODES = 2

# Step used by the linear extrapolator to differentiate boundary sensitivities
LINEAR_EXTRAPOLATION_EPS = 1e-8

# Bump-and-rebind defaults for sensitivity validation
SENSITIVITY_BUMP = 1e-6
SENSITIVITY_TOLERANCE = 1e-6
