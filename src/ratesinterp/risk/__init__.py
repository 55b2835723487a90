"""
Risk package - node sensitivities of interpolated curves.

Provides:
- sensitivity_matrix: Jacobian table of curve values against node values
- bumped_sensitivity: Bump-and-rebind finite-difference sensitivities
- check_sensitivities: Analytic vs bumped comparison
"""

from .sensitivities import (
    SensitivityCheck,
    sensitivity_matrix,
    bumped_sensitivity,
    check_sensitivities,
)

__all__ = [
    "SensitivityCheck",
    "sensitivity_matrix",
    "bumped_sensitivity",
    "check_sensitivities",
]
