"""
Shared fixtures for the interpolation tests.
"""

import numpy as np
import pytest


@pytest.fixture
def sample_nodes():
    """Reference nodes: positive, non-monotone values on uneven spacing."""
    x = np.array([0.001, 0.4, 1.0, 1.8, 2.8, 5.0])
    y = np.array([3.0, 4.0, 3.1, 2.0, 7.0, 2.0])
    return x, y


@pytest.fixture
def rate_nodes():
    """Zero-rate style nodes starting at t=0."""
    x = np.array([0.0, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0])
    y = np.array([0.050, 0.051, 0.052, 0.053, 0.050, 0.048, 0.045])
    return x, y
