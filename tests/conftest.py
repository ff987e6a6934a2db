"""
Pytest configuration and shared fixtures for dopbroad tests.

This module provides:
- A reference detector setup and the model built from it
- Configuration dictionaries and temporary config files
- Angle grids covering the display domain
"""

import os
import pytest
import numpy as np
import tempfile
from pathlib import Path

from dopbroad.broadening.model import BroadeningModel

# Reference setup: 1 MeV line, beta = 0.05, 10 degree opening angle
REFERENCE_PARAMETERS = {
    "energy_mev": 1.0,
    "beta": 0.05,
    "d_theta_deg": 10.0,
    "resolution_const": 0.03,
    "d_beta": 0.001,
}


@pytest.fixture
def reference_parameters():
    """Keyword arguments of the reference setup."""
    return dict(REFERENCE_PARAMETERS)


@pytest.fixture
def sample_model(reference_parameters):
    """Create a broadening model for the reference setup."""
    return BroadeningModel(**reference_parameters)


@pytest.fixture
def angle_grid():
    """Polar angles covering the display domain in degrees."""
    return np.linspace(0.0, 180.0, 181)


@pytest.fixture
def sample_config_dict(reference_parameters):
    """Create a sample configuration dictionary."""
    return {"broadening": reference_parameters}


@pytest.fixture
def temp_config_file(sample_config_dict):
    """Create a temporary YAML config file."""
    import yaml

    config_fd, config_path = tempfile.mkstemp(suffix=".yaml")
    os.close(config_fd)  # Close file descriptor to prevent leaks

    with open(config_path, "w") as f:
        yaml.dump(sample_config_dict, f)

    yield config_path

    Path(config_path).unlink()
