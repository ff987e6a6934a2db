"""
Doppler broadening of detector energy resolution.

This module provides:
- Relativistic Doppler shift of an emitted gamma-ray
- Closed-form broadening contributions (intrinsic energy, solid angle, beta spread)
- Their quadrature sum
- BroadeningModel binding physical parameters to named angle functions
"""

from dopbroad.broadening.kinematics import doppler_shift
from dopbroad.broadening.contributions import (
    energy_broadening,
    solid_angle_broadening,
    beta_broadening,
    total_broadening,
)
from dopbroad.broadening.model import AngleFunction, BroadeningModel, PhysicalParameters

__all__ = [
    "doppler_shift",
    "energy_broadening",
    "solid_angle_broadening",
    "beta_broadening",
    "total_broadening",
    "AngleFunction",
    "BroadeningModel",
    "PhysicalParameters",
]
