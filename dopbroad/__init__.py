"""
dopbroad: Doppler broadening of gamma-ray detector energy resolution

Closed-form models of the resolution broadening seen by a gamma-ray detector
observing a moving source, expressed as functions of detector polar angle.
"""

__version__ = "0.1.0"
__author__ = "TheFermiSea"

# Core imports for convenience
from dopbroad.core import constants
from dopbroad.core import units
from dopbroad.broadening.model import AngleFunction, BroadeningModel, PhysicalParameters

__all__ = [
    "constants",
    "units",
    "AngleFunction",
    "BroadeningModel",
    "PhysicalParameters",
]
