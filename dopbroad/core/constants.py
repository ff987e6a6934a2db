"""
Constants for Doppler broadening calculations.

Angles enter the public API in degrees and are converted to radians
internally. Energies are in MeV.
"""

import numpy as np

# ============================================================================
# Angle Conversions
# ============================================================================

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

# ============================================================================
# Energy Conversions
# ============================================================================

MEV_TO_KEV = 1.0e3
KEV_TO_MEV = 1.0e-3
MEV_TO_EV = 1.0e6
EV_TO_MEV = 1.0e-6

# ============================================================================
# Display Metadata
# ============================================================================

# Polar angle range over which the broadening curves are meant to be drawn
ANGLE_DOMAIN_DEG = (0.0, 180.0)

ANGLE_AXIS_TITLE = "Angle [°]"
RESOLUTION_AXIS_TITLE = "Resolution [dE/E]"

# ============================================================================
# Default Detector Parameters
# ============================================================================

DEFAULT_D_THETA_DEG = 0.0
DEFAULT_RESOLUTION_CONST = 1.0  # sqrt(MeV)
DEFAULT_D_BETA = 0.0
