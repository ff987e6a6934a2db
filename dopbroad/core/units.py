"""
Unit conversion utilities for dopbroad.

Provides functions to convert between the angle and energy units commonly
used when describing gamma-ray detector setups.
"""

import numpy as np
from typing import Union

# ============================================================================
# Angle Conversions
# ============================================================================


def convert_angle(
    value: Union[float, np.ndarray], from_unit: str, to_unit: str
) -> Union[float, np.ndarray]:
    """
    Convert angle between units.

    Parameters
    ----------
    value : float or array
        Angle value(s) to convert
    from_unit : str
        Source unit: 'deg', 'rad', 'mrad'
    to_unit : str
        Target unit: 'deg', 'rad', 'mrad'

    Returns
    -------
    float or array
        Converted angle value(s)

    Examples
    --------
    >>> convert_angle(180.0, 'deg', 'rad')
    3.141592653589793
    >>> convert_angle(10.0, 'mrad', 'rad')
    0.01
    """
    from dopbroad.core.constants import DEG_TO_RAD, RAD_TO_DEG

    # Normalize to radians
    if from_unit.lower() in ["deg", "degree", "degrees"]:
        radians = value * DEG_TO_RAD
    elif from_unit.lower() in ["rad", "radian", "radians"]:
        radians = value
    elif from_unit.lower() == "mrad":
        radians = value * 1e-3
    else:
        raise ValueError(f"Unknown source unit: {from_unit}")

    # Convert from radians
    if to_unit.lower() in ["deg", "degree", "degrees"]:
        return radians * RAD_TO_DEG
    elif to_unit.lower() in ["rad", "radian", "radians"]:
        return radians
    elif to_unit.lower() == "mrad":
        return radians * 1e3
    else:
        raise ValueError(f"Unknown target unit: {to_unit}")


# ============================================================================
# Energy Conversions
# ============================================================================


def convert_energy(
    value: Union[float, np.ndarray], from_unit: str, to_unit: str
) -> Union[float, np.ndarray]:
    """
    Convert photon energy between units.

    Parameters
    ----------
    value : float or array
        Energy value(s) to convert
    from_unit : str
        Source unit: 'eV', 'keV', 'MeV'
    to_unit : str
        Target unit: 'eV', 'keV', 'MeV'

    Returns
    -------
    float or array
        Converted energy value(s)

    Examples
    --------
    >>> convert_energy(1332.5, 'keV', 'MeV')
    1.3325
    """
    from dopbroad.core.constants import KEV_TO_MEV, EV_TO_MEV, MEV_TO_KEV, MEV_TO_EV

    # Normalize to MeV
    if from_unit.lower() == "mev":
        mev = value
    elif from_unit.lower() == "kev":
        mev = value * KEV_TO_MEV
    elif from_unit.lower() == "ev":
        mev = value * EV_TO_MEV
    else:
        raise ValueError(f"Unknown source unit: {from_unit}")

    # Convert from MeV
    if to_unit.lower() == "mev":
        return mev
    elif to_unit.lower() == "kev":
        return mev * MEV_TO_KEV
    elif to_unit.lower() == "ev":
        return mev * MEV_TO_EV
    else:
        raise ValueError(f"Unknown target unit: {to_unit}")
