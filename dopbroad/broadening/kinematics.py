"""
Doppler shift of a gamma-ray emitted by a moving source.
"""

from typing import Union
import numpy as np

from dopbroad.core.constants import DEG_TO_RAD


def check_beta(beta: float) -> None:
    """
    Reject velocities that are not strictly subluminal.

    Raises
    ------
    ValueError
        If ``|beta| >= 1`` or beta is not finite
    """
    if not np.isfinite(beta) or abs(beta) >= 1.0:
        raise ValueError(f"beta must satisfy |beta| < 1, got {beta}")


def doppler_shift(
    angle_deg: Union[float, np.ndarray], energy_mev: float, beta: float
) -> Union[float, np.ndarray]:
    """
    Calculate the Doppler shifted gamma-ray energy seen at a polar angle.

    E' = E_gamma * (1 - beta^2) / (1 - beta * cos(theta))

    Parameters
    ----------
    angle_deg : float or array
        Polar angle(s) of the detector relative to the source motion in degrees
    energy_mev : float
        Emitted gamma-ray energy in MeV
    beta : float
        Source velocity as a fraction of the speed of light, ``|beta| < 1``

    Returns
    -------
    float or array
        Detected energy in MeV

    Raises
    ------
    ValueError
        If ``|beta| >= 1``
    """
    check_beta(beta)
    cos_theta = np.cos(np.asarray(angle_deg, dtype=float) * DEG_TO_RAD)
    return energy_mev * (1.0 - beta**2) / (1.0 - beta * cos_theta)
