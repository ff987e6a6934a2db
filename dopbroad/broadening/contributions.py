"""
Contributions to the relative energy resolution dE'/E' of a detector viewing
a moving gamma-ray source.

The observed width follows from first-order variance propagation through the
Doppler shift equation. Dividing each partial derivative term by E' gives
three independent contributions as a function of polar angle theta:

- intrinsic resolution at the shifted energy, const / sqrt(E')
- finite opening angle, dtheta * beta * sin(theta) / (1 - beta cos(theta))
- spread of source velocities,
  dbeta * |cos(theta) - beta| / ((1 - beta^2)(1 - beta cos(theta)))

which are combined in quadrature by :func:`total_broadening`. The term
dE_gamma / E_gamma from the width of the emitted line itself is left out of
the total.

All functions accept scalar or array angles in degrees. Floating point
warnings are suppressed; a non-physical shifted energy shows up as nan in the
returned values.
"""

from typing import Union
import numpy as np

from dopbroad.broadening.kinematics import check_beta, doppler_shift
from dopbroad.core.constants import DEG_TO_RAD

ArrayLike = Union[float, np.ndarray]


def energy_broadening(
    angle_deg: ArrayLike, energy_mev: float, beta: float, resolution_const: float
) -> ArrayLike:
    """
    Intrinsic detector resolution evaluated at the Doppler shifted energy.

    Parameters
    ----------
    angle_deg : float or array
        Polar angle(s) in degrees
    energy_mev : float
        Emitted gamma-ray energy in MeV
    beta : float
        Source velocity as a fraction of c
    resolution_const : float
        Constant of the const/sqrt(E) resolution term in sqrt(MeV)

    Returns
    -------
    float or array
        Relative resolution dE/E (nan where the shifted energy is not positive)
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return resolution_const / np.sqrt(doppler_shift(angle_deg, energy_mev, beta))


def solid_angle_broadening(angle_deg: ArrayLike, beta: float, d_theta_rad: float) -> ArrayLike:
    """
    Broadening from the angular acceptance of the detector.

    Parameters
    ----------
    angle_deg : float or array
        Polar angle(s) in degrees
    beta : float
        Source velocity as a fraction of c
    d_theta_rad : float
        Angular half-acceptance of the detector in radians

    Returns
    -------
    float or array
        Relative resolution dE/E
    """
    check_beta(beta)
    theta = np.asarray(angle_deg, dtype=float) * DEG_TO_RAD
    with np.errstate(divide="ignore", invalid="ignore"):
        return d_theta_rad * beta * np.sin(theta) / (1.0 - beta * np.cos(theta))


def beta_broadening(angle_deg: ArrayLike, beta: float, d_beta: float) -> ArrayLike:
    """
    Broadening from the width of the source velocity distribution.

    Parameters
    ----------
    angle_deg : float or array
        Polar angle(s) in degrees
    beta : float
        Source velocity as a fraction of c
    d_beta : float
        Standard deviation of the beta distribution

    Returns
    -------
    float or array
        Relative resolution dE/E
    """
    check_beta(beta)
    cos_theta = np.cos(np.asarray(angle_deg, dtype=float) * DEG_TO_RAD)
    with np.errstate(divide="ignore", invalid="ignore"):
        return d_beta * np.abs(cos_theta - beta) / ((1.0 - beta**2) * (1.0 - beta * cos_theta))


def total_broadening(
    angle_deg: ArrayLike,
    energy_mev: float,
    beta: float,
    d_theta_rad: float = 0.0,
    resolution_const: float = 1.0,
    d_beta: float = 0.0,
) -> ArrayLike:
    """
    Quadrature sum of the energy, solid angle and beta contributions.

    Parameters
    ----------
    angle_deg : float or array
        Polar angle(s) in degrees
    energy_mev : float
        Emitted gamma-ray energy in MeV
    beta : float
        Source velocity as a fraction of c
    d_theta_rad : float
        Angular half-acceptance of the detector in radians
    resolution_const : float
        Constant of the const/sqrt(E) resolution term in sqrt(MeV)
    d_beta : float
        Standard deviation of the beta distribution

    Returns
    -------
    float or array
        Total relative resolution dE/E
    """
    f_e = energy_broadening(angle_deg, energy_mev, beta, resolution_const)
    f_omega = solid_angle_broadening(angle_deg, beta, d_theta_rad)
    f_beta = beta_broadening(angle_deg, beta, d_beta)
    return np.sqrt(f_e**2 + f_omega**2 + f_beta**2)
