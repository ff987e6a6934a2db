"""
Tests for the Doppler shift and the closed-form broadening contributions.
"""

import numpy as np
import pytest

from dopbroad.broadening.kinematics import check_beta, doppler_shift
from dopbroad.broadening.contributions import (
    beta_broadening,
    energy_broadening,
    solid_angle_broadening,
    total_broadening,
)

BETAS = [-0.6, -0.05, 0.0, 0.05, 0.3, 0.9]


def test_doppler_shift_reference_values():
    """E' = E (1 - beta^2) / (1 - beta cos(theta))."""
    # Forward: 0.9975 / 0.95
    assert np.isclose(doppler_shift(0.0, 1.0, 0.05), 1.05)
    # Perpendicular: only the (1 - beta^2) factor remains
    assert np.isclose(doppler_shift(90.0, 1.0, 0.05), 0.9975)
    # Backward
    assert np.isclose(doppler_shift(180.0, 1.0, 0.05), 0.9975 / 1.05)


def test_doppler_shift_scales_with_energy():
    """The shift is proportional to the emitted energy."""
    angles = np.array([0.0, 45.0, 135.0])
    assert np.allclose(doppler_shift(angles, 2.0, 0.2), 2.0 * doppler_shift(angles, 1.0, 0.2))


def test_doppler_shift_monotonic():
    """For beta > 0 the shifted energy is largest forward and smallest backward."""
    angles = np.linspace(0.0, 180.0, 181)
    shifted = doppler_shift(angles, 1.0, 0.3)

    assert np.argmax(shifted) == 0
    assert np.argmin(shifted) == len(angles) - 1
    assert np.all(np.diff(shifted) < 0)


def test_doppler_shift_no_motion():
    """At rest the detected energy equals the emitted energy."""
    angles = np.linspace(0.0, 180.0, 19)
    assert np.allclose(doppler_shift(angles, 0.662, 0.0), 0.662)


@pytest.mark.parametrize("beta", [1.0, -1.0, 1.2, -3.0, np.nan])
def test_check_beta_rejects_superluminal(beta):
    """|beta| >= 1 is an input error, not a nan."""
    with pytest.raises(ValueError, match="beta"):
        check_beta(beta)
    with pytest.raises(ValueError):
        doppler_shift(0.0, 1.0, beta)


def test_energy_broadening_reference():
    """const / sqrt(E') at forward and perpendicular angles."""
    assert np.isclose(energy_broadening(0.0, 1.0, 0.05, 0.03), 0.03 / np.sqrt(1.05))
    assert np.isclose(energy_broadening(0.0, 1.0, 0.05, 0.03), 0.02928, rtol=1e-3)
    assert np.isclose(energy_broadening(90.0, 1.0, 0.05, 0.03), 0.03 / np.sqrt(0.9975))


def test_energy_broadening_non_physical_energy():
    """A non-positive shifted energy gives nan instead of raising."""
    value = energy_broadening(0.0, -1.0, 0.1, 0.03)
    assert np.isnan(value)


def test_solid_angle_broadening_reference():
    """dtheta * beta * sin(theta) / (1 - beta cos(theta))."""
    d_theta_rad = np.deg2rad(10.0)
    assert np.isclose(solid_angle_broadening(90.0, 0.05, d_theta_rad), 0.008727, rtol=1e-3)
    assert np.isclose(solid_angle_broadening(0.0, 0.05, d_theta_rad), 0.0, atol=1e-15)
    assert np.isclose(solid_angle_broadening(180.0, 0.05, d_theta_rad), 0.0, atol=1e-15)


def test_beta_broadening_reference():
    """dbeta * |cos(theta) - beta| / ((1 - beta^2)(1 - beta cos(theta)))."""
    assert np.isclose(beta_broadening(90.0, 0.05, 0.001), 0.001 * 0.05 / 0.9975)
    assert np.isclose(beta_broadening(0.0, 0.05, 0.001), 0.001 * 0.95 / (0.9975 * 0.95))
    assert np.isclose(beta_broadening(180.0, 0.05, 0.001), 0.001 * 1.05 / (0.9975 * 1.05))


def test_beta_broadening_vanishes_where_cos_equals_beta():
    """The beta term is zero at the angle where cos(theta) = beta."""
    angle = np.rad2deg(np.arccos(0.3))
    assert np.isclose(beta_broadening(angle, 0.3, 0.01), 0.0, atol=1e-15)


@pytest.mark.parametrize("beta", BETAS)
def test_total_is_quadrature_sum(beta):
    """Total broadening is the root sum of squares of the three terms."""
    angles = np.linspace(0.0, 180.0, 91)
    d_theta_rad = np.deg2rad(5.0)

    f_e = energy_broadening(angles, 1.3325, beta, 0.04)
    f_omega = solid_angle_broadening(angles, beta, d_theta_rad)
    f_beta = beta_broadening(angles, beta, 0.002)
    total = total_broadening(angles, 1.3325, beta, d_theta_rad, 0.04, 0.002)

    assert np.all(total >= 0)
    assert np.allclose(total, np.sqrt(f_e**2 + f_omega**2 + f_beta**2))
    assert np.all(total >= f_e)


@pytest.mark.parametrize("beta", BETAS)
def test_zero_widths_remove_terms(beta):
    """Zero opening angle and zero beta spread leave only the intrinsic term."""
    angles = np.linspace(0.0, 180.0, 37)

    assert np.all(solid_angle_broadening(angles, beta, 0.0) == 0.0)
    assert np.all(beta_broadening(angles, beta, 0.0) == 0.0)
    assert np.allclose(
        total_broadening(angles, 1.0, beta, 0.0, 0.03, 0.0),
        energy_broadening(angles, 1.0, beta, 0.03),
    )


def test_scalar_input_gives_scalar():
    """Scalar angles return scalars, arrays return arrays of the same shape."""
    assert np.ndim(total_broadening(30.0, 1.0, 0.1, 0.1, 0.03, 0.001)) == 0

    angles = np.linspace(0.0, 180.0, 12).reshape(3, 4)
    assert total_broadening(angles, 1.0, 0.1, 0.1, 0.03, 0.001).shape == (3, 4)


def test_outside_display_domain():
    """Angles outside [0, 180] are evaluated with the same formulas."""
    assert np.isclose(
        total_broadening(-30.0, 1.0, 0.2, 0.1, 0.03, 0.001),
        total_broadening(30.0, 1.0, 0.2, 0.1, 0.03, 0.001),
    )
    assert np.isclose(
        solid_angle_broadening(270.0, 0.2, 0.1), -solid_angle_broadening(90.0, 0.2, 0.1)
    )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
