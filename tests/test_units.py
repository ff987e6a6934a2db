"""
Tests for unit conversion utilities.
"""

import pytest
import numpy as np
from dopbroad.core import units


def test_angle_conversion():
    """Test angle conversions."""
    rad = units.convert_angle(180.0, "deg", "rad")
    assert abs(rad - np.pi) < 1e-12

    # Round trip
    deg = units.convert_angle(rad, "rad", "deg")
    assert abs(deg - 180.0) < 1e-10

    # Milliradians
    assert abs(units.convert_angle(10.0, "mrad", "rad") - 0.01) < 1e-15
    assert abs(units.convert_angle(1.0, "deg", "mrad") - 17.453292519943297) < 1e-9


def test_energy_conversion():
    """Test energy conversions."""
    assert abs(units.convert_energy(1332.5, "keV", "MeV") - 1.3325) < 1e-12
    assert abs(units.convert_energy(1.0, "MeV", "eV") - 1e6) < 1e-6

    # Case insensitive
    assert abs(units.convert_energy(511.0, "KEV", "mev") - 0.511) < 1e-12


def test_unknown_units():
    """Unknown unit names are rejected."""
    with pytest.raises(ValueError, match="Unknown source unit"):
        units.convert_angle(1.0, "grad", "rad")
    with pytest.raises(ValueError, match="Unknown target unit"):
        units.convert_angle(1.0, "rad", "grad")
    with pytest.raises(ValueError, match="Unknown source unit"):
        units.convert_energy(1.0, "J", "MeV")
    with pytest.raises(ValueError, match="Unknown target unit"):
        units.convert_energy(1.0, "MeV", "GeV")


def test_array_conversion():
    """Test that conversions work with arrays."""
    angles = np.array([0.0, 90.0, 180.0])
    radians = units.convert_angle(angles, "deg", "rad")
    assert len(radians) == len(angles)
    assert np.allclose(radians, [0.0, np.pi / 2, np.pi])


if __name__ == "__main__":
    pytest.main([__file__])
