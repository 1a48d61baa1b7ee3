"""Tests for flattree.math.kinematics module."""

import numpy as np
import pytest

from flattree.math import (
    C_LIGHT,
    ETA_SENTINEL,
    cos_theta,
    eta,
    kinematics,
    length_to_time,
    mass,
    phi,
    pt,
    rapidity,
)


class TestTransverse:
    """Test the transverse quantities."""

    def test_pt(self):
        """Test the transverse momentum of a simple vector."""
        assert pt(np.array([3.0, 4.0, 12.0, 13.0])) == 5.0

    def test_phi(self):
        """Test the azimuthal angle in each quadrant."""
        assert phi(np.array([1.0, 0.0, 0.0, 1.0])) == 0.0
        assert phi(np.array([0.0, 1.0, 0.0, 1.0])) == pytest.approx(np.pi / 2)
        assert phi(np.array([-1.0, 0.0, 0.0, 1.0])) == pytest.approx(np.pi)
        assert phi(np.array([0.0, -1.0, 0.0, 1.0])) == pytest.approx(-np.pi / 2)

    def test_phi_null_transverse(self):
        """Test that a vector along the beam has an azimuthal angle of 0."""
        assert phi(np.array([0.0, 0.0, 5.0, 5.0])) == 0.0


class TestPseudorapidity:
    """Test the pseudorapidity and rapidity, including along the beam axis."""

    def test_transverse_vector(self):
        """Test that a purely transverse vector has eta = y = 0."""
        vector = np.array([1.0, 1.0, 0.0, 2.0])
        assert eta(vector) == 0.0
        assert rapidity(vector) == 0.0

    def test_eta_value(self):
        """Test the pseudorapidity against its textbook definition."""
        vector = np.array([3.0, 4.0, 12.0, 13.0])
        expected = np.arcsinh(12.0 / 5.0)
        assert eta(vector) == pytest.approx(expected, rel=1e-12)

    def test_rapidity_value(self):
        """Test the rapidity against its textbook definition."""
        vector = np.array([3.0, 4.0, 12.0, 20.0])
        expected = 0.5 * np.log((20.0 + 12.0) / (20.0 - 12.0))
        assert rapidity(vector) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("pz, sign", [(5.0, 1.0), (-5.0, -1.0)])
    def test_beam_axis(self, pz, sign):
        """Test the sentinel values along the beam axis."""
        vector = np.array([0.0, 0.0, pz, 10.0])
        assert eta(vector) == sign * ETA_SENTINEL
        assert rapidity(vector) == sign * ETA_SENTINEL

    def test_null_vector(self):
        """Test that a null three-vector is treated as pointing forward."""
        vector = np.zeros(4)
        assert cos_theta(vector) == 1.0
        assert eta(vector) == ETA_SENTINEL
        assert rapidity(vector) == ETA_SENTINEL

    def test_negative_zero(self):
        """Test that z = -0.0 takes the positive sign."""
        vector = np.array([0.0, 0.0, -0.0, 0.0])
        assert eta(vector) == ETA_SENTINEL

    def test_symmetry(self):
        """Test that flipping z flips the sign of eta."""
        forward = np.array([1.0, 2.0, 3.0, 4.0])
        backward = np.array([1.0, 2.0, -3.0, 4.0])
        assert eta(forward) == pytest.approx(-eta(backward))


class TestMass:
    """Test the invariant mass."""

    def test_time_like(self):
        """Test the mass of a massive vector."""
        assert mass(np.array([3.0, 4.0, 12.0, 14.0])) == pytest.approx(
            np.sqrt(14.0**2 - 13.0**2)
        )

    def test_space_like(self):
        """Test that space-like vectors have a negative mass."""
        assert mass(np.array([3.0, 4.0, 0.0, 3.0])) == pytest.approx(-4.0)


def test_kinematics_bundle():
    """Test that the bundle matches the individual functions."""
    vector = np.array([3.0, 4.0, 12.0, 20.0])
    assert kinematics(vector) == (
        pt(vector),
        eta(vector),
        phi(vector),
        rapidity(vector),
    )


def test_length_to_time():
    """Test the conversion of a length-like time component."""
    assert length_to_time(0.0) == 0.0
    assert length_to_time(C_LIGHT) == pytest.approx(1.0e-3, rel=1e-12)
    assert length_to_time(299.792458) == 299.792458 * 1.0e-3 / C_LIGHT


def test_phi_negative_zero():
    """Test that a negated null vector has an azimuthal angle of 0."""
    assert phi(np.negative(np.zeros(4))) == 0.0
