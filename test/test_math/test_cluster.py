"""Tests for recokit.math.cluster module."""

import numpy as np
import pytest

from recokit.math.cluster import antikt, kinematics


class TestKinematics:
    """Test the computation of the clustering variables."""

    def test_transverse(self):
        """Test a massless object in the transverse plane."""
        inv_kt2, rap, phi = kinematics(np.array([2.0, 0.0, 0.0, 2.0]))

        assert inv_kt2 == pytest.approx(0.25)
        assert rap == pytest.approx(0.0)
        assert phi == pytest.approx(0.0)

    def test_rapidity(self):
        """Test the rapidity of a massive object."""
        _, rap, _ = kinematics(np.array([1.0, 0.0, 1.0, 2.0]))
        assert rap == pytest.approx(0.5 * np.log(3.0))

        _, rap, _ = kinematics(np.array([1.0, 0.0, -1.0, 2.0]))
        assert rap == pytest.approx(-0.5 * np.log(3.0))

    def test_azimuth_range(self):
        """Test that the azimuth is mapped onto [0, 2pi)."""
        _, _, phi = kinematics(np.array([0.0, 1.0, 0.0, 1.0]))
        assert phi == pytest.approx(0.5 * np.pi)

        _, _, phi = kinematics(np.array([0.0, -1.0, 0.0, 1.0]))
        assert phi == pytest.approx(1.5 * np.pi)

    def test_along_beam(self):
        """Test an object with no transverse momentum."""
        inv_kt2, rap, _ = kinematics(np.array([0.0, 0.0, 5.0, 5.0]))

        assert np.isinf(inv_kt2)
        assert rap > 1e4


class TestAntikt:
    """Test the anti-kt jet clustering."""

    def test_collinear_merge(self):
        """Test that two nearby objects are merged into a single jet."""
        dphi = 0.05
        momenta = np.array(
            [
                [8.0, 0.0, 0.0, 8.0],
                [8.0 * np.cos(dphi), 8.0 * np.sin(dphi), 0.0, 8.0],
            ]
        )

        jets = antikt(momenta, 0.4)

        assert jets.shape == (1, 4)
        assert np.allclose(jets[0], momenta.sum(axis=0))

    def test_back_to_back(self):
        """Test that two back-to-back objects form two jets."""
        momenta = np.array([[20.0, 0.0, 0.0, 20.0], [-20.0, 0.0, 0.0, 20.0]])

        jets = antikt(momenta, 0.4)

        assert jets.shape == (2, 4)
        assert np.allclose(np.sort(jets[:, 0]), [-20.0, 20.0])

    def test_momentum_conservation(self):
        """Test that the inclusive jets conserve the total four-momentum."""
        rng = np.random.default_rng(seed=0)
        p3 = rng.normal(size=(20, 3))
        momenta = np.hstack([p3, np.linalg.norm(p3, axis=1, keepdims=True)])

        jets = antikt(momenta, 0.4)

        assert 1 <= len(jets) <= 20
        assert np.allclose(jets.sum(axis=0), momenta.sum(axis=0))

    def test_hard_object_absorbs_soft(self):
        """Test that a soft object within the radius joins the hard one."""
        momenta = np.array(
            [
                [50.0, 0.0, 0.0, 50.0],
                [0.5 * np.cos(0.3), 0.5 * np.sin(0.3), 0.0, 0.5],
                [0.5 * np.cos(2.0), 0.5 * np.sin(2.0), 0.0, 0.5],
            ]
        )

        jets = antikt(momenta, 0.4)

        assert len(jets) == 2
        hard = jets[np.argmax(jets[:, 3])]
        assert hard[3] == pytest.approx(50.5)
