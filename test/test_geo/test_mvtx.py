"""Tests for the MVTX barrel geometry."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from recokit.geo import MVTXDetector, MVTXLayerGeometry, SegmentationAlpide


@pytest.fixture(name="layers_cfg")
def fixture_layers_cfg():
    """Configuration of the three inner barrel layers."""
    return [
        {"layer": 0, "n_staves": 12, "radius": 2.461, "phi_tilt": 0.304},
        {"layer": 1, "n_staves": 16, "radius": 3.198, "phi_tilt": 0.304},
        {"layer": 2, "n_staves": 20, "radius": 3.993, "phi_tilt": 0.304},
    ]


class TestMVTXLayerGeometry:
    """Test the geometry of a single MVTX layer."""

    def test_defaults(self, layer_geo):
        """Test the default frame offsets and segmentation."""
        assert np.allclose(layer_geo.sensor_in_chip, [0.058128, -0.0005, 0.0])
        assert layer_geo.chip_in_module.shape == (9, 3)
        assert layer_geo.chip_pitch_z == pytest.approx(3.015)
        assert layer_geo.central_chip == 4
        assert isinstance(layer_geo.segmentation, SegmentationAlpide)

    def test_pixel_properties(self, layer_geo):
        """Test the pixel size shortcuts."""
        assert layer_geo.pixel_x == pytest.approx(26.88e-4)
        assert layer_geo.pixel_z == pytest.approx(29.24e-4)
        assert layer_geo.pixel_thickness == pytest.approx(30e-4)

    def test_stave_phi(self, layer_geo):
        """Test the azimuth of the staves."""
        assert layer_geo.stave_phi(0) == pytest.approx(0.0)
        assert layer_geo.stave_phi(3) == pytest.approx(0.5 * np.pi)

    def test_immutable(self, layer_geo):
        """Test that the layer geometry cannot be modified."""
        with pytest.raises(FrozenInstanceError):
            layer_geo.radius = 5.0
        with pytest.raises(ValueError):
            layer_geo.sensor_in_chip[0] = 1.0

    def test_segmentation_dict(self):
        """Test that the segmentation can be provided as a dictionary."""
        geo = MVTXLayerGeometry(segmentation={"n_rows": 1024, "n_cols": 512})

        assert geo.segmentation.n_rows == 1024
        assert geo.segmentation.n_cols == 512

    def test_derived_phi_step(self):
        """Test that the stave spacing follows from the number of staves."""
        geo = MVTXLayerGeometry(layer=1, n_staves=16, radius=3.198)

        assert geo.phi_step == pytest.approx(2 * np.pi / 16)
        assert MVTXLayerGeometry().phi_step == pytest.approx(2 * np.pi / 12)
        assert MVTXLayerGeometry(n_staves=16, phi_step=0.5).phi_step == 0.5

    @pytest.mark.parametrize(
        "n_staves, phi_step", [(0, 0.0), (-3, 0.0), (12, -0.5)]
    )
    def test_invalid_phi_step(self, n_staves, phi_step):
        """Test that layers without a positive stave spacing are rejected."""
        with pytest.raises(AssertionError):
            MVTXLayerGeometry(n_staves=n_staves, phi_step=phi_step)

    def test_wrong_shape(self):
        """Test that malformed frame offsets are rejected."""
        with pytest.raises(AssertionError):
            MVTXLayerGeometry(sensor_in_chip=[0.0, 0.0])


class TestMVTXDetector:
    """Test the geometry of the MVTX barrel."""

    def test_layers(self, layers_cfg):
        """Test the parsing of the layer configuration."""
        mvtx = MVTXDetector(layers_cfg)

        assert len(mvtx) == 3
        assert [geo.layer for geo in mvtx] == [0, 1, 2]
        assert mvtx[1].n_staves == 16
        assert mvtx[1].phi_step == pytest.approx(2 * np.pi / 16)

    def test_shared_parameters(self, layers_cfg):
        """Test that shared parameters are propagated to every layer."""
        mvtx = MVTXDetector(
            layers_cfg,
            sensor_in_chip=[0.1, 0.0, 0.0],
            segmentation={"pitch_row": 30e-4},
        )

        for geo in mvtx:
            assert geo.sensor_in_chip[0] == pytest.approx(0.1)
            assert geo.pixel_x == pytest.approx(30e-4)

    def test_explicit_phi_step(self, layers_cfg):
        """Test that an explicit stave spacing is kept."""
        layers_cfg[0]["phi_step"] = 0.5
        mvtx = MVTXDetector(layers_cfg)

        assert mvtx[0].phi_step == 0.5

    def test_missing_layer(self, layers_cfg):
        """Test that unknown layers are rejected."""
        mvtx = MVTXDetector(layers_cfg)
        with pytest.raises(KeyError):
            mvtx[3]

    def test_duplicate_layer(self, layers_cfg):
        """Test that duplicate layer indices are rejected."""
        with pytest.raises(AssertionError):
            MVTXDetector(layers_cfg + [layers_cfg[0]])
