"""MVTX detector geometry classes."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

import numpy as np

from recokit.utils.globals import (
    MVTX_CENTRAL_CHIP,
    MVTX_CHIP_IN_MODULE,
    MVTX_N_CHIPS,
    MVTX_SENSOR_IN_CHIP,
)

from .alpide import SegmentationAlpide

__all__ = ["MVTXLayerGeometry", "MVTXDetector"]


def _frozen_array(values, shape) -> np.ndarray:
    """Casts a nested list to a read-only float64 array of a given shape."""
    array = np.array(values, dtype=np.float64)
    assert array.shape == shape, (
        f"Expected an array of shape {shape}, got {array.shape} instead."
    )
    array.flags.writeable = False

    return array


@dataclass(frozen=True, eq=False)
class MVTXLayerGeometry:
    """Barrel geometry of one MVTX layer.

    Each layer is made of `n_staves` staves arranged around the beam axis.
    Each inner barrel stave holds a single module of 9 chips along z.

    Attributes
    ----------
    layer : int
        Global layer index
    n_staves : int
        Number of staves in the layer
    radius : float
        Nominal radius of the layer in cm
    phi_step : float
        Azimuthal angle between two consecutive staves in radians. If zero,
        the staves are evenly distributed: `2pi / n_staves`.
    phi_tilt : float
        Tilt of the staves w.r.t. the radial direction in radians
    phi_0 : float
        Azimuthal angle of the first stave in radians
    sensor_in_chip : np.ndarray
        (3) Translation from the sensor-local frame to the chip-local frame
    chip_in_module : np.ndarray
        (9, 3) Position of each chip slot within a module
    segmentation : SegmentationAlpide
        Pixel segmentation of the chips
    """

    layer: int = 0
    n_staves: int = 12
    radius: float = 2.461
    phi_step: float = 0.0
    phi_tilt: float = 0.0
    phi_0: float = 0.0
    sensor_in_chip: np.ndarray = field(default=MVTX_SENSOR_IN_CHIP)
    chip_in_module: np.ndarray = field(default=MVTX_CHIP_IN_MODULE)
    segmentation: SegmentationAlpide = field(default_factory=SegmentationAlpide)

    def __post_init__(self):
        """Derives the stave spacing and casts the frame offsets to read-only
        arrays."""
        # Staves are evenly distributed in azimuth unless specified
        if self.phi_step == 0.0:
            assert self.n_staves > 0, (
                "Must provide a positive `phi_step` or a positive `n_staves`."
            )
            object.__setattr__(self, "phi_step", 2 * np.pi / self.n_staves)
        assert self.phi_step > 0.0, (
            f"The stave spacing must be positive, got {self.phi_step}."
        )

        # Frozen dataclass, attributes must be set through the object base
        object.__setattr__(
            self, "sensor_in_chip", _frozen_array(self.sensor_in_chip, (3,))
        )
        object.__setattr__(
            self, "chip_in_module", _frozen_array(self.chip_in_module, (MVTX_N_CHIPS, 3))
        )
        if isinstance(self.segmentation, dict):
            object.__setattr__(
                self, "segmentation", SegmentationAlpide(**self.segmentation)
            )

    @property
    def chip_pitch_z(self) -> float:
        """Distance between two consecutive chips along z."""
        return float(
            (self.chip_in_module[-1, 2] - self.chip_in_module[0, 2])
            / (MVTX_N_CHIPS - 1)
        )

    @property
    def central_chip(self) -> int:
        """Index of the chip centered at z = 0."""
        return MVTX_CENTRAL_CHIP

    @property
    def pixel_x(self) -> float:
        """Pixel pitch along the local x (row) axis."""
        return self.segmentation.pitch_row

    @property
    def pixel_z(self) -> float:
        """Pixel pitch along the local z (column) axis."""
        return self.segmentation.pitch_col

    @property
    def pixel_thickness(self) -> float:
        """Thickness of the sensitive layer."""
        return self.segmentation.sensor_thickness

    def stave_phi(self, stave: int) -> float:
        """Nominal azimuthal angle of the center of a stave.

        Parameters
        ----------
        stave : int
            Stave index

        Returns
        -------
        float
            Azimuthal angle in radians
        """
        return self.phi_0 + stave * self.phi_step


@dataclass
class MVTXDetector:
    """Handles the geometry of all the MVTX layers.

    Attributes
    ----------
    layers : List[MVTXLayerGeometry]
        (N_l) Geometry of each layer, in layer order
    """

    layers: List[MVTXLayerGeometry]

    def __init__(
        self,
        layers: List[Dict],
        sensor_in_chip: Optional[List[float]] = None,
        chip_in_module: Optional[List[List[float]]] = None,
        segmentation: Optional[Dict] = None,
    ):
        """Parse the MVTX detector configuration.

        Parameters
        ----------
        layers : List[dict]
            (N_l) Configuration of each layer (`layer`, `n_staves`, `radius`,
            `phi_step`, `phi_tilt`, `phi_0`). If `phi_step` is omitted, the
            staves are assumed to be evenly distributed in azimuth.
        sensor_in_chip : List[float], optional
            (3) Translation from the sensor-local to the chip-local frame,
            shared by all layers
        chip_in_module : List[List[float]], optional
            (9, 3) Position of each chip slot within a module, shared by all
            layers
        segmentation : dict, optional
            Pixel segmentation parameters shared by all layers
        """
        shared = {}
        if sensor_in_chip is not None:
            shared["sensor_in_chip"] = sensor_in_chip
        if chip_in_module is not None:
            shared["chip_in_module"] = chip_in_module
        seg = SegmentationAlpide(**(segmentation or {}))

        self.layers = []
        for cfg in layers:
            self.layers.append(MVTXLayerGeometry(**cfg, **shared, segmentation=seg))

        ids = [l.layer for l in self.layers]
        assert len(set(ids)) == len(ids), f"Duplicate MVTX layer indices: {ids}."

    def __len__(self) -> int:
        """Returns the number of MVTX layers."""
        return len(self.layers)

    def __iter__(self) -> Iterator[MVTXLayerGeometry]:
        """Iterates over the MVTX layers."""
        return iter(self.layers)

    def __getitem__(self, layer: int) -> MVTXLayerGeometry:
        """Fetches the geometry of a layer from its global index.

        Parameters
        ----------
        layer : int
            Global layer index

        Returns
        -------
        MVTXLayerGeometry
            Geometry of the layer
        """
        for geo in self.layers:
            if geo.layer == layer:
                return geo

        raise KeyError(
            f"Layer {layer} is not an MVTX layer. Available layers: "
            f"{[l.layer for l in self.layers]}."
        )
