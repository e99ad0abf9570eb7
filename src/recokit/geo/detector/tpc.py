"""TPC detector geometry classes."""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from recokit.utils.globals import (
    TPC_INNER_MIN_RADIUS,
    TPC_LAYER_OFFSET,
    TPC_MID_MIN_RADIUS,
    TPC_N_REGION_LAYERS,
    TPC_OUTER_MAX_RADIUS,
    TPC_OUTER_MIN_RADIUS,
)

__all__ = ["TPCDetector"]


@dataclass
class TPCDetector:
    """Handles the nominal readout radii of the TPC layers.

    The TPC is split into three radial regions (inner, mid and outer), each
    segmented into the same number of evenly spaced readout layers. By default,
    the nominal radius of a layer is the midpoint of its radial bin. The table
    can also be provided wholesale by an external geometry source.

    Attributes
    ----------
    layer_radii : np.ndarray
        (N_l) Read-only nominal readout radius of each TPC layer in cm
    layer_offset : int
        Global index of the first TPC layer
    boundaries : np.ndarray, optional
        (4) Region boundary radii in cm (inner/mid/outer minimum radii and
        outer maximum radius), if the table was built from them
    """

    layer_radii: np.ndarray
    layer_offset: int = TPC_LAYER_OFFSET
    boundaries: Optional[np.ndarray] = None

    def __init__(
        self,
        inner_min_radius: float = TPC_INNER_MIN_RADIUS,
        mid_min_radius: float = TPC_MID_MIN_RADIUS,
        outer_min_radius: float = TPC_OUTER_MIN_RADIUS,
        outer_max_radius: float = TPC_OUTER_MAX_RADIUS,
        layer_offset: int = TPC_LAYER_OFFSET,
        n_region_layers: int = TPC_N_REGION_LAYERS,
        layer_radii: Optional[List[float]] = None,
    ):
        """Build the layer radius table.

        Parameters
        ----------
        inner_min_radius : float, default 30.0
            Inner radius of the inner TPC region in cm
        mid_min_radius : float, default 40.0
            Inner radius of the mid TPC region in cm
        outer_min_radius : float, default 60.0
            Inner radius of the outer TPC region in cm
        outer_max_radius : float, default 76.4
            Outer radius of the outer TPC region in cm
        layer_offset : int, default 7
            Global index of the first TPC layer
        n_region_layers : int, default 16
            Number of readout layers in each TPC region
        layer_radii : List[float], optional
            Per-layer radii from an external geometry source. If provided,
            the region boundaries are ignored.
        """
        self.layer_offset = layer_offset
        if layer_radii is not None:
            self.boundaries = None
            radii = np.array(layer_radii, dtype=np.float64)
            assert radii.ndim == 1 and len(radii) > 0, (
                "The TPC layer radii must be provided as a non-empty list."
            )

        else:
            self.boundaries = np.array(
                [inner_min_radius, mid_min_radius, outer_min_radius, outer_max_radius],
                dtype=np.float64,
            )
            assert np.all(np.diff(self.boundaries) > 0), (
                "The TPC region boundaries must be strictly increasing. "
                f"Got {self.boundaries}."
            )
            radii = self.region_radii(self.boundaries, n_region_layers)

        radii.flags.writeable = False
        self.layer_radii = radii

    @staticmethod
    def region_radii(boundaries: np.ndarray, n_region_layers: int) -> np.ndarray:
        """Computes the midpoint radii of the layers of consecutive regions.

        Parameters
        ----------
        boundaries : np.ndarray
            (N_r + 1) Boundary radii of the regions
        n_region_layers : int
            Number of layers in each region

        Returns
        -------
        np.ndarray
            (N_r * n_region_layers) Layer radii
        """
        radii = []
        index = np.arange(n_region_layers, dtype=np.float64)
        for r_min, r_max in zip(boundaries[:-1], boundaries[1:]):
            spacing = (r_max - r_min) / n_region_layers
            radii.append(r_min + index * spacing + 0.5 * spacing)

        return np.concatenate(radii)

    @classmethod
    def from_radii(
        cls, layer_radii: List[float], layer_offset: int = TPC_LAYER_OFFSET
    ) -> "TPCDetector":
        """Builds a TPC layer table from an external list of layer radii.

        Parameters
        ----------
        layer_radii : List[float]
            (N_l) Radius of each layer, in layer order
        layer_offset : int, default 7
            Global index of the first TPC layer

        Returns
        -------
        TPCDetector
            TPC layer table
        """
        return cls(layer_offset=layer_offset, layer_radii=layer_radii)

    @property
    def num_layers(self) -> int:
        """Number of TPC readout layers."""
        return len(self.layer_radii)

    @property
    def layers(self) -> np.ndarray:
        """Global indices of the TPC layers."""
        return self.layer_offset + np.arange(self.num_layers)

    def contains_layer(self, layer: int) -> bool:
        """Checks whether a global layer index belongs to the TPC."""
        return 0 <= layer - self.layer_offset < self.num_layers

    def radius(self, layer: int) -> float:
        """Returns the nominal readout radius of a global layer index.

        Parameters
        ----------
        layer : int
            Global layer index

        Returns
        -------
        float
            Nominal readout radius in cm
        """
        index = layer - self.layer_offset
        if not 0 <= index < self.num_layers:
            raise IndexError(
                f"Layer {layer} is not a TPC layer. TPC layers span "
                f"[{self.layer_offset}, {self.layer_offset + self.num_layers})."
            )

        return float(self.layer_radii[index])
