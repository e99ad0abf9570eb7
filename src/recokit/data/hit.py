"""Module with a data class object which represents a track hit."""

from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from recokit.utils.enums import DetectorRegionEnum
from recokit.utils.trkrdefs import get_layer, get_region

from .base import DataBase

__all__ = ["TrackHit"]


@dataclass(eq=False)
class TrackHit(DataBase):
    """Single detector measurement associated with a track.

    Attributes
    ----------
    key : Any
        Opaque identifier of the hit (typically a cluster key). It is carried
        through unchanged by all algorithms and never interpreted numerically.
    layer : int
        Global layer index of the hit
    position : np.ndarray
        (3) Global position of the hit in cm
    region : DetectorRegionEnum
        Type of detector region the hit belongs to
    """

    key: Any = None
    layer: int = -1
    position: np.ndarray = None
    region: DetectorRegionEnum = DetectorRegionEnum.OTHER

    # Attributes specifying coordinates
    _vec_attrs = ("position",)

    def __post_init__(self):
        """Checks the position and casts the region to its enumerated type."""
        if self.position is None:
            self.position = np.full(3, np.nan)
        super().__post_init__()
        assert self.position.shape == (3,), (
            f"Hit position must be a 3-vector, got shape {self.position.shape}."
        )
        self.region = DetectorRegionEnum(self.region)

    @classmethod
    def from_cluster_key(cls, key: int, position: np.ndarray) -> "TrackHit":
        """Builds a hit from a cluster key, decoding its layer and region.

        Parameters
        ----------
        key : int
            64-bit cluster key
        position : np.ndarray
            (3) Global position of the hit in cm

        Returns
        -------
        TrackHit
            Hit object
        """
        return cls(key=key, layer=get_layer(key), position=position, region=get_region(key))

    @property
    def radius(self) -> float:
        """Transverse radius of the hit."""
        return float(np.hypot(self.position[0], self.position[1]))

    @property
    def is_segmented(self) -> bool:
        """Whether the hit belongs to the radially segmented region."""
        return self.region == DetectorRegionEnum.RADIAL_SEGMENTED

    def moved(self, position: np.ndarray) -> "TrackHit":
        """Returns a copy of the hit at a new position, metadata unchanged."""
        return replace(self, position=position)
