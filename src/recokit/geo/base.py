"""Module with a general-purpose tracking geometry class."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .detector import MVTXDetector, TPCDetector

__all__ = ["Geometry"]


@dataclass
class Geometry:
    """Holds the geometry of the tracking detectors.

    Attributes
    ----------
    name : str
        Name of the detector
    tag : str
        Tag or label for the geometry instance
    version : str
        Version number of the geometry
    tpc : TPCDetector
        TPC readout layer geometry
    mvtx : MVTXDetector, optional
        MVTX barrel geometry
    """

    name: str
    tag: str
    version: str
    tpc: TPCDetector
    mvtx: Optional[MVTXDetector] = None

    def __init__(
        self,
        name: str,
        tag: str,
        version: str,
        tpc: Optional[Dict[str, Any]] = None,
        mvtx: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the detector geometry.

        Parameters
        ----------
        name : str
            Name of the detector
        tag : str
            Tag or label for the geometry instance
        version : str
            Version number of the geometry
        tpc : dict, optional
            TPC layer configuration. If not provided, the default layer
            boundaries are used.
        mvtx : dict, optional
            MVTX barrel configuration
        """
        self.name = name
        self.tag = tag
        self.version = str(version)

        # Load the TPC layer radii
        self.tpc = TPCDetector(**(tpc or {}))

        # Load the MVTX layers
        self.mvtx = MVTXDetector(**mvtx) if mvtx is not None else None

    @property
    def layer_offset(self) -> int:
        """Global index of the first TPC layer."""
        return self.tpc.layer_offset
