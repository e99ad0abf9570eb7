"""Detector geometry components.

This currently handles:
- :class:`TPCDetector` the readout layer radii of the TPC
- :class:`MVTXDetector` the barrel geometry of the MVTX layers
- :class:`SegmentationAlpide` the pixel segmentation of an ALPIDE chip
"""

from .alpide import SegmentationAlpide
from .mvtx import MVTXDetector, MVTXLayerGeometry
from .tpc import TPCDetector
