"""Detector geometry of the tracking system.

- :class:`Geometry` groups the TPC and MVTX geometries of a detector
- :func:`geo_factory` builds a :class:`Geometry` from its YAML definition

Geometry objects are built once and passed explicitly to the components that
need them.
"""

from .base import Geometry
from .detector import MVTXDetector, MVTXLayerGeometry, SegmentationAlpide, TPCDetector
from .factories import geo_factory
