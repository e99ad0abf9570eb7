"""Track-level reconstruction algorithms.

- :class:`ClusterRadialProjector` moves distortion-corrected TPC clusters
  back onto the nominal readout radius of their layer
- :class:`SensorPixelMapper` maps MVTX world/local coordinates onto
  sensors and pixels
"""

from .factories import reco_factory
from .mvtx_mapper import SensorPixelMapper
from .tpc_mover import ClusterRadialProjector
